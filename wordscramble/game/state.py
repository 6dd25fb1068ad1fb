"""
Round state.

A round is one root word plus the words accepted so far (most recent first).
The score counters are derived from `used_words` on access, so they always
agree with it. States are immutable: `record` returns a new state and a new
round replaces the old one wholesale.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, replace
from typing import Optional, Sequence, Tuple

from wordscramble.datasets.wordlist import WordListUnavailable

logger = logging.getLogger(__name__)

# Root word used when the word list holds no usable entry.
DEFAULT_ROOT_WORD = "silkworm"


@dataclass(frozen=True)
class RoundState:
    root_word: str
    used_words: Tuple[str, ...] = ()

    @property
    def word_count(self) -> int:
        return len(self.used_words)

    @property
    def letter_total(self) -> int:
        return sum(len(w) for w in self.used_words)

    def record(self, word: str) -> "RoundState":
        """
        Prepend an accepted word. No legality re-check happens here: only
        call this with the word carried by an Accepted outcome.
        """
        return replace(self, used_words=(word,) + self.used_words)


def record(state: RoundState, word: str) -> RoundState:
    return state.record(word)


def start_round(
        word_list: Sequence[str],
        *,
        rng: Optional[random.Random] = None,
        fallback: Optional[str] = DEFAULT_ROOT_WORD,
) -> RoundState:
    """
    Start a fresh round with a root word drawn uniformly from `word_list`.

    Args:
      word_list : candidate root words (normalized here; blanks dropped)
      rng       : random source; pass a seeded random.Random for reproducible rounds
      fallback  : root word used when the list has no usable entry;
                  None makes that case an error instead

    Raises:
      WordListUnavailable if no usable entry exists and `fallback` is None.
    """
    rng = rng or random.Random()
    pool = [w.strip().lower() for w in word_list if w.strip()]

    if pool:
        root = pool[rng.randrange(len(pool))]
    elif fallback:
        logger.warning("Word list is empty; falling back to %r", fallback)
        root = fallback.strip().lower()
    else:
        raise WordListUnavailable("Word list has no usable entries and no fallback is set")

    logger.info("Started round with root word %r", root)
    return RoundState(root_word=root)
