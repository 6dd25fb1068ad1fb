"""
Word validation pipeline.

This module answers the question: "May this submission be added to the round?"
Checks run in a fixed order and stop at the first failure:

  1) normalize     : lowercase + trim
  2) length / self : shorter than `min_length`, or equal to the root (silent)
  3) originality   : already used this round
  4) composition   : not spellable from the root's letters
  5) realness      : the dictionary checker does not know the word

The dictionary lookup is the only external (and potentially slow) step, so it
runs last. Nothing here mutates the round state; recording an accepted word is
the caller's job.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterable

from .composition import is_constructible
from .normalize import normalize
from .outcomes import Accepted, Reason, Rejected, ValidationOutcome

if TYPE_CHECKING:
    from wordscramble.dictionary.base import RealWordChecker
    from wordscramble.game.state import RoundState

logger = logging.getLogger(__name__)

MIN_WORD_LENGTH = 3
DEFAULT_LOCALE = "en"


def is_original(word: str, used_words: Iterable[str]) -> bool:
    return word not in used_words


def validate(
        raw: str,
        state: "RoundState",
        checker: "RealWordChecker",
        *,
        locale: str = DEFAULT_LOCALE,
        min_length: int = MIN_WORD_LENGTH,
) -> ValidationOutcome:
    """
    Judge `raw` against the current round.

    Args:
      raw        : the submission exactly as typed
      state      : current RoundState (root word + used words)
      checker    : RealWordChecker consulted for the final realness step
      locale     : language passed to the checker
      min_length : shortest acceptable word

    Returns:
      Accepted(normalized) or Rejected(reason, normalized).
    """
    word = normalize(raw)

    if len(word) < min_length:
        return _reject(Reason.TOO_SHORT, word)
    if word == state.root_word:
        return _reject(Reason.ROOT_WORD, word)

    if not is_original(word, state.used_words):
        return _reject(Reason.ALREADY_USED, word)

    if not is_constructible(word, state.root_word):
        return _reject(Reason.NOT_CONSTRUCTIBLE, word)

    if not checker.is_real_word(word, locale):
        return _reject(Reason.NOT_A_REAL_WORD, word)

    logger.debug("accepted %r for root %r", word, state.root_word)
    return Accepted(word)


def _reject(reason: Reason, word: str) -> Rejected:
    logger.debug("rejected %r: %s", word, reason.value)
    return Rejected(reason, word)
