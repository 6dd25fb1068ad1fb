"""
Root word source.

The list of possible root words is a newline-delimited text resource, read
once per round start. A list that cannot be read is a configuration fault,
not something a player can fix, so it surfaces as WordListUnavailable and is
never papered over with a default word.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from .io import START_WORDS_PATH, read_lines

logger = logging.getLogger(__name__)


class WordListUnavailable(RuntimeError):
    """The root word resource is missing or unreadable."""


def load_word_list(path: Optional[Path | str] = None) -> List[str]:
    """
    Load root words, one per line, lowercased; blank lines are dropped.

    Args:
      path : word list file; defaults to the bundled data/start.txt

    Raises:
      WordListUnavailable if the file is missing or cannot be decoded.
    """
    p = Path(path) if path is not None else START_WORDS_PATH
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise WordListUnavailable(f"Could not load word list from {p}") from e

    words = [ln.strip().lower() for ln in lines if ln.strip()]
    logger.info("Loaded %d root words from %s", len(words), p)
    return words
