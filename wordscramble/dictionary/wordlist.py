"""
Static word-list checker.

Strategy:
  - A word is real iff it appears in the list loaded for the requested locale.
  - Lists are normalized (strip + lowercase) on load; blank lines are ignored.

Notes:
  - Handy for tests and offline play: no third-party data needed.
  - Words registered without a locale apply to every locale.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Optional, Set

from wordscramble.datasets.io import read_lines
from wordscramble.engine.normalize import normalize
from .base import RealWordChecker, register

logger = logging.getLogger(__name__)


@register
class WordListChecker(RealWordChecker):
    id = "wordlist"
    name = "Static word list"

    def __init__(self, words: Optional[Iterable[str]] = None, *,
                 by_locale: Optional[Dict[str, Iterable[str]]] = None):
        super().__init__()
        self._any: Set[str] = _clean(words or ())
        self._by_locale: Dict[str, Set[str]] = {
            loc: _clean(ws) for loc, ws in (by_locale or {}).items()
        }

    @classmethod
    def from_file(cls, path: Path | str, locale: Optional[str] = None) -> "WordListChecker":
        """
        Load a newline-separated dictionary. Raises FileNotFoundError if missing.
        """
        words = read_lines(path)
        logger.info("Loaded %d dictionary lines from %s", len(words), path)
        if locale is None:
            return cls(words)
        return cls(by_locale={locale: words})

    def lookup(self, word: str, locale: str) -> bool:
        if not word:
            return False
        return word in self._any or word in self._by_locale.get(locale, ())


def _clean(words: Iterable[str]) -> Set[str]:
    return {normalize(w) for w in words if w.strip()}
