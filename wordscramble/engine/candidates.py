"""
Enumerate the words a root can produce.

Given:
  - a root word
  - a vocabulary (e.g., a dictionary word list)

Return:
  - the vocabulary entries that would pass the length and composition checks
    of the validator (realness is implied by membership in the vocabulary)

Used by the survey tool to rate root words and by the CLI for hints.
"""

from typing import Iterable, List

from .composition import is_constructible
from .normalize import normalize
from .validation import MIN_WORD_LENGTH


def constructible_words(root: str, vocabulary: Iterable[str],
                        min_length: int = MIN_WORD_LENGTH) -> List[str]:
    """
    Keep vocabulary words (length >= min_length, != root) spellable from `root`.

    Order is preserved as in `vocabulary`; duplicates are dropped.
    """
    root = normalize(root)
    out: List[str] = []
    seen = set()

    for w in vocabulary:
        w = normalize(w)

        # Basic hygiene: skip anything that isn't a clean alpha token
        if len(w) < min_length or w == root or not w.isalpha():
            continue
        if w in seen:
            continue
        if is_constructible(w, root):
            seen.add(w)
            out.append(w)

    return out
