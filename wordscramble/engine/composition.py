"""
Letter-composition checks for a candidate against the root word.

Conventions:
  - both strings are expected to be normalized already (see normalize.py)
  - multiplicity matters: every letter of the candidate consumes one
    occurrence of that letter from the root

Algorithm (single pass, mirrors drawing tiles from a bag):
  1) Count the root's letters into a pool.
  2) Walk the candidate; each character takes one instance from the pool.
     The first character with nothing left in the pool fails the check.
"""

from collections import Counter


def letter_pool(root: str) -> Counter:
    """Multiset of the root word's letters."""
    return Counter(root)


def is_constructible(word: str, root: str) -> bool:
    """
    Return True if `word` can be spelled from the letters of `root`.

    Examples:
      is_constructible("eel", "sleep")  -> True   (sleep has two e's)
      is_constructible("eels", "sleep") -> False  (only one s)
    """
    remaining = letter_pool(root)
    for ch in word:
        if remaining[ch] <= 0:
            return False  # no occurrence left for this letter
        remaining[ch] -= 1  # consume one instance
    return True
