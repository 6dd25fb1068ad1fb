from __future__ import annotations
from typing import Dict, Tuple, Type

# ---- Global checker registry ----
REGISTRY: Dict[str, Type["RealWordChecker"]] = {}


def register(cls: Type["RealWordChecker"]) -> Type["RealWordChecker"]:
    """
    Decorator: @register on a checker class adds it to REGISTRY by its `id`.
    """
    cid = getattr(cls, "id", None)
    if not cid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if cid in REGISTRY:
        raise ValueError(f"Duplicate checker id: {cid}")
    REGISTRY[cid] = cls
    return cls


# ---- Base class that dictionary backends inherit ----
class RealWordChecker:
    """
    Spell-check oracle: is `word` a real word in `locale`?

    Verdicts are memoized per (word, locale) so a session always sees the
    same answer for the same pair, whatever the backend does underneath.
    The memo is unbounded and lives as long as the checker, so create one
    checker per game session (GameSession does) rather than one per process.
    """
    id = "base"
    name = "Base"

    def __init__(self):
        self._cache: Dict[Tuple[str, str], bool] = {}

    def is_real_word(self, word: str, locale: str = "en") -> bool:
        key = (word, locale)
        if key not in self._cache:
            self._cache[key] = bool(self.lookup(word, locale))
        return self._cache[key]

    def lookup(self, word: str, locale: str) -> bool:
        raise NotImplementedError("Override in subclass")
