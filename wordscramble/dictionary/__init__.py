from __future__ import annotations
from typing import List
from .base import RealWordChecker, REGISTRY, register

from .wordlist import WordListChecker
from .frequency import WordfreqChecker


def create_checker(checker_id: str, **options) -> RealWordChecker:
    """
    Factory: instantiate a registered checker by id.
    """
    try:
        cls = REGISTRY[checker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown checker id: {checker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls(**options)


def get_checker_ids() -> List[str]:
    """
    Return all registered checker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())


__all__ = [
    "RealWordChecker", "WordListChecker", "WordfreqChecker",
    "REGISTRY", "register", "create_checker", "get_checker_ids",
]
