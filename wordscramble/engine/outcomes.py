"""
Validation outcomes and the user-facing alerts attached to them.

A validation run ends in exactly one of:
  - Accepted(word)          : the normalized word may be recorded
  - Rejected(reason, word)  : the submission is refused for `reason`

Rejections are values, never exceptions, so callers can branch on them.
Two reasons are *silent* (too short, equal to the root): the caller should
ignore the submission instead of showing an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Reason(str, Enum):
    TOO_SHORT = "too_short"
    ROOT_WORD = "root_word"
    ALREADY_USED = "already_used"
    NOT_CONSTRUCTIBLE = "not_constructible"
    NOT_A_REAL_WORD = "not_a_real_word"

    @property
    def silent(self) -> bool:
        return self in (Reason.TOO_SHORT, Reason.ROOT_WORD)


@dataclass(frozen=True)
class Accepted:
    word: str

    @property
    def accepted(self) -> bool:
        return True


@dataclass(frozen=True)
class Rejected:
    reason: Reason
    word: str

    @property
    def accepted(self) -> bool:
        return False

    @property
    def silent(self) -> bool:
        return self.reason.silent


ValidationOutcome = Union[Accepted, Rejected]


@dataclass(frozen=True)
class Alert:
    """Title + message pair shown to the player for a visible rejection."""
    title: str
    message: str


# Fixed titles/messages per visible reason; "{root}" is filled in at render time.
_ALERTS = {
    Reason.ALREADY_USED: ("Word used already", "Be more original"),
    Reason.NOT_CONSTRUCTIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    Reason.NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, you know!"),
}


def alert_for(outcome: ValidationOutcome, root_word: str) -> Optional[Alert]:
    """
    Build the alert for `outcome`, or None when nothing should be shown
    (acceptances and silent rejections).
    """
    if not isinstance(outcome, Rejected) or outcome.silent:
        return None
    title, message = _ALERTS[outcome.reason]
    return Alert(title=title, message=message.format(root=root_word))
