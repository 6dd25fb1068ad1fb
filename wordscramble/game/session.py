"""
Game session: the seam between a front end and the pure game logic.

A front end (the terminal app, a web view, a test) only needs to:
  - call start() / restart() to begin a round
  - call submit(raw_text) for every entry and render the returned Submission
  - call snapshot() whenever it wants the score board

The session owns the current RoundState and replaces it after every accepted
word; validation itself stays in wordscramble.engine.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from wordscramble.datasets.wordlist import load_word_list
from wordscramble.dictionary import RealWordChecker, create_checker
from wordscramble.engine import Accepted, Alert, ValidationOutcome, alert_for, validate
from .config import GameConfig
from .state import RoundState, start_round

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Submission:
    """Result of one submit() call."""
    outcome: ValidationOutcome
    alert: Optional[Alert]   # None for acceptances and silent rejections
    state: RoundState        # round state after the submission


class GameSession:
    def __init__(
            self,
            config: Optional[GameConfig] = None,
            *,
            checker: Optional[RealWordChecker] = None,
            word_list: Optional[Sequence[str]] = None,
            rng: Optional[random.Random] = None,
    ):
        self.config = config or GameConfig()
        self.checker = checker or create_checker(self.config.checker, **self.config.checker_options)
        self._word_list = list(word_list) if word_list is not None else None
        self.rng = rng or random.Random(self.config.seed)

        self._state: Optional[RoundState] = None
        self.draft = ""                      # text left in the input box
        self.last_alert: Optional[Alert] = None

    @property
    def state(self) -> RoundState:
        if self._state is None:
            raise RuntimeError("No round in progress; call start() first")
        return self._state

    def start(self) -> RoundState:
        """
        Begin a new round. Raises WordListUnavailable if the word list file
        cannot be read; no round is started in that case.
        """
        words = self._word_list
        if words is None:
            words = load_word_list(self.config.word_list_path)
        self._state = start_round(words, rng=self.rng, fallback=self.config.fallback_root)
        self.draft = ""
        self.last_alert = None
        return self._state

    restart = start

    def submit(self, raw: str) -> Submission:
        state = self.state
        outcome = validate(raw, state, self.checker,
                           locale=self.config.locale, min_length=self.config.min_length)
        alert = alert_for(outcome, state.root_word)

        if isinstance(outcome, Accepted):
            self._state = state.record(outcome.word)
            self.draft = ""
            self.last_alert = None
            logger.info("Recorded %r (%d words, %d letters)", outcome.word,
                        self._state.word_count, self._state.letter_total)
        else:
            # Rejected input stays in the box so the player can fix it.
            self.draft = raw
            if alert is not None:
                self.last_alert = alert

        return Submission(outcome=outcome, alert=alert, state=self._state)

    def snapshot(self) -> Dict:
        """JSON-serializable view of the current round."""
        state = self.state
        words: List[Dict] = [{"word": w, "letters": len(w)} for w in state.used_words]
        return {
            "root_word": state.root_word,
            "words": words,
            "word_count": state.word_count,
            "letter_total": state.letter_total,
        }
