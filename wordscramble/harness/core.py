"""
Batch harness primitives.

- replay_case:  play one scripted round (a root word + a list of submissions).
- run_batch:    replay the same script against many root words.
- survey_root:  count how many vocabulary words a root word can produce.

These functions are UI-agnostic so they can be reused by a CLI app, a
notebook, or future services without changes.
"""

from __future__ import annotations
import time
from typing import Dict, Iterable, List, Sequence

from wordscramble.engine import Accepted, MIN_WORD_LENGTH, DEFAULT_LOCALE, constructible_words, validate
from wordscramble.game.state import RoundState


def replay_case(
        root_word: str,
        submissions: Iterable[str],
        *,
        checker,
        locale: str = DEFAULT_LOCALE,
        min_length: int = MIN_WORD_LENGTH,
) -> Dict:
    """
    Feed `submissions` in order through the validator, recording acceptances.

    Returns:
        dict with keys:
            root_word (str), word_count (int), letter_total (int),
            time_ms (float), used_words (list[str], most recent first),
            history (list[(normalized, verdict)]) where verdict is
            "accepted" or the rejection reason value
    """
    state = RoundState(root_word=root_word.strip().lower())
    history: List[tuple] = []

    t0 = time.perf_counter()
    for raw in submissions:
        outcome = validate(raw, state, checker, locale=locale, min_length=min_length)
        if isinstance(outcome, Accepted):
            state = state.record(outcome.word)
            history.append((outcome.word, "accepted"))
        else:
            history.append((outcome.word, outcome.reason.value))
    dt = (time.perf_counter() - t0) * 1000.0

    return {
        "root_word": state.root_word,
        "word_count": state.word_count,
        "letter_total": state.letter_total,
        "time_ms": dt,
        "used_words": list(state.used_words),
        "history": history,
    }


def run_batch(
        root_words: Sequence[str],
        submissions: Sequence[str],
        *,
        checker,
        locale: str = DEFAULT_LOCALE,
        min_length: int = MIN_WORD_LENGTH,
        sample: int | None = None,
) -> List[Dict]:
    """
    Replay the same submissions against every root word. If 'sample' is
    provided, only the first K roots are used for quick runs.
    """
    pool = list(root_words)
    if sample is not None:
        pool = pool[:sample]
    return [
        replay_case(root, submissions, checker=checker, locale=locale, min_length=min_length)
        for root in pool
    ]


def survey_root(root_word: str, vocabulary: Sequence[str],
                min_length: int = MIN_WORD_LENGTH) -> Dict:
    """
    How rich is this root? Counts the vocabulary words it can produce and the
    letters they would score in total.
    """
    words = constructible_words(root_word, vocabulary, min_length=min_length)
    return {
        "root_word": root_word,
        "playable": len(words),
        "max_letters": sum(len(w) for w in words),
        "longest": max(words, key=len) if words else "",
        "words": words,
    }
