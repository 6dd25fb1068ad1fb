import pytest
from wordscramble.dictionary import WordListChecker
from wordscramble.engine import (
    Accepted, Reason, Rejected, alert_for, constructible_words, is_constructible, normalize, validate,
)
from wordscramble.game import RoundState

ENGLISH = WordListChecker(["eel", "peel", "sleep", "worm", "silk", "milk", "slow", "lows"])


class CountingChecker(WordListChecker):
    def __init__(self, words):
        super().__init__(words)
        self.calls = []

    def lookup(self, word, locale):
        self.calls.append((word, locale))
        return super().lookup(word, locale)


# --- normalization ---
@pytest.mark.parametrize("raw,expected", [
    ("Worm", "worm"),
    ("  silk\n", "silk"),
    ("\tMILK \r\n", "milk"),
    ("", ""),
])
def test_normalize(raw, expected):
    assert normalize(raw) == expected
    assert normalize(normalize(raw)) == normalize(raw)


# --- composition golden table (duplicates respected) ---
@pytest.mark.parametrize("word,root,expected", [
    ("eel", "sleep", True),
    ("eels", "sleep", True),
    ("sleeps", "sleep", False),
    ("peel", "sleep", True),
    ("seeps", "sleep", False),
    ("worm", "silkworm", True),
    ("silkworms", "silkworm", False),
    ("mm", "silkworm", False),
    ("", "silkworm", True),
])
def test_is_constructible(word, root, expected):
    assert is_constructible(word, root) is expected


def test_validate_accepts_repeated_letters():
    state = RoundState("sleep")
    assert validate("eel", state, ENGLISH) == Accepted("eel")


def test_validate_not_constructible():
    state = RoundState("sleep")
    out = validate("seeps", state, ENGLISH)
    assert out == Rejected(Reason.NOT_CONSTRUCTIBLE, "seeps")
    assert not out.silent


def test_validate_eels_from_sleep_reaches_dictionary():
    # e,e,l,s all fit inside s,l,e,e,p; only the dictionary can refuse it
    state = RoundState("sleep")
    assert validate("eels", state, ENGLISH) == Rejected(Reason.NOT_A_REAL_WORD, "eels")
    assert validate("eels", state, WordListChecker(["eels"])) == Accepted("eels")


@pytest.mark.parametrize("raw,root,reason", [
    ("sleep", "sleep", Reason.ROOT_WORD),
    (" SLEEP\n", "sleep", Reason.ROOT_WORD),
    ("at", "silkworm", Reason.TOO_SHORT),
    ("   ", "silkworm", Reason.TOO_SHORT),
])
def test_validate_silent_noops(raw, root, reason):
    out = validate(raw, RoundState(root), ENGLISH)
    assert isinstance(out, Rejected) and out.reason is reason
    assert out.silent
    assert alert_for(out, root) is None


def test_validate_already_used():
    state = RoundState("silkworm", ("worm",))
    assert validate("Worm", state, ENGLISH) == Rejected(Reason.ALREADY_USED, "worm")


def test_validate_composition_before_realness():
    checker = CountingChecker([])
    state = RoundState("silkworm")
    assert validate("zzzzz", state, checker).reason is Reason.NOT_CONSTRUCTIBLE
    assert checker.calls == []  # dictionary never consulted

    out = validate("wors", state, checker)
    assert out == Rejected(Reason.NOT_A_REAL_WORD, "wors")
    assert checker.calls == [("wors", "en")]


def test_validate_passes_locale_to_checker():
    checker = WordListChecker(by_locale={"de": ["milk"]})
    state = RoundState("silkworm")
    assert validate("milk", state, checker, locale="de") == Accepted("milk")
    assert validate("milk", state, checker, locale="en").reason is Reason.NOT_A_REAL_WORD


def test_validate_custom_min_length():
    state = RoundState("silkworm")
    assert validate("silk", state, ENGLISH, min_length=5).reason is Reason.TOO_SHORT


def test_validate_is_pure():
    state = RoundState("silkworm", ("milk",))
    first = validate("silk", state, ENGLISH)
    second = validate("silk", state, ENGLISH)
    assert first == second == Accepted("silk")
    assert state == RoundState("silkworm", ("milk",))


def test_alert_messages():
    assert alert_for(Rejected(Reason.ALREADY_USED, "worm"), "silkworm").title == "Word used already"
    alert = alert_for(Rejected(Reason.NOT_CONSTRUCTIBLE, "seeps"), "sleep")
    assert alert.title == "Word not possible"
    assert alert.message == "You can't spell that word from 'sleep'!"
    alert = alert_for(Rejected(Reason.NOT_A_REAL_WORD, "wors"), "silkworm")
    assert alert.title == "Word not recognized"
    assert alert_for(Accepted("worm"), "silkworm") is None


def test_constructible_words():
    vocab = ["Worm", "silk", "silkworm", "milk", "worm", "ox", "slow", "zoo", "it's"]
    assert constructible_words("silkworm", vocab) == ["worm", "silk", "milk", "slow"]
