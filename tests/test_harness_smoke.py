import csv
import json

from wordscramble.dictionary import WordListChecker
from wordscramble.harness import replay_case, run_batch, survey_root, write_csv, write_manifest
from wordscramble.harness.io import SURVEY_FIELDS

CHECKER = WordListChecker(["worm", "silk", "milk", "slow", "sleep", "eel", "peel"])


def test_replay_case_smoke():
    r = replay_case("silkworm", ["Worm", "worm", "at", "zebra", "wors", "silk"], checker=CHECKER)
    assert r["used_words"] == ["silk", "worm"]
    assert (r["word_count"], r["letter_total"]) == (2, 8)
    assert [v for _, v in r["history"]] == [
        "accepted", "already_used", "too_short", "not_constructible", "not_a_real_word", "accepted",
    ]


def test_run_batch_and_csv(tmp_path):
    results = run_batch(["silkworm", "sleep", "airplane"], ["worm", "eel", "peel"],
                        checker=CHECKER, sample=2)
    assert [r["root_word"] for r in results] == ["silkworm", "sleep"]
    assert results[1]["used_words"] == ["peel", "eel"]

    path = write_csv(results, str(tmp_path / "out" / "replay.csv"))
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["used_words"] == "worm"
    assert rows[0]["rejected"] == "eel:not_constructible peel:not_constructible"


def test_survey_root(tmp_path):
    r = survey_root("silkworm", ["worm", "silk", "milk", "slow", "sleep"])
    assert r["playable"] == 4
    assert r["max_letters"] == 16
    assert r["longest"] == "worm"

    path = write_csv([r], str(tmp_path / "survey.csv"), fields=SURVEY_FIELDS)
    with open(path, newline="", encoding="utf-8") as f:
        assert next(csv.DictReader(f))["playable"] == "4"


def test_write_manifest(tmp_path):
    path = write_manifest({"run_id": "x", "num_cases": 1, "path": tmp_path}, str(tmp_path / "m.json"))
    with open(path, encoding="utf-8") as f:
        assert json.load(f)["num_cases"] == 1
