"""
I/O utilities for harness runs.

Responsibilities:
- write_csv:      flatten replay or survey results into a tidy CSV (one row per root).
- write_manifest: dump a JSON manifest with config, hashes, and metadata.
- timestamp_id:   stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Sequence
import csv
import json
import subprocess
import datetime as dt

REPLAY_FIELDS = ["root_word", "word_count", "letter_total", "time_ms", "used_words", "rejected"]
SURVEY_FIELDS = ["root_word", "playable", "max_letters", "longest"]


def write_csv(results: List[Dict], path: str, fields: Sequence[str] = REPLAY_FIELDS) -> str:
    """
    Serialize a batch of results to CSV.

    List-valued columns are joined with spaces; for replay results the
    `rejected` column lists "word:reason" pairs from the history.

    Returns:
      The path written (string).
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=list(fields), extrasaction="ignore")
        w.writeheader()

        for r in results:
            row = dict(r)
            if "time_ms" in row:
                row["time_ms"] = round(float(row["time_ms"]), 3)
            if "used_words" in row:
                row["used_words"] = " ".join(row["used_words"])
            if "history" in row:
                row["rejected"] = " ".join(
                    f"{word}:{verdict}" for word, verdict in row["history"] if verdict != "accepted"
                )
            w.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest with run configuration and dataset validation summary.

    Typical keys:
      - run_id, git_commit
      - config: CLI args
      - wordlist: output of datasets.validate_wordlist(...)
      - num_cases: number of rows in this batch
    """
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, default=str)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
