"""
Dataset validator for wordscramble.

What this module does:
- Validate a root word list (start.txt): one lowercase a–z word per line,
  each strictly longer than the minimum playable length.
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordscramble.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("wordscramble/datasets/data/start.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib


@dataclass
class WordListReport:
    """Diagnostics and metadata for one word list file."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    min_length: int      # minimum playable word length the roots must exceed
    count: int           # number of VALID words after cleaning
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, min_length: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line
      - must be lowercase a–z
      - must be longer than `min_length` (otherwise no sub-word exists)
      - blank lines are skipped (a trailing newline is normal), not counted

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w == w.lower() and w.isascii() and w.isalpha() and len(w) > min_length:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


# -----------------------------
# Public API
# -----------------------------

def validate_wordlist(path: str, min_length: int = 3) -> Dict:
    """
    Validate a root word list.

    Returns
    -------
    Dict
        JSON-serializable WordListReport. `passed` is strict: the file must
        exist, hold at least one valid word, and have no invalid or duplicate
        lines.
    """
    p = Path(path)
    if not p.exists():
        rep = WordListReport(str(path), False, min_length, 0, 0, 0, "", False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, min_length)
    unique = set(words)

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if len(words) != len(unique):
        # Surface a few examples to debug quickly
        dupes = sorted({w for w in words if words.count(w) > 1})[:5]
        issues.append(f"word list contains duplicate lines (e.g., {dupes})")

    rep = WordListReport(
        path=str(p),
        exists=True,
        min_length=min_length,
        count=len(words),
        unique_count=len(unique),
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for console/docs.

    Example:
        start.txt | words=98 (uniq=98, sha=abc123...) | invalid=0 | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"{Path(report['path']).name} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) "
        f"| invalid={report['invalid_lines']} | {status}"
    )
