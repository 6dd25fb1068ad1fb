# apps/cli/replay.py
"""
Replay a scripted list of submissions against one or more root words.

This script:
  1) Validates the root word list (counts + SHA, formatting rules).
  2) Reads the submissions file (one raw entry per line, kept verbatim).
  3) Replays the script against each root word and writes:
       - CSV:  per-root score + accepted/rejected words
       - JSON: manifest with config, word list report, git commit, etc.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordscramble.datasets import START_WORDS_PATH, WordListUnavailable, load_word_list, pretty_summary, read_lines, validate_wordlist
from wordscramble.dictionary import WordListChecker, create_checker, get_checker_ids
from wordscramble.harness import run_batch, write_csv, write_manifest
from wordscramble.harness.io import git_commit_or_unknown, timestamp_id


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble — replay scripted submissions")
    ap.add_argument("--submissions", required=True, help="file with one submission per line")
    ap.add_argument("--root", action="append",
                    help="root word to replay against (repeatable; default: every word in --words)")
    ap.add_argument("--words", default=str(START_WORDS_PATH), help="root word list")
    ap.add_argument("--sample", type=int, help="replay only the first K root words")
    ap.add_argument("--checker", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_checker_ids())})")
    ap.add_argument("--dictionary", help="word file for the 'wordlist' checker")
    ap.add_argument("--locale", default="en")
    ap.add_argument("--min-zipf", type=float, default=1.0)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))

    if args.checker == "wordlist":
        if not args.dictionary:
            ap.error("--dictionary is required with --checker wordlist")
        try:
            checker = WordListChecker.from_file(args.dictionary, locale=args.locale)
        except FileNotFoundError:
            print(f"Fatal: dictionary file not found: {args.dictionary}", file=sys.stderr)
            return 2
    else:
        checker = create_checker(args.checker, min_zipf=args.min_zipf)

    submissions = read_lines(args.submissions)
    try:
        roots = args.root or load_word_list(args.words)
    except WordListUnavailable as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 2

    results = run_batch(roots, submissions, checker=checker, locale=args.locale,
                        sample=args.sample)

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"replay_{run_id}.csv"
    manifest_path = outdir / f"replay_{run_id}_manifest.json"

    write_csv(results, str(csv_path))
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "checker_id": checker.id,
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
