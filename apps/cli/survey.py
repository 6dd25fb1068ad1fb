# apps/cli/survey.py
"""
Survey root words: how many real words can each one produce?

For every root in the word list, count the vocabulary words that pass the
length and composition rules. Roots with very few playable words make dull
rounds; use the CSV to prune start.txt.

--prune-out writes the surviving roots (at least --min-playable words each)
as a new word list.

Vocabulary comes from --vocab (one word per line) or, by default, from the
most frequent words wordfreq knows for --locale.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm
from wordfreq import top_n_list

from wordscramble.datasets import START_WORDS_PATH, load_word_list, pretty_summary, read_lines, validate_wordlist, write_lines
from wordscramble.harness import survey_root, write_csv, write_manifest
from wordscramble.harness.io import SURVEY_FIELDS, git_commit_or_unknown, timestamp_id


def main(argv=None):
    ap = argparse.ArgumentParser(description="wordscramble — rate root words by playable words")
    ap.add_argument("--words", default=str(START_WORDS_PATH), help="root word list")
    ap.add_argument("--vocab", help="vocabulary file (default: wordfreq top-N list)")
    ap.add_argument("--locale", default="en")
    ap.add_argument("--top-n", type=int, default=50000, help="size of the wordfreq vocabulary")
    ap.add_argument("--min-length", type=int, default=3)
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--prune-out", help="write the roots with at least --min-playable words to this file")
    ap.add_argument("--min-playable", type=int, default=10,
                    help="fewest playable words a root needs to survive --prune-out")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = ap.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    rep = validate_wordlist(args.words, min_length=args.min_length)
    print(pretty_summary(rep))

    roots = load_word_list(args.words)
    if args.vocab:
        vocab = read_lines(args.vocab)
    else:
        vocab = top_n_list(args.locale, args.top_n)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results = [
        survey_root(root, vocab, min_length=args.min_length)
        for root in tqdm(roots, ncols=80, desc="Surveying", unit="root", disable=not show_bar)
    ]

    playable = np.array([r["playable"] for r in results], dtype=float)
    if playable.size:
        print(f"roots={playable.size} | playable words: mean={playable.mean():.1f} "
              f"median={np.median(playable):.1f} min={int(playable.min())} "
              f"p10={np.percentile(playable, 10):.1f} max={int(playable.max())}")

    run_id = timestamp_id()
    outdir = Path(args.outdir)
    csv_path = outdir / f"survey_{run_id}.csv"
    manifest_path = outdir / f"survey_{run_id}_manifest.json"

    write_csv(results, str(csv_path), fields=SURVEY_FIELDS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "vocab_size": len(vocab),
        "num_cases": len(results),
    }, str(manifest_path))

    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")

    if args.prune_out:
        keep = [r["root_word"] for r in results if r["playable"] >= args.min_playable]
        print(f"Kept {len(keep)}/{len(results)} roots -> {write_lines(keep, args.prune_out)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
