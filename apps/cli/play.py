# apps/cli/play.py
"""
Play wordscramble in the terminal.

Each line you type is one submission. Words must be spelled from the root
word's letters, be at least three letters long, be new this round, and be
real words. Commands:
  :score    show the current score board
  :restart  start a new round with a new root word
  :quit     leave (Ctrl-D works too)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from wordscramble.datasets import WordListUnavailable
from wordscramble.dictionary import WordListChecker, get_checker_ids
from wordscramble.engine import Accepted
from wordscramble.game import GameConfig, GameSession

PROMPT = "> "


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="wordscramble — spell words from a root word")
    ap.add_argument("--words", type=Path, help="root word list (default: bundled start.txt)")
    ap.add_argument("--checker", default="wordfreq",
                    help=f"dictionary backend (one of: {', '.join(get_checker_ids())})")
    ap.add_argument("--dictionary", type=Path,
                    help="word file for the 'wordlist' checker (one word per line)")
    ap.add_argument("--locale", default="en", help="dictionary language code")
    ap.add_argument("--min-zipf", type=float, default=1.0,
                    help="wordfreq checker: minimum Zipf frequency of a real word")
    ap.add_argument("--min-length", type=int, default=3, help="shortest acceptable word")
    ap.add_argument("--seed", type=int, help="RNG seed for reproducible root words")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return ap


def config_from_args(args: argparse.Namespace) -> GameConfig:
    options = {"min_zipf": args.min_zipf} if args.checker == "wordfreq" else {}
    return GameConfig(
        locale=args.locale,
        min_length=args.min_length,
        word_list_path=args.words,
        checker=args.checker,
        checker_options=options,
        seed=args.seed,
    )


def print_board(session: GameSession) -> None:
    snap = session.snapshot()
    print(f"Root word: {snap['root_word']}")
    for entry in snap["words"]:
        print(f"  ({entry['letters']}) {entry['word']}")
    print(f"Number of words: {snap['word_count']} | Total of letters: {snap['letter_total']}")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config = config_from_args(args)
    checker = None
    if args.checker == "wordlist":
        if not args.dictionary:
            print("--dictionary is required with --checker wordlist", file=sys.stderr)
            return 2
        try:
            checker = WordListChecker.from_file(args.dictionary, locale=args.locale)
        except FileNotFoundError:
            print(f"Fatal: dictionary file not found: {args.dictionary}", file=sys.stderr)
            return 2

    session = GameSession(config, checker=checker)
    try:
        session.start()
    except WordListUnavailable as e:
        print(f"Fatal: {e}", file=sys.stderr)
        return 2

    print_board(session)
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            print()
            break

        cmd = line.strip().lower()
        if cmd == ":quit":
            break
        if cmd == ":score":
            print_board(session)
            continue
        if cmd == ":restart":
            try:
                session.restart()
            except WordListUnavailable as e:
                print(f"Fatal: {e}", file=sys.stderr)
                return 2
            print_board(session)
            continue

        result = session.submit(line)
        if isinstance(result.outcome, Accepted):
            st = result.state
            print(f"+ {result.outcome.word} ({len(result.outcome.word)}) "
                  f"| words={st.word_count} letters={st.letter_total}")
        elif result.alert is not None:
            print(f"{result.alert.title}: {result.alert.message}")

    print_board(session)
    return 0


if __name__ == "__main__":
    sys.exit(main())
