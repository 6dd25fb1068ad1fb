from .validator import validate_wordlist, pretty_summary
from .io import read_lines, write_lines, START_WORDS_PATH
from .wordlist import load_word_list, WordListUnavailable

__all__ = [
    "validate_wordlist", "pretty_summary", "read_lines", "write_lines",
    "load_word_list", "WordListUnavailable", "START_WORDS_PATH",
]
