"""
wordfreq-backed checker.

Strategy:
  - Ask wordfreq how common the word is in the requested language (Zipf
    scale: 0 = never seen, ~7 = "the").
  - Treat anything at or above `min_zipf` as a real word.

Notes:
  - `locale` is passed straight through as the wordfreq language code
    ("en", "de", ...); region suffixes like "en_US" are cut to the language.
  - Raising `min_zipf` filters out rare tokens, abbreviations and typos that
    made it into the frequency tables.
"""

from __future__ import annotations

from wordfreq import zipf_frequency

from .base import RealWordChecker, register

DEFAULT_MIN_ZIPF = 1.0


@register
class WordfreqChecker(RealWordChecker):
    id = "wordfreq"
    name = "wordfreq frequency tables"

    def __init__(self, min_zipf: float = DEFAULT_MIN_ZIPF):
        super().__init__()
        self.min_zipf = float(min_zipf)

    def lookup(self, word: str, locale: str) -> bool:
        if not word.isalpha():
            return False
        lang = locale.replace("-", "_").split("_")[0].lower()
        return zipf_frequency(word, lang) >= self.min_zipf
