from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from wordscramble.engine.validation import DEFAULT_LOCALE, MIN_WORD_LENGTH
from .state import DEFAULT_ROOT_WORD


@dataclass
class GameConfig:
    """
    Knobs for a game session. CLIs fill this from argparse flags.

    word_list_path  : root word file; None = bundled data/start.txt
    checker         : registered dictionary backend id ("wordfreq", "wordlist")
    checker_options : keyword arguments for that backend's constructor
    fallback_root   : root used when the list is empty; None disables the fallback
    seed            : RNG seed for reproducible root word picks
    """
    locale: str = DEFAULT_LOCALE
    min_length: int = MIN_WORD_LENGTH
    fallback_root: Optional[str] = DEFAULT_ROOT_WORD
    word_list_path: Optional[Path] = None
    checker: str = "wordfreq"
    checker_options: Dict[str, Any] = field(default_factory=dict)
    seed: Optional[int] = None
