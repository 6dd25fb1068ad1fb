from .state import RoundState, start_round, record, DEFAULT_ROOT_WORD
from .config import GameConfig
from .session import GameSession, Submission

__all__ = [
    "RoundState", "start_round", "record", "DEFAULT_ROOT_WORD",
    "GameConfig", "GameSession", "Submission",
]
