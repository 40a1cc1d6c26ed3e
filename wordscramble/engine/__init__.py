from .validation import Rules, DEFAULT_RULES, normalize, is_original, is_possible, is_real
from .session import Session, new_session, record_guess
from .controller import (Accepted, Rejected, Ignored, RejectReason, GameController,
                         FALLBACK_ROOT_WORD, submit, start_game)
from .oracle import (DictionaryOracle, WordSetOracle, WordListOracle, WordfreqOracle,
                     create_oracle, get_oracle_ids)

__all__ = [
    "Rules", "DEFAULT_RULES", "normalize", "is_original", "is_possible", "is_real",
    "Session", "new_session", "record_guess",
    "Accepted", "Rejected", "Ignored", "RejectReason", "GameController",
    "FALLBACK_ROOT_WORD", "submit", "start_game",
    "DictionaryOracle", "WordSetOracle", "WordListOracle", "WordfreqOracle",
    "create_oracle", "get_oracle_ids",
]
