# negabot/config.py
import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

logger = logging.getLogger(__name__)

# Defaults (pawn units). The king never enters material counting.
PIECE_VALUES = {
    "PAWN": 1.0,
    "KNIGHT": 3.0,
    "BISHOP": 3.0,
    "ROOK": 5.0,
    "QUEEN": 9.0,
    "KING": 0.0,
}

# Search depth indexed by min(total pieces on board, 11).
DEPTH_TABLE = (0, 0, 0, 10, 10, 9, 8, 7, 6, 5, 4, 3)

@dataclass
class SearchConfig:
    depth: Optional[int] = None  # None means pick from depth_table
    depth_table: Tuple[int, ...] = DEPTH_TABLE
    min_depth: int = 1
    low_time_ms: int = 10_000  # halve depth below this much remaining
    move_time_budget_ms: int = 3_000  # per-turn soft cutoff
    mate_score: float = 1000.0
    draw_contempt: float = 1.0  # draws count this much against the root side

@dataclass
class EvalConfig:
    piece_values: Dict[str, float] = field(default_factory=lambda: PIECE_VALUES.copy())
    advancement_bonus: float = 0.1  # per rank advanced, pawns and knights
    check_penalty: float = 1.0

@dataclass
class OrderingConfig:
    castling_bonus: float = 0.5
    king_move_penalty: float = 0.5
    jitter: float = 0.05

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ordering: OrderingConfig = field(default_factory=OrderingConfig)
    log_level: str = "INFO"

    @staticmethod
    def from_env(environ=None) -> "Config":
        env = os.environ if environ is None else environ
        cfg = Config()
        depth = env.get("NEGABOT_SEARCH_DEPTH")
        if depth:
            try:
                cfg.search.depth = max(int(depth), 1)
            except ValueError:
                logger.warning("Ignoring NEGABOT_SEARCH_DEPTH=%r: not an integer", depth)
        level = env.get("NEGABOT_LOG_LEVEL")
        if level:
            cfg.log_level = level.upper()
        return cfg


def configure_logging(cfg: Optional[Config] = None) -> None:
    """Apply the configured log level to the package logger.

    ``Bot`` calls this for an explicit config. Hosts that rely on the
    module-level ``CONFIG`` call it themselves at startup.
    """
    cfg = cfg or CONFIG
    level = logging.getLevelName(cfg.log_level)
    if not isinstance(level, int):
        logger.warning("Unknown log level %r, using INFO", cfg.log_level)
        level = logging.INFO
    logging.getLogger("negabot").setLevel(level)


# single globally importable config instance
CONFIG = Config.from_env()
