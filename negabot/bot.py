from typing import Optional, Union

import chess

from negabot.config import CONFIG, Config, configure_logging
from negabot.core.clock import Clock
from negabot.core.evaluator import Evaluator
from negabot.core.ordering import MoveOrderer
from negabot.core.position import Position, as_position
from negabot.core.search import SearchEngine


class Bot:
    """Fresh evaluator, orderer and search per turn; nothing carries over."""

    def __init__(self, cfg: Optional[Config] = None, depth: Optional[int] = None, rng=None):
        if cfg is not None:
            configure_logging(cfg)
        self.cfg = cfg or CONFIG
        self.depth = depth
        self.rng = rng

    def think(self, position: Union[Position, chess.Board], clock: Clock) -> chess.Move:
        evaluator = Evaluator(self.cfg.eval)
        orderer = MoveOrderer(evaluator, rng=self.rng, cfg=self.cfg.ordering)
        search = SearchEngine(evaluator, orderer, self.cfg.search, depth=self.depth)
        return search.think(as_position(position), clock)


def choose_move(position: Union[Position, chess.Board], clock: Clock) -> chess.Move:
    """Return the move to play this turn.

    ``position`` must have a legal move. It is left as it was found.
    """
    return Bot().think(position, clock)
