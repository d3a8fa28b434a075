"""Negamax with alpha-beta pruning under a soft per-turn time budget.

The search works on one shared position, applying and undoing moves as it
descends. Depth comes from a table keyed by the number of pieces left on the
board and is halved when the game clock runs low. The clock is polled at the
top of every move loop; once the turn budget is spent each node stops after
its current child and returns the best it has seen.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Union

import chess

from negabot.config import CONFIG, SearchConfig
from negabot.core.clock import Clock
from negabot.core.evaluator import Evaluator
from negabot.core.ordering import MoveOrderer
from negabot.core.position import Position
from negabot.core.utils import format_info

logger = logging.getLogger(__name__)

INF = float("inf")


@dataclass(frozen=True)
class Found:
    move: chess.Move


@dataclass(frozen=True)
class NotFound:
    pass


NOT_FOUND = NotFound()
MoveChoice = Union[Found, NotFound]


@dataclass(frozen=True)
class SearchResult:
    score: float
    choice: MoveChoice = NOT_FOUND

    @property
    def move(self) -> Optional[chess.Move]:
        return self.choice.move if isinstance(self.choice, Found) else None


class SearchEngine:
    def __init__(self, evaluator: Optional[Evaluator] = None,
                 orderer: Optional[MoveOrderer] = None,
                 cfg: Optional[SearchConfig] = None,
                 depth: Optional[int] = None):
        self.cfg = cfg or CONFIG.search
        self.evaluator = evaluator or Evaluator()
        self.orderer = orderer or MoveOrderer(self.evaluator)
        self.depth = depth if depth is not None else self.cfg.depth
        self.nodes = 0

    def select_depth(self, position: Position, clock: Clock) -> int:
        """Deeper search with fewer pieces, halved when the clock runs low."""
        if self.depth is not None:
            return max(self.depth, self.cfg.min_depth)

        table = self.cfg.depth_table
        total = sum(len(squares) for _, _, squares in position.piece_lists())
        depth = table[min(total, len(table) - 1)]

        if clock.milliseconds_remaining < self.cfg.low_time_ms:
            depth //= 2

        return max(depth, self.cfg.min_depth)

    def think(self, position: Position, clock: Clock) -> chess.Move:
        """Pick a move for the side to move.

        The position must have at least one legal move; checkmate and
        stalemate are the caller's to detect before asking.
        """
        self.nodes = 0
        depth = self.select_depth(position, clock)
        ordered = self.orderer.order(position, position.legal_moves())

        result = self.negamax(position, depth, -INF, INF, 1, clock, ordered=ordered)

        if isinstance(result.choice, Found):
            move = result.choice.move
        else:
            move = ordered[0]
            logger.warning("No root move completed in time, falling back to %s", move.uci())

        logger.info(format_info(depth, result.score, self.nodes,
                                clock.milliseconds_elapsed_this_turn, move,
                                self.cfg.mate_score))
        return move

    def negamax(self, position: Position, depth: int, alpha: float, beta: float,
                color: int, clock: Clock, ply: int = 0,
                ordered: Optional[List[chess.Move]] = None) -> SearchResult:
        """Score ``position`` for the side to move.

        ``color`` is +1 where the root side is to move and -1 otherwise; it
        only decides who a draw counts against. ``ordered`` lets the root
        pass in the move list it already ranked.
        """
        self.nodes += 1

        if position.is_in_checkmate():
            return SearchResult(-(self.cfg.mate_score - ply))
        # repetition at the root is still a position to play from
        if ply > 0 and position.is_draw():
            return SearchResult(-self.cfg.draw_contempt * color)

        if depth <= 0:
            return SearchResult(self.evaluator.evaluate(position))

        if ordered is None:
            ordered = self.orderer.order(position, position.legal_moves())

        best_score = -INF
        choice: MoveChoice = NOT_FOUND

        for move in ordered:
            if self._out_of_time(clock):
                break

            position.make_move(move)
            child = self.negamax(position, depth - 1, -beta, -alpha, -color, clock, ply + 1)
            position.undo_move(move)

            # child was cut off before it looked at a single move
            if child.score == -INF:
                break

            score = -child.score
            if score > best_score:
                best_score = score
                choice = Found(move)

            alpha = max(alpha, best_score)
            if alpha >= beta:
                break

        return SearchResult(best_score, choice)

    def _out_of_time(self, clock: Clock) -> bool:
        return clock.milliseconds_elapsed_this_turn > self.cfg.move_time_budget_ms
