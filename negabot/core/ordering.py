"""Move ordering for alpha-beta.

Every candidate is scored by applying it, evaluating the resulting position
from the mover's side, and undoing it. Castling earns a bonus, other king
moves a penalty, and a small random jitter breaks ties so the bot does not
repeat itself. The first move of the ordering doubles as the fallback when
the search runs out of time before finishing any root child.
"""

import random
from typing import List, NamedTuple, Optional, Sequence

import chess

from negabot.config import CONFIG, OrderingConfig
from negabot.core.evaluator import Evaluator
from negabot.core.position import Position


class ScoredMove(NamedTuple):
    move: chess.Move
    score: float


class MoveOrderer:
    def __init__(
        self,
        evaluator: Optional[Evaluator] = None,
        rng: Optional[random.Random] = None,
        cfg: Optional[OrderingConfig] = None,
    ):
        self.evaluator = evaluator or Evaluator()
        self.rng = rng or random.Random()
        self.cfg = cfg or CONFIG.ordering

    def score_moves(self, position: Position, moves: Sequence[chess.Move]) -> List[ScoredMove]:
        scored = []
        for move in moves:
            # metadata must be read before the move is applied
            castling = position.is_castling(move)
            king_move = position.moved_piece_type(move) == chess.KING

            position.make_move(move)
            score = -self.evaluator.evaluate(position)
            position.undo_move(move)

            if castling:
                score += self.cfg.castling_bonus
            elif king_move:
                score -= self.cfg.king_move_penalty
            if self.cfg.jitter:
                score += self.rng.uniform(-self.cfg.jitter, self.cfg.jitter)

            scored.append(ScoredMove(move, score))
        return scored

    def order(self, position: Position, moves: Sequence[chess.Move]) -> List[chess.Move]:
        """Return a new list holding ``moves`` best-first."""
        scored = self.score_moves(position, moves)
        scored.sort(key=lambda sm: sm.score, reverse=True)
        return [sm.move for sm in scored]
