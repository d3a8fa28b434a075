import chess

from negabot.config import CONFIG, EvalConfig
from negabot.core.position import Position

ADVANCING_PIECES = (chess.PAWN, chess.KNIGHT)


class Evaluator:
    """Material plus a small advancement bonus, minus a penalty for being in check.

    Scores are in pawn units. ``evaluate`` is signed for the side to move,
    ``evaluate_absolute`` for White. Checkmate is scored by the search, never
    here.
    """

    def __init__(self, cfg: EvalConfig = None):
        self.cfg = cfg or CONFIG.eval
        self.values = {
            pt: self.cfg.piece_values[chess.piece_name(pt).upper()]
            for pt in chess.PIECE_TYPES
        }

    def evaluate(self, position: Position) -> float:
        white_score, black_score = self._piles(position)
        if position.is_white_to_move():
            score = white_score - black_score
        else:
            score = black_score - white_score
        if position.is_in_check():
            score -= self.cfg.check_penalty
        return score

    def evaluate_absolute(self, position: Position) -> float:
        score = self.evaluate(position)
        return score if position.is_white_to_move() else -score

    def _piles(self, position: Position):
        """Raw (white, black) totals from one pass over the piece lists."""
        piles = {chess.WHITE: 0.0, chess.BLACK: 0.0}
        bonus = self.cfg.advancement_bonus

        for pt, color, squares in position.piece_lists():
            value = self.values[pt]
            pile = value * len(squares)

            if pt in ADVANCING_PIECES:
                for sq in squares:
                    rank = chess.square_rank(sq)
                    # ranks away from the owner's back rank
                    advanced = rank if color == chess.WHITE else 7 - rank
                    pile += bonus * advanced

            piles[color] += pile

        return piles[chess.WHITE], piles[chess.BLACK]
