"""Rules-engine interface consumed by the search, and its python-chess adapter.

The core never copies a position. It applies a move, recurses, and undoes the
move on one shared instance, so ``undo_move`` must restore the exact prior
state, including castling rights, en passant square and side to move.
"""

from typing import Iterator, List, Protocol, Tuple

import chess

# (piece_type, color, squares)
PieceList = Tuple[chess.PieceType, chess.Color, chess.SquareSet]


class Position(Protocol):
    def legal_moves(self) -> List[chess.Move]: ...
    def make_move(self, move: chess.Move) -> None: ...
    def undo_move(self, move: chess.Move) -> None: ...
    def is_in_checkmate(self) -> bool: ...
    def is_draw(self) -> bool: ...
    def is_in_check(self) -> bool: ...
    def is_white_to_move(self) -> bool: ...
    def piece_lists(self) -> Iterator[PieceList]: ...
    def is_castling(self, move: chess.Move) -> bool: ...
    def moved_piece_type(self, move: chess.Move) -> chess.PieceType: ...


class BoardPosition:
    """Position backed by a ``chess.Board``, mutated in place."""

    def __init__(self, board: chess.Board = None, fen: str = None):
        if board is None:
            board = chess.Board(fen) if fen else chess.Board()
        self.board = board

    def fen(self) -> str:
        return self.board.fen()

    def legal_moves(self) -> List[chess.Move]:
        return list(self.board.legal_moves)

    def make_move(self, move: chess.Move) -> None:
        self.board.push(move)

    def undo_move(self, move: chess.Move) -> None:
        self.board.pop()

    def is_in_checkmate(self) -> bool:
        return self.board.is_checkmate()

    def is_draw(self) -> bool:
        """Stalemate, dead position, fifty-move rule or a repeated position."""
        b = self.board
        return (
            b.is_stalemate()
            or b.is_insufficient_material()
            or b.halfmove_clock >= 100
            or b.is_repetition(2)
        )

    def is_in_check(self) -> bool:
        return self.board.is_check()

    def is_white_to_move(self) -> bool:
        return self.board.turn == chess.WHITE

    def piece_lists(self) -> Iterator[PieceList]:
        for color in (chess.WHITE, chess.BLACK):
            for pt in chess.PIECE_TYPES:
                yield pt, color, self.board.pieces(pt, color)

    def is_castling(self, move: chess.Move) -> bool:
        return self.board.is_castling(move)

    def moved_piece_type(self, move: chess.Move) -> chess.PieceType:
        return self.board.piece_type_at(move.from_square)


def as_position(position) -> Position:
    """Wrap a bare ``chess.Board``; pass anything else through."""
    if isinstance(position, chess.Board):
        return BoardPosition(position)
    return position
