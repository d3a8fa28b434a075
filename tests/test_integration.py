"""
Integration test suite for negabot.

Tests components working together end-to-end:
- choose_move on bare boards and wrapped positions
- Bot vs Bot game fragments
- Turn clock driving depth selection and the time cutoff
- Logging of the per-turn info line
"""

import logging
import random
import time

import chess

from negabot import Bot, Config, choose_move
from negabot.core.clock import TurnClock
from negabot.core.position import BoardPosition


def fast_config(depth=None):
    cfg = Config.from_env({})
    cfg.search.depth = depth
    return cfg


# ════════════════════════════════════════════════════════════════════════════
#  ENTRY POINT
# ════════════════════════════════════════════════════════════════════════════

class TestChooseMove:
    def test_opening_move_depth_two(self):
        """Starting position at depth 2: one of the twenty legal moves, inside the budget."""
        cfg = fast_config(depth=2)
        board = chess.Board()
        clock = TurnClock(60_000)
        start = time.monotonic()
        move = Bot(cfg, rng=random.Random(1)).think(board, clock)
        elapsed_ms = (time.monotonic() - start) * 1000
        assert move in list(board.legal_moves)
        assert len(list(board.legal_moves)) == 20
        # the cutoff is soft: allow one extra budget for the child in flight
        assert elapsed_ms < 2 * cfg.search.move_time_budget_ms

    def test_accepts_bare_board(self):
        board = chess.Board()
        # under the low-time threshold the full board searches one ply
        move = choose_move(board, TurnClock(5_000))
        assert move in board.legal_moves
        assert board.fen() == chess.STARTING_FEN

    def test_accepts_position(self):
        p = BoardPosition(fen="6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1")
        move = Bot(fast_config(depth=2)).think(p, TurnClock(60_000))
        assert move == chess.Move.from_uci("a1a8")

    def test_exhausted_clock_still_moves(self):
        """Every clock read advances ten seconds, so the budget is gone at once."""
        ticks = iter(range(0, 10**7, 10))
        clock = TurnClock(60_000, now=lambda: float(next(ticks)))
        board = chess.Board()
        move = Bot(fast_config(depth=4)).think(board, clock)
        assert move in board.legal_moves
        assert board.fen() == chess.STARTING_FEN

    def test_wins_hanging_queen(self):
        board = chess.Board("4k3/8/8/3q4/8/8/8/3RK3 w - - 0 1")
        move = Bot(fast_config(depth=2), rng=random.Random(5)).think(board, TurnClock(60_000))
        assert move == chess.Move.from_uci("d1d5")


# ════════════════════════════════════════════════════════════════════════════
#  GAME FRAGMENTS
# ════════════════════════════════════════════════════════════════════════════

class TestGamePlay:
    def test_bot_vs_bot_plays_legal_moves(self):
        cfg = fast_config(depth=2)
        white = Bot(cfg, rng=random.Random(1))
        black = Bot(cfg, rng=random.Random(2))
        board = chess.Board()
        clock = TurnClock(600_000)

        for ply in range(12):
            if board.is_game_over():
                break
            bot = white if board.turn == chess.WHITE else black
            fen = board.fen()
            clock.start_turn()
            move = bot.think(board, clock)
            clock.end_turn()
            assert board.fen() == fen
            assert move in board.legal_moves, f"illegal {move} at ply {ply}"
            board.push(move)

        assert len(board.move_stack) > 0

    def test_endgame_uses_deep_table_entry(self):
        """K+Q vs K: three pieces select the deepest entry, the budget keeps it bounded."""
        cfg = fast_config()
        cfg.search.move_time_budget_ms = 300
        board = chess.Board("k7/8/2K5/8/8/8/8/7Q w - - 0 1")
        clock = TurnClock(60_000)
        start = time.monotonic()
        move = Bot(cfg, rng=random.Random(3)).think(board, clock)
        assert move in board.legal_moves
        assert time.monotonic() - start < 30


# ════════════════════════════════════════════════════════════════════════════
#  LOGGING
# ════════════════════════════════════════════════════════════════════════════

class TestLogging:
    def test_info_line_logged(self, caplog):
        with caplog.at_level(logging.INFO, logger="negabot"):
            Bot(fast_config(depth=1)).think(chess.Board(), TurnClock(60_000))
        assert any(r.getMessage().startswith("info depth 1 ") for r in caplog.records)

    def test_fallback_warns(self, caplog):
        ticks = iter(range(0, 10**7, 10))
        clock = TurnClock(60_000, now=lambda: float(next(ticks)))
        with caplog.at_level(logging.WARNING, logger="negabot"):
            Bot(fast_config(depth=3)).think(chess.Board(), clock)
        assert "falling back" in caplog.text
