import math

import chess


def format_info(depth: int, score: float, nodes: int, elapsed_ms: float,
                move: chess.Move, mate_score: float) -> str:
    """One UCI-style info line for a finished search, score in centipawns."""
    nps = int(nodes * 1000 / elapsed_ms) if elapsed_ms > 0 else 0
    move_str = move.uci() if move else "-"

    if not math.isfinite(score):
        score_str = "none"
    elif abs(score) > mate_score / 2:
        plies = int(round(mate_score - abs(score)))
        mate_in = (plies + 1) // 2
        score_str = f"mate {mate_in if score > 0 else -mate_in}"
    else:
        score_str = f"cp {int(round(score * 100))}"

    return f"info depth {depth} score {score_str} nodes {nodes} nps {nps} time {int(elapsed_ms)} pv {move_str}"
