"""negabot: a time-bounded negamax chess bot on top of python-chess."""

from negabot.bot import Bot, choose_move
from negabot.config import CONFIG, Config, configure_logging

__all__ = ["Bot", "choose_move", "CONFIG", "Config", "configure_logging"]
