"""Core engine components: position adapter, clock, evaluator, move ordering and search."""

from .clock import Clock, TurnClock
from .evaluator import Evaluator
from .ordering import MoveOrderer, ScoredMove
from .position import BoardPosition, Position
from .search import SearchEngine, SearchResult, Found, NotFound
