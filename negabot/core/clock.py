"""Turn timing as seen by the search: read-only elapsed and remaining time."""

import time
from typing import Protocol


class Clock(Protocol):
    @property
    def milliseconds_elapsed_this_turn(self) -> float: ...

    @property
    def milliseconds_remaining(self) -> float: ...


class TurnClock:
    """Monotonic game clock owned by the host.

    The host calls ``start_turn`` before handing the clock to the search and
    ``end_turn`` afterwards. The search only reads the two properties.
    """

    def __init__(self, total_ms: float, now=time.monotonic):
        self._now = now
        self._remaining_ms = float(total_ms)
        self._turn_start = now()

    def start_turn(self) -> None:
        self._turn_start = self._now()

    def end_turn(self) -> float:
        """Charge this turn's elapsed time to the budget and return it."""
        spent = self.milliseconds_elapsed_this_turn
        self._remaining_ms = max(self._remaining_ms - spent, 0.0)
        self._turn_start = self._now()
        return spent

    @property
    def milliseconds_elapsed_this_turn(self) -> float:
        return (self._now() - self._turn_start) * 1000.0

    @property
    def milliseconds_remaining(self) -> float:
        return max(self._remaining_ms - self.milliseconds_elapsed_this_turn, 0.0)
