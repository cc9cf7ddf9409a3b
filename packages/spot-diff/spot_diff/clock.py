"""Clock - fixed-timestep time base for a round."""
from __future__ import annotations


class Clock:
    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        """Seconds since the clock started, in whole ticks."""
        return self._tick_number * self._dt

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number
