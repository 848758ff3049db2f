"""Amount entry by tapping fixed increments."""

from __future__ import annotations

import math
from collections.abc import Sequence

DEFAULT_INTERVALS: tuple[float, ...] = (1, 5, 10, 20, 50, 100)


class IntervalInput:
    """An amount built up by adding and subtracting preset intervals."""

    def __init__(
        self, amount: float = 0.0, intervals: Sequence[float] = DEFAULT_INTERVALS
    ) -> None:
        self.amount = amount
        self.intervals = tuple(intervals)

    def add(self, interval: float) -> float:
        self.amount += interval
        return self.amount

    def subtract(self, interval: float) -> float:
        """Subtract ``interval``; the amount never drops below zero."""
        self.amount = max(0.0, self.amount - interval)
        return self.amount

    def clear(self) -> float:
        self.amount = 0.0
        return self.amount

    def round(self) -> float:
        """Round to one decimal place."""
        self.amount = math.floor(self.amount * 10 + 0.5) / 10
        return self.amount

    @property
    def formatted(self) -> str:
        if self.amount == int(self.amount):
            return f"${self.amount:.0f}"
        return f"${self.amount:.2f}"
