"""A toggling clock signal with edge reporting."""

from __future__ import annotations

import sys
from enum import Enum, auto
from typing import TextIO

HIGH_SYMBOL = "▮"
LOW_SYMBOL = "_"


class Mode(Enum):
    """Ways a clock can be driven."""

    STEP = auto()
    RUN = auto()
    HALT = auto()


class ClockEdge(Enum):
    """The transition produced by a clock pulse."""

    NONE = auto()
    RISING = auto()
    FALLING = auto()


class Clock:
    """A clock line that flips level on every tick and reports the edge."""

    def __init__(self, frequency: float = 1.0, out: TextIO | None = None) -> None:
        self.frequency = frequency
        self.out = out
        self._state = False
        self._last_state = False

    def _stream(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def tick(self) -> ClockEdge:
        """Flip the level, announce the edge and return it."""
        self._state = not self._state
        if self._state:
            self._stream().write(f"CLK: {HIGH_SYMBOL}  ↗ RISING edge\n")
            return ClockEdge.RISING
        self._stream().write(f"CLK: {LOW_SYMBOL}  ↘ FALLING edge\n")
        return ClockEdge.FALLING

    def is_high(self) -> bool:
        """Whether the line is currently high."""
        return self._state

    def is_rising_edge(self) -> bool:
        """Whether the line went from low to high."""
        return not self._last_state and self._state

    def is_falling_edge(self) -> bool:
        """Whether the line went from high to low."""
        return self._last_state and not self._state

    def visual(self) -> str:
        """A one-character picture of the current level."""
        return HIGH_SYMBOL if self._state else LOW_SYMBOL