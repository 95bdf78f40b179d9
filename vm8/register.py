"""A one-bit register on top of a D latch."""

from __future__ import annotations

from .latch import DLatch


class Register1bit:
    """Stores a single bit, written only while enabled."""

    def __init__(self) -> None:
        self._latch = DLatch()

    def load(self, value: bool, enable: bool) -> None:
        """Drive ``value`` into the register gated by ``enable``."""
        self._latch.update(value, enable)

    def value(self) -> bool:
        """The stored bit."""
        return self._latch.output()

    def reset(self) -> None:
        """Write a zero into the register."""
        self._latch.update(False, True)