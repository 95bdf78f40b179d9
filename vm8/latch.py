"""Gate-level SR and D latches built from NOR gates."""

from __future__ import annotations


def nor(a: bool, b: bool) -> bool:
    """The NOR of two signals."""
    return not (a or b)


class SRLatch:
    """A set/reset latch made of two cross-coupled NOR gates."""

    def __init__(self) -> None:
        self._q = False
        self._nq = True

    def set(self, s: bool, r: bool) -> None:
        """Propagate the set and reset inputs through the gates once."""
        self._q = nor(r, self._nq)
        self._nq = nor(s, self._q)

    def output(self) -> bool:
        """The Q output."""
        return self._q

    def reset(self) -> None:
        """Force the latch back to Q = 0."""
        self._q = False
        self._nq = True


class DLatch:
    """A data latch that follows its input while enabled."""

    def __init__(self) -> None:
        self._latch = SRLatch()

    def update(self, d: bool, enable: bool) -> None:
        """Drive the latch with data ``d`` gated by ``enable``."""
        self._latch.set(d and enable, (not d) and enable)

    def output(self) -> bool:
        """The stored bit."""
        return self._latch.output()

    def reset(self) -> None:
        """Clear the stored bit."""
        self._latch.reset()