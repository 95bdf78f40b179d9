"""A simple on/off power switch."""

from __future__ import annotations


class PowerSwitch:
    """A switch that is either on or off, starting off."""

    def __init__(self) -> None:
        self._on = False

    def turn_on(self) -> None:
        """Switch the power on."""
        self._on = True

    def turn_off(self) -> None:
        """Switch the power off."""
        self._on = False

    def toggle(self) -> None:
        """Flip the switch."""
        self._on = not self._on

    def is_on(self) -> bool:
        """Whether the power is on."""
        return self._on