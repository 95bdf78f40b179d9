"""Gate-level building blocks for a small 8-bit virtual machine: clock, latches, a register, a power switch and console demos."""

__version__ = "0.1.0"
__all__ = ["clock", "latch", "power_switch", "register", "demos"]