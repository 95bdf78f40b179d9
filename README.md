# vm8

vm8 holds the first building blocks of a small 8-bit virtual machine, each one modelled
on the digital logic it is named after:

- `vm8.clock`: a `Clock` that flips between low and high on each `tick()`, writes a line
  describing the edge, and returns it as a `ClockEdge` (`RISING` or `FALLING`).
  `is_high()` gives the current level and `visual()` a one-character picture of it
  (`▮` or `_`). There is also a `Mode` enum (`STEP`, `RUN`, `HALT`).
- `vm8.latch`: a `nor` gate, an `SRLatch` built from two cross-coupled NOR gates, and a
  `DLatch` that follows its data input while enable is high and keeps its value while
  enable is low.
- `vm8.register`: `Register1bit`, a one-bit register built on a D latch.
- `vm8.power_switch`: `PowerSwitch`, a simple on/off switch with `turn_on()`,
  `turn_off()`, `toggle()` and `is_on()`.
- `vm8.demos`: console demos that put these parts together.

It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Library use

```python
from vm8.clock import Clock, ClockEdge
from vm8.latch import DLatch

clk = Clock()
bit = DLatch()

bit.update(True, True)    # enable high: the latch stores D
bit.update(False, False)  # enable low: the value is held
assert bit.output() is True

edge = clk.tick()         # writes "CLK: ▮  ↗ RISING edge" and returns the edge
assert edge is ClockEdge.RISING
```

`Clock` writes its edge messages to standard output unless it is given another stream:
`Clock(out=stream)`.

`Register1bit` wraps a D latch. `load(value, enable)` stores the value only while
enable is high, `value()` reads it, and `reset()` writes 0:

```python
from vm8.register import Register1bit

reg = Register1bit()
reg.load(True, True)
reg.load(False, False)
assert reg.value() is True
```

## Demos

Installing the package gives you the `vm8` command. Pass it the name of a demo:

```
vm8 latch
```

With no name it runs `cpu`. The demos are:

| Name              | What it does                                                                    |
|-------------------|---------------------------------------------------------------------------------|
| `cpu`             | Prints the machine's greeting.                                                  |
| `clock-and-latch` | A scripted walk through latching a bit and driving the latch from a clock.      |
| `clock-latch`     | A latch wired to a clock: `0`/`1` set the input, `s` steps the clock, `r` starts it ticking every half second in the background, `p` pauses it, `t` connects or disconnects the clock, `q` quits. |
| `latch-clock`     | Every line ticks the clock; `0`/`1` change D first, the latch is enabled while the clock is high, `q` quits. |
| `latch`           | A one-bit cell: `0`/`1` set the input, `t` pulses enable, `r` resets, `q` quits. |
| `latch2`          | The same cell, showing input, clock and output and marking when the output changed. |
| `power-switch`    | `o` turns the power on, `f` off, `q` quits.                                     |
| `register`        | A scripted sequence of loads into a one-bit register.                           |
| `tick-watcher`    | Every line runs one full clock cycle; `q` quits.                                |

The demos read commands from standard input and stop at `q` or at end of input. Their
prompts and messages are in Norwegian. Each demo is also a function in `vm8.demos` that
takes the output stream, and the input stream where it reads one, so it can be driven
from code: for example `latch_demo(stdin, stdout)`, `register_demo(stdout)` or
`welcome(stdout)`.

## What it does not do

There is no processor yet: nothing fetches, decodes or executes instructions, and the
`cpu` demo only prints a greeting. The parts are single bits; there are no multi-bit
registers, memory or buses.