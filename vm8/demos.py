"""Interactive and scripted demonstrations of the clock and storage cells."""

from __future__ import annotations

import argparse
import sys
import threading
from dataclasses import dataclass, field
from typing import Callable, Iterator, Sequence, TextIO

from .clock import Clock, ClockEdge
from .latch import DLatch
from .power_switch import PowerSwitch
from .register import Register1bit

_RUN_PERIOD = 0.5
_IDLE_PERIOD = 0.05


def _read_line(stdin: TextIO) -> str | None:
    """One line without its newline, or None at end of input."""
    line = stdin.readline()
    if not line:
        return None
    return line[:-1] if line.endswith("\n") else line


def _bit(value: bool) -> int:
    return int(value)


def welcome(stdout: TextIO) -> None:
    """Print the machine's greeting."""
    stdout.write("Velkommen til VM8!\n")


def clock_and_latch_demo(stdout: TextIO) -> None:
    """A scripted walk through latching a bit and driving it from a clock."""
    clk = Clock(out=stdout)
    latch = DLatch()
    d = False
    en = False

    stdout.write("=== CLOCK OG LATCH DEMO ===\n\n")
    stdout.write(f"[1] Initielt: D = {_bit(d)}, EN = {_bit(en)}\n")
    stdout.write(f"Latch output: {_bit(latch.output())}\n\n")

    stdout.write("[2] Sett D = 1 og EN = 1 (aktivere skriving til latch)\n")
    d = en = True
    latch.update(d, en)
    stdout.write(f"Latch output: {_bit(latch.output())}\n\n")

    stdout.write("[3] Sett EN = 0 (låser verdien i latch)\n")
    en = False
    latch.update(d, en)
    stdout.write(f"Latch output (skal fortsatt være 1): {_bit(latch.output())}\n\n")

    stdout.write("[4] Nå kobler vi klokka til latch via en simulert rising edge...\n")
    stdout.write("Vi simulerer D = 0 og clock-edge.\n")
    d = False
    for _ in range(3):
        if clk.tick() is ClockEdge.RISING:
            stdout.write(f"⏫ RISING edge: oppdaterer latch med D = {_bit(d)}\n")
            latch.update(d, True)
        else:
            latch.update(d, False)
        stdout.write(f"Latch output: {_bit(latch.output())}\n\n")

    stdout.write("=== DEMO FERDIG ===\n")


@dataclass
class _ClockedCell:
    """A latch wired to a clock, shared between the console and the clock thread."""

    clock: Clock
    cell: DLatch
    stdout: TextIO
    input: bool = False
    enable: bool = True
    lock: threading.Lock = field(default_factory=threading.Lock)

    def step(self) -> None:
        with self.lock:
            self.clock.tick()
            if self.enable:
                self.cell.update(self.input, self.clock.is_high())
            level = "↑" if self.clock.is_high() else "_"
            self.stdout.write(
                f"[clk: {level}  in: {_bit(self.input)}  out: {_bit(self.cell.output())}]\n"
            )
            self.stdout.flush()


def clock_latch_demo(stdin: TextIO, stdout: TextIO) -> None:
    """Drive a latch from a clock, stepped by hand or running in the background."""
    bench = _ClockedCell(Clock(1.0, out=stdout), DLatch(), stdout)
    running = threading.Event()
    stopping = threading.Event()

    stdout.write("=== Klokke + Latch Demo ===\n\n")
    stdout.write("Kommandoer:\n")
    stdout.write("  0 / 1   → sett input-bit\n")
    stdout.write("  s       → ett klokkeslag\n")
    stdout.write("  r       → start kontinuerlig klokke\n")
    stdout.write("  p       → pause (stopp klokke)\n")
    stdout.write("  t       → toggle enable (koble klokka til/fra latch)\n")
    stdout.write("  q       → avslutt\n\n")

    def run_clock() -> None:
        while not stopping.is_set():
            if running.is_set():
                bench.step()
                stopping.wait(_RUN_PERIOD)
            else:
                stopping.wait(_IDLE_PERIOD)

    clock_thread = threading.Thread(target=run_clock, daemon=True)
    clock_thread.start()
    try:
        while True:
            with bench.lock:
                stdout.write("> ")
                stdout.flush()
            cmd = _read_line(stdin)
            if cmd is None or cmd == "q":
                break
            if cmd in ("0", "1"):
                with bench.lock:
                    bench.input = cmd == "1"
            elif cmd == "t":
                with bench.lock:
                    bench.enable = not bench.enable
            elif cmd == "s":
                bench.step()
            elif cmd == "r":
                running.set()
            elif cmd == "p":
                running.clear()
            else:
                with bench.lock:
                    stdout.write("Ukjent kommando\n")
    finally:
        running.clear()
        stopping.set()
        clock_thread.join()

    stdout.write("\n=== Avslutter ===\n")


def latch_clock_demo(stdin: TextIO, stdout: TextIO) -> None:
    """Tick a clock on every line of input, latching D while the clock is high."""
    clk = Clock(1.0, out=stdout)
    cell = DLatch()
    d_input = False

    stdout.write("=== Latch koblet til klokke ===\n")
    stdout.write("Trykk [0]/[1] for å endre D-input\n")
    stdout.write("Trykk [Enter] for å ta et klokkeslag\n")
    stdout.write("Trykk q for å avslutte\n\n")

    while True:
        level = "↑" if clk.is_high() else "_"
        stdout.write(f"[clk: {level} | D: {_bit(d_input)} | Q: {_bit(cell.output())}] > ")
        cmd = _read_line(stdin)
        if cmd is None or cmd == "q":
            break
        if cmd == "0":
            d_input = False
        elif cmd == "1":
            d_input = True
        clk.tick()
        cell.update(d_input, clk.is_high())


def latch_demo(stdin: TextIO, stdout: TextIO) -> None:
    """Store a bit in a latch by hand."""
    cell = DLatch()
    value = False

    stdout.write("=== 1-bit Celle Demo ===\n")
    stdout.write("Kommandoer:\n")
    stdout.write("  0   → sett inn 0\n")
    stdout.write("  1   → sett inn 1\n")
    stdout.write("  t   → toggle klokke\n")
    stdout.write("  r   → reset cella\n")
    stdout.write("  q   → avslutt\n\n")

    while True:
        stdout.write(f"[verdi: {_bit(cell.output())}] > ")
        cmd = _read_line(stdin)
        if cmd is None or cmd == "q":
            break
        if cmd == "0":
            value = False
        elif cmd == "1":
            value = True
        elif cmd == "t":
            cell.update(value, True)
            cell.update(value, False)
        elif cmd == "r":
            cell.reset()

    stdout.write("=== Avslutter ===\n")


def latch_demo2(stdin: TextIO, stdout: TextIO) -> None:
    """Store a bit in a latch by hand, marking when the output changes."""
    cell = DLatch()
    value = False
    enable = False
    prev_output = cell.output()

    stdout.write("=== 1-bit Celle Demo v2 ===\n\n")
    stdout.write("Kommandoer:\n")
    stdout.write("  0   → sett input = 0\n")
    stdout.write("  1   → sett input = 1\n")
    stdout.write("  t   → klokkeimpuls (enable høy → lav)\n")
    stdout.write("  r   → reset cella\n")
    stdout.write("  q   → avslutt\n\n")

    while True:
        output = cell.output()
        marker = "  <== endret" if output != prev_output else ""
        level = "↑" if enable else "_"
        stdout.write(f"{'IN: ':>4}{_bit(value)}   CLK: {level}   OUT: {_bit(output)}{marker}\n")
        stdout.write("> ")
        cmd = _read_line(stdin)
        prev_output = output

        if cmd is None or cmd == "q":
            break
        if cmd == "0":
            value = False
        elif cmd == "1":
            value = True
        elif cmd == "t":
            enable = True
            cell.update(value, enable)
            enable = False
            cell.update(value, enable)
        elif cmd == "r":
            cell.reset()
        else:
            stdout.write("Ukjent kommando\n")

    stdout.write("\n=== Avslutter ===\n")


def _choices(stdin: TextIO) -> Iterator[str]:
    """Single non-blank characters from the input, one at a time."""
    for line in iter(stdin.readline, ""):
        yield from (ch for ch in line if not ch.isspace())


def power_switch_demo(stdin: TextIO, stdout: TextIO) -> None:
    """Turn a power switch on and off from the keyboard."""
    power = PowerSwitch()

    stdout.write("=== INTERAKTIV STRØMBRYTER ===\n")
    stdout.write("Tast:\n")
    stdout.write("  o  → slå PÅ strømmen\n")
    stdout.write("  f  → slå AV strømmen (f for 'off')\n")
    stdout.write("  q  → avslutt\n\n")

    choices = _choices(stdin)
    while True:
        stdout.write(f"\n🔌 Strømstatus: {'PÅ' if power.is_on() else 'AV'}\n")
        stdout.write("Kommando [o/f/q]: ")
        choice = next(choices, None)
        if choice is None:
            break
        if choice == "o":
            power.turn_on()
        elif choice == "f":
            power.turn_off()
        elif choice == "q":
            stdout.write("Avslutter demo...\n")
            break
        else:
            stdout.write("Ugyldig valg.\n")


def register_demo(stdout: TextIO) -> None:
    """A scripted sequence of loads into a one-bit register."""
    reg = Register1bit()
    stdout.write(f"1. Initial verdi (skal være 0): {_bit(reg.value())}\n")

    reg.load(True, True)
    stdout.write(f"2. Etter load(1, 1): {_bit(reg.value())}\n")

    reg.load(False, False)
    stdout.write(f"3. Etter load(0, 0) (skal fortsatt være 1): {_bit(reg.value())}\n")

    reg.load(False, True)
    stdout.write(f"4. Etter load(0, 1): {_bit(reg.value())}\n")


def tick_watcher(stdin: TextIO, stdout: TextIO) -> None:
    """Run one full clock cycle for every line of input."""
    clk = Clock(out=stdout)

    stdout.write("=== KLOKKE-TICKDEMO ===\n")
    stdout.write("Trykk Enter for en pulssyklus. Skriv 'q' + Enter for å avslutte.\n")

    while True:
        stdout.write("> ")
        line = _read_line(stdin)
        if line is None:
            break
        if line == "q":
            stdout.write("=== AVSLUTTER ===\n")
            break
        stdout.write("Starter én pulssyklus:\n")
        clk.tick()
        clk.tick()


_DEMOS: dict[str, Callable[[TextIO, TextIO], None]] = {
    "cpu": lambda _stdin, stdout: welcome(stdout),
    "clock-and-latch": lambda _stdin, stdout: clock_and_latch_demo(stdout),
    "clock-latch": clock_latch_demo,
    "latch-clock": latch_clock_demo,
    "latch": latch_demo,
    "latch2": latch_demo2,
    "power-switch": power_switch_demo,
    "register": lambda _stdin, stdout: register_demo(stdout),
    "tick-watcher": tick_watcher,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo named on the command line."""
    parser = argparse.ArgumentParser(prog="vm8", description="VM8 logic demos.")
    parser.add_argument("demo", nargs="?", default="cpu", choices=sorted(_DEMOS))
    args = parser.parse_args(argv)
    _DEMOS[args.demo](sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())