import io

import pytest

from vm8.demos import (
    clock_and_latch_demo,
    clock_latch_demo,
    latch_clock_demo,
    latch_demo,
    latch_demo2,
    main,
    power_switch_demo,
    register_demo,
    tick_watcher,
    welcome,
)


def test_welcome():
    out = io.StringIO()
    welcome(out)
    assert out.getvalue() == "Velkommen til VM8!\n"


def test_main_default_runs_welcome(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Velkommen til VM8!\n"


def test_main_rejects_unknown_demo():
    with pytest.raises(SystemExit):
        main(["nonexistent"])


def test_clock_and_latch_demo_script():
    out = io.StringIO()
    clock_and_latch_demo(out)
    text = out.getvalue()
    assert text.startswith("=== CLOCK OG LATCH DEMO ===\n\n")
    assert "[1] Initielt: D = 0, EN = 0\n" in text
    assert "Latch output (skal fortsatt være 1): 1\n" in text
    assert text.count("⏫ RISING edge: oppdaterer latch med D = 0") == 2
    assert text.count("FALLING edge") == 1
    assert text.endswith("=== DEMO FERDIG ===\n")


def test_register_demo_script():
    out = io.StringIO()
    register_demo(out)
    lines = out.getvalue().splitlines()
    assert lines[0] == "1. Initial verdi (skal være 0): 0"
    assert lines[2] == "3. Etter load(0, 0) (skal fortsatt være 1): 1"
    assert len(lines) == 4


def test_latch_demo_reset():
    out = io.StringIO()
    latch_demo(io.StringIO("1\nt\nr\nq\n"), out)
    assert out.getvalue().rstrip().endswith("[verdi: 0] > === Avslutter ===")


def test_latch_demo_ends_at_end_of_input():
    out = io.StringIO()
    latch_demo(io.StringIO(""), out)
    assert out.getvalue().endswith("=== Avslutter ===\n")


def test_latch_demo2_marks_change():
    out = io.StringIO()
    latch_demo2(io.StringIO("1\nt\nq\n"), out)
    text = out.getvalue()
    assert "OUT: 1  <== endret" in text
    assert text.endswith("\n=== Avslutter ===\n")


def test_latch_demo2_unknown_command():
    out = io.StringIO()
    latch_demo2(io.StringIO("x\nq\n"), out)
    text = out.getvalue()
    assert "Ukjent kommando\n" in text
    assert "<== endret" not in text


def test_latch_clock_demo_ticks_each_line():
    out = io.StringIO()
    latch_clock_demo(io.StringIO("1\n\n\nq\n"), out)
    text = out.getvalue()
    assert text.count("RISING edge") == 2
    assert text.count("FALLING edge") == 1
    assert text.startswith("=== Latch koblet til klokke ===\n")
    assert "[clk: _ | D: 0 | Q: 0] > " in text


def test_tick_watcher_full_cycles():
    out = io.StringIO()
    tick_watcher(io.StringIO("\n\nq\n"), out)
    text = out.getvalue()
    assert text.count("Starter én pulssyklus:") == 2
    assert text.count("RISING edge") == 2
    assert text.count("FALLING edge") == 2
    assert text.endswith("=== AVSLUTTER ===\n")


def test_power_switch_demo_on_then_quit():
    out = io.StringIO()
    power_switch_demo(io.StringIO("o\nq\n"), out)
    text = out.getvalue()
    assert "Strømstatus: AV" in text
    assert "Strømstatus: PÅ" in text
    assert text.endswith("Avslutter demo...\n")


def test_power_switch_demo_reads_characters():
    out = io.StringIO()
    power_switch_demo(io.StringIO("of x q\n"), out)
    text = out.getvalue()
    assert text.count("Ugyldig valg.") == 1
    assert text.count("Strømstatus: PÅ") == 1
    assert text.endswith("Avslutter demo...\n")


def test_clock_latch_demo_manual_step():
    out = io.StringIO()
    clock_latch_demo(io.StringIO("1\ns\nq\n"), out)
    text = out.getvalue()
    assert "in: 1" in text
    assert "RISING edge" in text
    assert text.endswith("\n=== Avslutter ===\n")


def test_clock_latch_demo_disabled_cell_keeps_zero():
    out = io.StringIO()
    clock_latch_demo(io.StringIO("t\n1\ns\ns\nq\n"), out)
    status = [line for line in out.getvalue().splitlines() if line.startswith("[clk")]
    assert len(status) == 2
    assert all(line.endswith("out: 0]") for line in status)


def test_clock_latch_demo_unknown_command():
    out = io.StringIO()
    clock_latch_demo(io.StringIO("z\nq\n"), out)
    assert "Ukjent kommando" in out.getvalue()