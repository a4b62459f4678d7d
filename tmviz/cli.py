"""Command-line visualiser that animates a machine run in the terminal."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from .machine import TuringMachine
from .parser import MachineConfig, ParseError, parse_file

_RULE_LINE = "=" * 43
_DASH_LINE = "-" * 43
_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_CLEAR_LINE = "\x1b[K"


def _braced_list(symbols) -> str:
    return "{ " + ", ".join(symbols) + " }"


def format_config(config: MachineConfig) -> str:
    """Describe alphabets, states and transitions as a banner."""
    lines = [
        _RULE_LINE,
        "   TURNING MACHINE CONFIGURATION LOADED    ",
        _RULE_LINE,
        f"Input Alphabet ({len(config.input_alphabet)}): "
        + _braced_list(config.input_alphabet),
        f"Tape Alphabet  ({len(config.tape_alphabet)}): "
        + _braced_list(config.tape_alphabet),
        f"Working States ({len(config.states)}): "
        + _braced_list(f"q{s}" for s in config.states),
        "(Note: the accept and reject states are implicit",
        "@ is the accept symbol",
        "! is the reject symbol)",
        "",
        f"Transitions Loaded ({len(config.transitions)}):",
        _DASH_LINE,
    ]
    lines.extend(
        f"(q{t.current_state}, {t.read_symbol}) -> "
        f"(q{t.next_state}, {t.write_symbol}, {t.direction.value})"
        for t in config.transitions
    )
    lines.append(_RULE_LINE)
    return "\n".join(lines) + "\n"


def format_step(step: int, machine: TuringMachine) -> str:
    """One status line of the animation."""
    return f"[Step: {step:03d}] State: q{machine.state} | Tape: {machine.tape_line()}"


def run(
    machine: TuringMachine,
    out: TextIO | None = None,
    delay: float = 0.5,
    limit: int = 1000,
) -> int:
    """Animate the machine until it halts or the step limit passes; return steps taken."""
    out = out if out is not None else sys.stdout
    out.write(_HIDE_CURSOR)
    steps = 0
    running = True
    while running:
        out.write(f"\r{_CLEAR_LINE}{format_step(steps, machine)}")
        out.flush()
        if delay > 0:
            time.sleep(delay)
        running = machine.step()
        if machine.fault and not running:
            out.write(f"{machine.fault}\n")
        steps += 1
        if steps > limit:
            out.write("\nSafety limit reached!")
            break

    out.write(f"\r{_CLEAR_LINE}{format_step(steps, machine)}")
    verdict = "ACCEPTED" if machine.accepted() else "REJECTED"
    out.write(f"\n\n>>> {verdict} <<<\n")
    out.write(f"{_SHOW_CURSOR}\n")
    out.flush()
    return steps


def main(argv=None) -> int:
    """Load a machine description, print it, and animate a run on the input."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print("Usage: tmviz <tm_config_file> <input_string>")
        return 1

    config_path, input_string = args[0], args[1]
    try:
        config = parse_file(config_path)
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error opening TM file: {exc.strerror or exc}", file=sys.stderr)
        return 1

    try:
        machine = TuringMachine(config, input_string)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    out = sys.stdout
    out.write(format_config(config))
    out.write(f"{_DASH_LINE}\n")
    out.write(f"INITIAL MACHINE STATE:{machine.describe()}")
    out.write(f"{_RULE_LINE}\n")
    out.write("\nStarting simulation...\n")

    try:
        run(machine, out)
    except LookupError as exc:
        out.write(f"{_SHOW_CURSOR}\n")
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())