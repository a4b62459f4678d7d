"""Reading Turing machine descriptions from text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

ACCEPT_STATE = "@"
REJECT_STATE = "!"
BLANK = "_"

MAX_INPUT_SYMBOLS = 8
MAX_TAPE_SYMBOLS = MAX_INPUT_SYMBOLS + 1
MAX_WORKING_STATES = 8
MAX_TRANSITIONS = 90

# " q%c %c -> q%c %c %c": each nested group is one more successful conversion.
_RULE = re.compile(
    r"\s*q(.)(?:\s*(\S)(?:\s*->\s*q(.)(?:\s*(\S)(?:\s*(\S))?)?)?)?",
    re.DOTALL,
)


class ParseError(ValueError):
    """Raised when a machine description is malformed or incomplete."""


class Direction(Enum):
    """Head movement after a transition."""

    RIGHT = "R"
    LEFT = "L"
    NONE = "N"


@dataclass(frozen=True)
class Transition:
    """One rule of the transition table."""

    current_state: str
    read_symbol: str
    next_state: str
    write_symbol: str
    direction: Direction


@dataclass(frozen=True)
class MachineConfig:
    """Alphabets, working states and transition table of a machine."""

    input_alphabet: tuple[str, ...] = ()
    tape_alphabet: tuple[str, ...] = ()
    states: tuple[str, ...] = ()
    transitions: tuple[Transition, ...] = ()

    def find_transition(self, state: str, symbol: str) -> Transition | None:
        """Return the first rule for ``state`` reading ``symbol``, if any."""
        return next(
            (
                t
                for t in self.transitions
                if t.current_state == state and t.read_symbol == symbol
            ),
            None,
        )


def _braced(line: str) -> str:
    """Return the text from the first '{' up to (not including) the next '}'."""
    start = line.find("{")
    if start == -1:
        return ""
    end = line.find("}", start)
    return line[start:] if end == -1 else line[start:end]


def _is_alnum(char: str) -> bool:
    return char.isascii() and char.isalnum()


def _collect(target: list[str], candidates, limit: int) -> None:
    for char in candidates:
        if len(target) >= limit:
            break
        target.append(char)


def _is_valid_state(state: str, states: list[str]) -> bool:
    return state in (ACCEPT_STATE, REJECT_STATE) or state in states


def _parse_rule(line: str) -> Transition | None:
    match = _RULE.match(line)
    groups = [g for g in match.groups() if g is not None] if match else []
    if len(groups) == 5:
        current, read, nxt, write, direction = groups
    elif len(groups) == 3:
        current, read, nxt = groups
        write, direction = read, Direction.NONE.value
    else:
        return None
    return current, read, nxt, write, direction


def parse_config(text: str, source: str = "<string>") -> MachineConfig:
    """Parse a machine description, raising ParseError on invalid input."""
    input_alphabet: list[str] = []
    tape_alphabet: list[str] = []
    states: list[str] = []
    transitions: list[Transition] = []
    input_read = tape_read = states_read = False

    for line in text.splitlines(keepends=True):
        if not line or line[0] == "#" or line[0].isspace():
            continue

        if "input_alphabet" in line:
            _collect(
                input_alphabet,
                (c for c in _braced(line) if _is_alnum(c)),
                MAX_INPUT_SYMBOLS,
            )
            input_read = True
        elif "tape_alphabet" in line:
            _collect(
                tape_alphabet,
                (c for c in _braced(line) if _is_alnum(c) or c == BLANK),
                MAX_TAPE_SYMBOLS,
            )
            tape_read = True
        elif "states" in line:
            if not (input_read and tape_read):
                raise ParseError(f"'states' defined before alphabets in {source}")
            segment = _braced(line)
            _collect(
                states,
                (
                    nxt
                    for char, nxt in zip(segment, segment[1:])
                    if char == "q" and nxt not in "@! },"
                ),
                MAX_WORKING_STATES,
            )
            states_read = True
        elif "-" in line and ">" in line:
            if not states_read:
                raise ParseError(
                    "Transition found before states/alphabets are defined!"
                )
            rule = _parse_rule(line)
            if rule is None:
                continue
            current, read, nxt, write, direction = rule
            if not _is_valid_state(current, states):
                raise ParseError(f"Transition uses unknown start state 'q{current}'")
            if not _is_valid_state(nxt, states):
                raise ParseError(f"Transition goes to unknown state 'q{nxt}'")
            if read not in tape_alphabet:
                raise ParseError(
                    f"Read character '{read}' (ASCII {ord(read)}) not in tape alphabet"
                )
            if write not in tape_alphabet:
                raise ParseError(f"Write character '{write}' not in tape alphabet")
            if direction not in {d.value for d in Direction}:
                raise ParseError(
                    f"Invalid direction '{direction}' in rule q{current} {read}"
                )
            if len(transitions) < MAX_TRANSITIONS:
                transitions.append(
                    Transition(current, read, nxt, write, Direction(direction))
                )

    required = len(states) * len(tape_alphabet)
    if len(transitions) != required:
        raise ParseError(
            "Transition Table Incomplete!\n"
            f"Expected {required} rules ({len(states)} states * "
            f"{len(tape_alphabet)} tape symbols), but found {len(transitions)}."
        )

    return MachineConfig(
        tuple(input_alphabet), tuple(tape_alphabet), tuple(states), tuple(transitions)
    )


def parse_file(path) -> MachineConfig:
    """Read and parse a machine description file."""
    path = Path(path)
    return parse_config(path.read_text(encoding="utf-8"), str(path))