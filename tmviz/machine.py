"""Running a Turing machine one step at a time."""

from __future__ import annotations

from .parser import ACCEPT_STATE, BLANK, REJECT_STATE, Direction, MachineConfig
from .tape import Tape


class TuringMachine:
    """A machine instance: configuration, tape, head position and state."""

    def __init__(self, config: MachineConfig, input_string: str) -> None:
        if not config.states:
            raise ValueError("configuration has no working states")
        self.config = config
        self.state: str = config.states[0]
        self.tape = Tape(input_string)
        self.tape.append(BLANK)
        self.head = 0
        self.fault: str | None = None

    def halted(self) -> bool:
        """True once the machine is in the accept or reject state."""
        return self.state in (ACCEPT_STATE, REJECT_STATE)

    def accepted(self) -> bool:
        """True if the machine halted in the accept state."""
        return self.state == ACCEPT_STATE

    def step(self) -> bool:
        """Apply one transition; return True while the machine keeps running."""
        if self.halted():
            return False

        symbol = self.tape[self.head]
        rule = self.config.find_transition(self.state, symbol)
        if rule is None:
            raise LookupError(f"no transition for (q{self.state}, {symbol})")

        self.tape[self.head] = rule.write_symbol
        self.state = rule.next_state

        if rule.direction is Direction.RIGHT:
            if self.head == len(self.tape) - 1:
                self.tape.append(BLANK)
            self.head += 1
        elif rule.direction is Direction.LEFT:
            if self.head == 0:
                self.fault = "Error: Attempted to move Left past start of tape."
                self.state = REJECT_STATE
                return False
            self.head -= 1

        return not self.halted()

    def tape_line(self) -> str:
        """The tape with the head's cell bracketed."""
        return self.tape.render(self.head)

    def describe(self) -> str:
        """A multi-line summary of the current state and tape."""
        return f"\nState: q{self.state}\nTape: {self.tape_line()}\n"