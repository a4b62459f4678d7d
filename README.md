# tmviz

tmviz reads a single-tape Turing machine from a small text file and runs it on
an input string. It draws each step in the terminal, showing the tape with the
read/write head marked. When the machine halts it reports whether the input
was accepted or rejected.

## Installation

```
pip install .
```

## Usage

```
tmviz <tm_config_file> <input_string>
```

The command starts by printing the machine it loaded: the input alphabet, the
tape alphabet, the working states and the transition table. Next it prints the
starting state and tape. Then it runs the machine and redraws a single terminal
line every half second, for example:

```
[Step: 004] State: q1 | Tape:  1  0 [_]
```

The cursor is hidden while the animation runs and shown again afterwards. The
run ends in one of these ways:

- The machine reaches the accept state `q@` and prints `>>> ACCEPTED <<<`.
- The machine reaches the reject state `q!` and prints `>>> REJECTED <<<`.
- The machine has taken more than 1000 steps. It prints
  `Safety limit reached!` and reports the result as rejected.

The command exits with status 1 in these cases:

- it is given fewer than two arguments (it prints a usage line);
- the file cannot be opened;
- the description is invalid;
- the machine reaches a state and symbol for which it has no rule.

The input string is placed on the tape as given. It is not checked against the
input alphabet.

## Machine file format

Lines that start with `#` or with whitespace are skipped. The definitions must
come in this order:

```
# Accepts strings over {0,1} that end in 1
input_alphabet = {0, 1}
tape_alphabet = {0, 1, _}
states = {q0, q1, q@, q!}

q0 0 -> q0 0 R
q0 1 -> q1 1 R
q0 _ -> q!
q1 0 -> q0 0 R
q1 1 -> q1 1 R
q1 _ -> q@
```

- `input_alphabet` collects up to 8 ASCII letters or digits.
- `tape_alphabet` collects up to 9 symbols: ASCII letters, digits and the
  blank `_`.
- `states` lists working states written as `q<char>`, up to 8 of them. The
  first one is the start state. The accept state `q@` and the reject state
  `q!` always exist and are not counted.
- A transition is written `q<state> <read> -> q<next> <write> <dir>`, where
  the direction is `R`, `L` or `N`. The short form `q<state> <read> -> q<next>`
  writes back the symbol it read and leaves the head where it is.

The transition table must have exactly (working states × tape symbols) rules.
Each of the following raises `tmviz.parser.ParseError`:

- `states` appears before both alphabets;
- a transition appears before `states`;
- a rule uses an unknown state or a symbol that is not in the tape alphabet;
- a rule has an invalid direction;
- the number of rules is wrong.

A blank cell is added whenever the head moves right past the end of the tape.
Moving left from the first cell puts the machine in the reject state and
prints `Error: Attempted to move Left past start of tape.`

## Using it from Python

```python
from tmviz.parser import parse_file
from tmviz.machine import TuringMachine

config = parse_file("ends_in_one.tm")
machine = TuringMachine(config, "0101")
while machine.step():
    pass
print(machine.accepted(), machine.tape_line())
```

- `tmviz.parser`
  - `parse_config(text, source)` parses a description held in a string.
  - `parse_file(path)` reads and parses a file.
  - Both return a frozen `MachineConfig` holding `input_alphabet`,
    `tape_alphabet`, `states` and `transitions`.
  - `MachineConfig.find_transition(state, symbol)` returns the matching
    `Transition`, or `None` if there is none.
- `tmviz.tape.Tape` is a growable sequence of one-character cells.
  `render(head)` draws it with the head's cell in brackets.
- `tmviz.machine.TuringMachine(config, input_string)`
  - `step()` applies one rule and returns `True` while the machine is still
    running. It raises `LookupError` when no rule matches.
  - `halted()` and `accepted()` report whether the machine has stopped and
    whether it accepted.
  - `tape_line()` and `describe()` format the current tape and state.
- `tmviz.cli`
  - `format_config(config)` builds the configuration banner.
  - `format_step(step, machine)` builds one status line.
  - `run(machine, out=None, delay=0.5, limit=1000)` runs the animated loop
    on any text stream (standard output by default) and returns the number of
    steps taken.

## Running the tests

```
pip install ".[test]"
pytest
```