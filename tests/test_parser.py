import pytest

from tmviz.parser import (
    Direction,
    MachineConfig,
    ParseError,
    Transition,
    parse_config,
    parse_file,
)

A_STAR = """# accepts strings made only of a
input_alphabet = {a, b}
tape_alphabet = {a, b, _}
states = {q0, q@, q!}
q0 a -> q0 a R
q0 b -> q!
q0 _ -> q@
"""

HEADER = """input_alphabet = {a, b}
tape_alphabet = {a, b, _}
states = {q0}
"""


def test_parses_alphabets_and_states():
    config = parse_config(A_STAR)
    assert config.input_alphabet == ("a", "b")
    assert config.tape_alphabet == ("a", "b", "_")
    assert config.states == ("0",)


def test_parses_full_and_halt_rules():
    config = parse_config(A_STAR)
    assert len(config.transitions) == 3
    assert config.transitions[0] == Transition("0", "a", "0", "a", Direction.RIGHT)
    assert config.transitions[1] == Transition("0", "b", "!", "b", Direction.NONE)
    assert config.transitions[2] == Transition("0", "_", "@", "_", Direction.NONE)


def test_find_transition():
    config = parse_config(A_STAR)
    assert config.find_transition("0", "b").next_state == "!"
    assert config.find_transition("0", "z") is None
    assert config.find_transition("9", "a") is None


def test_input_alphabet_limited():
    config = parse_config("input_alphabet = {a,b,c,d,e,f,g,h,i,j}\n")
    assert config.input_alphabet == tuple("abcdefgh")


def test_tape_alphabet_limited():
    config = parse_config("tape_alphabet = {a,b,c,d,e,f,g,h,i,j}\n")
    assert config.tape_alphabet == tuple("abcdefghi")


def test_states_before_alphabets():
    with pytest.raises(ParseError, match="before alphabets in demo"):
        parse_config("states = {q0}\n", "demo")


def test_transition_before_states():
    text = "input_alphabet = {a}\ntape_alphabet = {a, _}\nq0 a -> q@\n"
    with pytest.raises(ParseError, match="before states"):
        parse_config(text)


@pytest.mark.parametrize(
    "rule, message",
    [
        ("q5 a -> q0 a R", "unknown start state 'q5'"),
        ("q0 a -> q7 a R", "unknown state 'q7'"),
        ("q0 c -> q0 a R", "Read character 'c'"),
        ("q0 a -> q0 c R", "Write character 'c'"),
        ("q0 a -> q0 a X", "Invalid direction 'X'"),
    ],
)
def test_rule_validation(rule, message):
    with pytest.raises(ParseError, match=message):
        parse_config(HEADER + rule + "\n")


def test_incomplete_table():
    text = HEADER + "q0 a -> q0 a R\n"
    with pytest.raises(ParseError, match="Incomplete"):
        parse_config(text)


def test_partial_rule_is_skipped():
    text = HEADER + "q0 a -> q0 a\nq0 a -> q@\nq0 b -> q!\nq0 _ -> q@\n"
    config = parse_config(text)
    assert [t.read_symbol for t in config.transitions] == ["a", "b", "_"]


def test_indented_lines_are_ignored():
    config = parse_config("   input_alphabet = {a}\n")
    assert config == MachineConfig()


def test_parse_file(tmp_path):
    path = tmp_path / "astar.tm"
    path.write_text(A_STAR, encoding="utf-8")
    assert parse_file(path) == parse_config(A_STAR)


def test_parse_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        parse_file(tmp_path / "missing.tm")