import pytest

from tmviz.tape import Tape


def test_holds_symbols_in_order():
    tape = Tape("abc")
    assert list(tape) == ["a", "b", "c"]
    assert len(tape) == 3


def test_empty_by_default():
    assert len(Tape()) == 0


def test_append_grows_right():
    tape = Tape("a")
    tape.append("_")
    assert list(tape) == ["a", "_"]
    assert tape[-1] == "_"


def test_setitem_replaces_cell():
    tape = Tape("ab")
    tape[1] = "x"
    assert tape[1] == "x"
    assert list(tape) == ["a", "x"]


def test_render_marks_head():
    assert Tape("ab").render(0) == "[a] b "
    assert Tape("ab").render(1) == " a [b]"


def test_render_length_invariant():
    tape = Tape("abcd")
    assert all(len(tape.render(i)) == 3 * len(tape) for i in range(len(tape)))


@pytest.mark.parametrize("bad", ["", "ab"])
def test_rejects_non_single_symbols(bad):
    tape = Tape("a")
    with pytest.raises(ValueError):
        tape.append(bad)
    with pytest.raises(ValueError):
        tape[0] = bad


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Tape("a")[3]