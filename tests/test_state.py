from app.state import MAX_INPUT_CHARS, InputBuffer, Mode, Session
from app.validation import clean_entry_name, is_printable_code


def test_buffer_append_and_remove():
    buf = InputBuffer(capacity=3)
    assert buf.append("a")
    assert buf.append("b")
    assert buf.text == "ab"
    assert buf.remove_last()
    assert buf.text == "a"
    assert len(buf) == 1


def test_buffer_respects_capacity():
    buf = InputBuffer(capacity=2)
    assert buf.append("a")
    assert buf.append("b")
    assert buf.is_full
    assert not buf.append("c")
    assert buf.text == "ab"


def test_buffer_remove_on_empty_is_noop():
    buf = InputBuffer()
    assert not buf.remove_last()
    assert len(buf) == 0


def test_default_capacity():
    assert InputBuffer().capacity == MAX_INPUT_CHARS == 499


def test_session_completion():
    s = Session(mode=Mode.SPRINT, sample_text="ab", start_time=0)
    assert s.active
    assert not s.is_complete
    s.typed.append("a")
    s.typed.append("x")
    assert s.is_complete


def test_printable_range():
    assert is_printable_code(ord(" "))
    assert is_printable_code(ord("}"))
    assert not is_printable_code(ord("~"))
    assert not is_printable_code(9)
    assert not is_printable_code(0)
    assert not is_printable_code(233)


def test_clean_entry_name():
    assert clean_entry_name("YOU") == "YOU"
    assert clean_entry_name("") is None
    assert clean_entry_name("x" * 32) is None
    assert clean_entry_name("x" * 31) == "x" * 31
    assert clean_entry_name("a\tb") is None
