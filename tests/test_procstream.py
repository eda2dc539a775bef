import time

from vidd.procstream import Process


def test_started_process_is_truthy():
    with Process(["true"]) as proc:
        assert proc.__bool__() is True
        assert proc.read_all_lines() == [""]


def test_read_all_lines_from_echo():
    with Process(["echo", "hello"]) as proc:
        assert proc.read_all_lines() == ["hello", ""]


def test_arguments_are_joined_with_spaces():
    with Process(["echo", "a", "b"]) as proc:
        assert proc.command == "echo a b"
        assert proc.read_all_lines() == ["a b", ""]


def test_write_and_read_back_through_cat():
    with Process(["cat"]) as proc:
        proc.write("first\nsecond\n")
        proc.end_write()
        assert proc.read_all_lines() == ["first", "second", ""]


def test_write_bytes():
    with Process(["cat"]) as proc:
        proc.write(b"raw")
        proc.end_write()
        assert proc.read_all_lines() == ["raw"]


def test_read_returns_bytes():
    with Process(["printf", "xyz"]) as proc:
        assert proc.read(3) == b"xyz"


def test_read_lines_collects_remainder_after_exit():
    with Process(["printf", "'one\\ntwo\\nthree'"]) as proc:
        lines = []
        deadline = time.monotonic() + 10
        while "three" not in lines and time.monotonic() < deadline:
            lines.extend(proc.read_lines())
            time.sleep(0.01)
        assert lines == ["one", "two", "three"]


def test_is_open_while_running_and_closed_after_close():
    proc = Process(["cat"])
    assert proc.is_open() is True
    proc.close()
    assert proc.is_open() is False


def test_close_interrupts_long_running_command():
    proc = Process(["sleep", "30"])
    start = time.monotonic()
    proc.close()
    assert proc.is_open() is False
    assert time.monotonic() - start < 20


def test_read_ready_after_output():
    with Process(["echo", "ready"]) as proc:
        deadline = time.monotonic() + 10
        while not proc.read_ready() and time.monotonic() < deadline:
            time.sleep(0.01)
        assert proc.read_ready() is True
        assert proc.read_all_lines()[0] == "ready"