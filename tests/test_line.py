import pytest

from vidd.line import Line


def _chain(*texts):
    root = Line.create_chain()
    line = root.first()
    line.data = texts[0]
    for text in texts[1:]:
        line = line.insert_line()
        line.data = text
    return root


def _texts(root):
    out = []
    line = root.first()
    while line is not None:
        out.append(line.data)
        line = line.next()
    return out


def _numbers(root):
    out = []
    line = root.first()
    while line is not None:
        out.append(line.number)
        line = line.next()
    return out


def test_create_chain_has_one_isolated_line():
    root = Line.create_chain()
    assert root.is_id()
    head = root.first()
    assert head.is_head() and head.is_tail() and head.is_isolated()
    assert head.data == ""
    assert head.number == 0
    assert head.prev() is None


def test_insert_keeps_numbers_consecutive():
    root = _chain("a", "b", "c", "d")
    assert _texts(root) == ["a", "b", "c", "d"]
    assert _numbers(root) == list(range(4))


def test_insert_in_middle_renumbers_following_lines():
    root = _chain("a", "b", "c")
    new = root.first().insert_line()
    new.data = "x"
    assert _texts(root) == ["a", "x", "b", "c"]
    assert _numbers(root) == list(range(4))


def test_insert_line_up_at_head_makes_new_head():
    root = _chain("a", "b")
    old_head = root.first()
    new = old_head.insert_line_up()
    new.data = "top"
    assert root.first() is new
    assert old_head.prev() is new
    assert _texts(root) == ["top", "a", "b"]
    assert _numbers(root) == list(range(3))


def test_insert_line_up_on_root_inserts_at_head():
    root = _chain("a")
    new = root.insert_line_up()
    assert root.first() is new
    assert _texts(root) == ["", "a"]


def test_remove_middle_returns_next_and_renumbers():
    root = _chain("a", "b", "c")
    middle = root.first().next()
    replacement = middle.remove()
    assert replacement.data == "c"
    assert _texts(root) == ["a", "c"]
    assert _numbers(root) == list(range(2))


def test_remove_tail_returns_previous():
    root = _chain("a", "b")
    replacement = root.first().last().remove()
    assert replacement is root.first()
    assert replacement.is_tail()
    assert _texts(root) == ["a"]


def test_remove_head_shifts_numbers():
    root = _chain("a", "b", "c")
    replacement = root.first().remove()
    assert replacement.data == "b"
    assert replacement.is_head()
    assert _numbers(root) == list(range(2))


def test_remove_isolated_line_only_clears_it():
    root = _chain("text")
    head = root.first()
    assert head.remove() is head
    assert head.data == ""
    assert root.first() is head


def test_remove_root_is_noop():
    root = _chain("a")
    assert root.remove() is root
    assert _texts(root) == ["a"]


def test_skip_clamps_at_ends():
    root = _chain("a", "b", "c")
    head = root.first()
    tail = head.last()
    assert head.skip(100) is tail
    assert tail.skip(-100) is head
    assert head.skip(0) is head
    assert head.skip(1).data == "b"
    assert tail.skip(-1).data == "b"


def test_get_by_number_both_directions():
    root = _chain("a", "b", "c", "d")
    head = root.first()
    tail = head.last()
    assert head.get(tail.number) is tail
    assert tail.get(head.number) is head
    assert head.get(2).data == "c"
    assert head.get(999) is tail


def test_get_id_and_first_from_any_line():
    root = _chain("a", "b", "c")
    tail = root.first().last()
    assert tail.get_id() is root
    assert tail.first() is root.first()
    assert root.first().last() is tail


def test_split_at_moves_rest_to_new_line():
    root = _chain("hello world")
    head = root.first()
    new = head.split_at(5)
    assert head.data == "hello"
    assert new.data == " world"
    assert head.data + new.data == "hello world"
    assert head.next() is new


def test_is_empty():
    root = _chain("", "x")
    assert root.first().is_empty()
    assert not root.first().next().is_empty()


@pytest.mark.parametrize("text", ["   x", "x", "  \tabc"])
def test_first_char_finds_first_non_space(text):
    line = Line(text)
    index = line.first_char()
    assert text[:index].strip(" ") == ""
    assert text[index] != " "


def test_first_char_of_blank_line():
    assert Line("    ").first_char() == -1
    assert Line("").first_char() == -1