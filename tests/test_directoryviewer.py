import pytest

from vidd.directoryviewer import DirectoryViewer
from vidd.filesystem import FileType, real_path

NAMES = [f"f{i}" for i in range(10)]


@pytest.fixture
def listing(tmp_path):
    for name in reversed(NAMES):
        (tmp_path / name).write_text("text\n")
    return tmp_path


def in_view(dv):
    return dv.view <= dv.ptr < dv.view + dv.height


def test_loads_sorted_files(listing):
    calls = []
    dv = DirectoryViewer(str(listing), 4, lambda: calls.append(1))
    assert [f.name for f in dv.files] == NAMES
    assert dv.path == real_path(str(listing))
    assert (dv.ptr, dv.view) == (0, 0)
    assert calls == [1]
    assert all(f.type is FileType.TEXT and f.has_permission for f in dv.files)


def test_directory_entry_type(tmp_path):
    (tmp_path / "sub").mkdir()
    dv = DirectoryViewer(str(tmp_path), 4)
    assert dv.selected_file().type is FileType.DIRECTORY


def test_next_file_keeps_pointer_visible(listing):
    dv = DirectoryViewer(str(listing), 4)
    for expected in range(1, len(NAMES)):
        dv.next_file()
        assert dv.ptr == expected
        assert in_view(dv)


def test_next_file_stops_at_end(listing):
    dv = DirectoryViewer(str(listing), 4)
    dv.last_file()
    calls = []
    dv.on_change = lambda: calls.append(1)
    dv.next_file()
    assert dv.selected_file().name == NAMES[-1]
    assert calls == []


def test_prev_file_at_start_does_nothing(listing):
    calls = []
    dv = DirectoryViewer(str(listing), 4, lambda: calls.append(1))
    dv.prev_file()
    assert dv.ptr == 0
    assert calls == [1]


def test_prev_file_scrolls_up(listing):
    dv = DirectoryViewer(str(listing), 4)
    dv.last_file()
    while dv.ptr > 0:
        dv.prev_file()
        assert in_view(dv)
    assert dv.view == 0


def test_last_and_first_file(listing):
    dv = DirectoryViewer(str(listing), 4)
    dv.last_file()
    assert dv.ptr == len(NAMES) - 1
    assert in_view(dv)
    dv.first_file()
    assert (dv.ptr, dv.view) == (0, 0)


def test_set_ptr_by_name(listing):
    calls = []
    dv = DirectoryViewer(str(listing), 4, lambda: calls.append(1))
    assert dv.set_ptr_by_name("f7") is True
    assert dv.selected_file().name == "f7"
    assert in_view(dv)
    assert calls == [1]


def test_set_ptr_by_unknown_name(listing):
    dv = DirectoryViewer(str(listing), 4)
    assert dv.set_ptr_by_name("nothing") is False
    assert dv.ptr == 0


def test_move_view_clamps_and_drags_pointer(listing):
    dv = DirectoryViewer(str(listing), 4)
    dv.move_view(-3)
    assert dv.view == 0
    dv.move_view(100)
    assert dv.view == len(NAMES) - 1
    assert dv.ptr == dv.view
    dv.move_view(-100)
    assert dv.view == 0
    assert in_view(dv)


def test_visible_files(listing):
    dv = DirectoryViewer(str(listing), 4)
    dv.set_ptr(8)
    visible = dv.visible_files()
    assert len(visible) <= dv.height
    assert visible[0] is dv.files[dv.view]
    assert dv.selected_file() in visible


def test_empty_directory(tmp_path):
    dv = DirectoryViewer(str(tmp_path), 4)
    dv.next_file()
    dv.last_file()
    dv.move_view(2)
    assert dv.ptr == 0
    assert dv.visible_files() == []
    with pytest.raises(IndexError):
        dv.selected_file()