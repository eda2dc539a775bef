"""A scrollable, sorted listing of one directory with a selection pointer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from vidd import filesystem
from vidd.filesystem import FileType


@dataclass(frozen=True)
class FileInfo:
    path: str
    has_permission: bool
    type: FileType

    @property
    def name(self) -> str:
        return filesystem.file_name(self.path)


class DirectoryViewer:
    """Files of a directory, a pointer to the selected one and a view offset.

    ``height`` is the number of rows shown; ``on_change`` is called whenever
    the selected file changes through navigation or loading.
    """

    def __init__(
        self,
        path: str,
        height: int = 1,
        on_change: Optional[Callable[[], None]] = None,
    ) -> None:
        self.height = height
        self.on_change: Callable[[], None] = on_change or (lambda: None)
        self.path = ""
        self.files: list[FileInfo] = []
        self.ptr = 0
        self.view = 0
        self.load_directory(path)

    def _file_change(self) -> None:
        self.on_change()

    def _adjust_view(self) -> None:
        if self.ptr < self.view or self.ptr >= self.view + self.height:
            self.view = max(0, self.ptr - self.height // 2)

    def load_directory(self, path: str) -> None:
        self.path = filesystem.real_path(path)
        self.files = [
            FileInfo(p, filesystem.has_permission(p), filesystem.file_type(p))
            for p in sorted(filesystem.directory_contents(self.path))
        ]
        self.ptr = 0
        self.view = 0
        self._file_change()

    def first_file(self) -> None:
        self.ptr = 0
        self.view = 0
        self._file_change()

    def last_file(self) -> None:
        if not self.files:
            return
        self.ptr = len(self.files) - 1
        half = self.height // 2
        self.view = 0 if self.ptr <= half else self.ptr - half
        self._file_change()

    def next_file(self) -> None:
        if self.ptr >= len(self.files) - 1:
            return
        self.ptr += 1
        if self.ptr - self.view == self.height:
            self.view += 1
        self._file_change()

    def prev_file(self) -> None:
        if self.ptr == 0:
            return
        self.ptr -= 1
        if self.ptr < self.view:
            self.view -= 1
        self._file_change()

    def set_ptr(self, ptr: int) -> None:
        """Point at file ``ptr`` and scroll it into view."""
        self.ptr = ptr
        self._adjust_view()

    def set_ptr_by_name(self, name: str) -> bool:
        """Point at the file called ``name``; return whether it was found."""
        for index, info in enumerate(self.files):
            if info.name == name:
                self.set_ptr(index)
                return True
        return False

    def move_view(self, y: int) -> None:
        """Scroll by ``y`` rows, dragging the pointer along to stay visible."""
        if self.view + y < 0:
            self.view = 0
        elif self.view + y >= len(self.files):
            self.view = max(0, len(self.files) - 1)
        else:
            self.view += y

        if self.ptr < self.view:
            self.ptr = self.view
            self._file_change()
        if self.ptr >= self.view + self.height:
            self.ptr = self.view + self.height - 1
            self._file_change()

    def selected_file(self) -> FileInfo:
        if not self.files:
            raise IndexError(f"directory {self.path} is empty")
        return self.files[self.ptr]

    def visible_files(self) -> list[FileInfo]:
        return self.files[self.view:self.view + self.height]