"""File system helpers used by the file browser."""

from __future__ import annotations

import os
import shutil
import stat
from enum import Enum
from typing import Iterator

_SNIFF_SIZE = 128


class FileType(Enum):
    DIRECTORY = "directory"
    BINARY = "binary"
    TEXT = "text"
    SPECIAL = "special"


def _utf8_len(lead: int) -> int:
    if lead < 0x80:
        return 1
    if 0xC0 <= lead < 0xE0:
        return 2
    if 0xE0 <= lead < 0xF0:
        return 3
    if 0xF0 <= lead < 0xF8:
        return 4
    return 1


def _utf8_valid(data: bytes, i: int) -> bool:
    lead = data[i]
    if lead < 0x80:
        return True
    if lead < 0xC0 or lead >= 0xF8:
        return False
    tail = data[i + 1:i + _utf8_len(lead)]
    return len(tail) == _utf8_len(lead) - 1 and all(0x80 <= b < 0xC0 for b in tail)


def is_file_binary(path: str) -> bool:
    """Guess from the first bytes whether a file holds binary data."""
    try:
        with open(path, "rb") as fp:
            data = fp.read(_SNIFF_SIZE)
    except OSError:
        return False
    length = len(data)
    if length == 0:
        return False
    padded = data + bytes(_SNIFF_SIZE - length + 4)
    if padded[0] == 0xEF and padded[1] == 0xBB:
        return False
    if padded[0] == 0xFE and padded[1] == 0xFF:
        return False
    i = 0
    while length >= 4 and i < length - 4:
        if padded[i] == 0:
            return True
        if not _utf8_valid(padded, i):
            return True
        i += _utf8_len(padded[i])
    return False


def real_path(path: str) -> str:
    return os.path.realpath(path)


def file_name(path: str) -> str:
    return os.path.basename(path)


def parent_directory(path: str) -> str:
    if not path.endswith("/"):
        path += "/"
    return real_path(path + "..")


def containing_directory(path: str) -> str:
    """Return everything up to and including the last slash, or ''."""
    if path.endswith("/"):
        path = path[:-1]
    slash = path.rfind("/")
    return path[: slash + 1] if slash >= 0 else ""


def has_extension(path: str, ext: str) -> bool:
    return path.endswith(ext)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def is_file(path: str) -> bool:
    return not is_directory(path)


def is_text_file(path: str) -> bool:
    return file_type(path) is FileType.TEXT


def is_binary_file(path: str) -> bool:
    return file_type(path) is FileType.BINARY


def has_permission(path: str) -> bool:
    return os.access(path, os.R_OK)


def file_type(path: str) -> FileType:
    try:
        mode = os.stat(path).st_mode
    except OSError:
        return FileType.SPECIAL
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISREG(mode):
        if has_permission(path) and is_file_binary(path):
            return FileType.BINARY
        return FileType.TEXT
    return FileType.SPECIAL


def _copy(src: str, dst: str) -> None:
    if os.path.isdir(src):
        if os.path.exists(dst) and not os.path.isdir(dst):
            raise FileExistsError(dst)
        os.makedirs(dst, exist_ok=True)
        for entry in os.scandir(src):
            _copy(entry.path, os.path.join(dst, entry.name))
    else:
        if os.path.isdir(dst):
            dst = os.path.join(dst, os.path.basename(src))
        shutil.copy(src, dst)


def copy(src: str, dst: str) -> None:
    """Copy a file or a directory tree, overwriting; failures are ignored."""
    try:
        _copy(src, dst)
    except OSError:
        pass


def remove(path: str) -> None:
    """Remove a file or a whole directory tree; a missing path is ignored."""
    try:
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        pass


def rename(path: str, name: str) -> None:
    """Give ``path`` the new name ``name`` within its directory."""
    os.rename(path, containing_directory(path) + name)


def create_file(name: str) -> None:
    with open(name, "w"):
        pass


def create_directory(name: str) -> None:
    try:
        os.mkdir(name)
    except FileExistsError:
        if not os.path.isdir(name):
            raise


def set_cwd(path: str) -> None:
    os.chdir(path)


def directory_contents(path: str) -> list[str]:
    return [entry.path for entry in os.scandir(path)]


def _walk(path: str) -> Iterator[str]:
    for entry in os.scandir(path):
        yield entry.path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(entry.path)


def all_sub_files_and_directories(path: str) -> list[str]:
    return list(_walk(path))


def all_sub_text_files(path: str) -> list[str]:
    return [p for p in _walk(path) if is_text_file(p)]