"""Color and type-indicator decoration of entry names.

Maps a file type plus its special permission bits to an ANSI escape
sequence and to the classification character appended by ``-F``.
"""

import stat
from collections.abc import Callable

from dirlist.models.entry import EXECUTE_BITS, FileKind

RESET = "\033[0m"
BROKEN_LINK = "\033[31m"

SETUID_FILE = "\033[37;41m"
SETGID_FILE = "\033[30;43m"
EXECUTABLE_FILE = "\033[01;32m"

STICKY_OTHER_WRITABLE_DIR = "\033[30;42m"
OTHER_WRITABLE_DIR = "\033[34;42m"
STICKY_DIR = "\033[37;44m"
DIRECTORY = "\033[01;34m"

SYMLINK = "\033[01;36m"
FIFO = "\033[33m"
SOCKET = "\033[01;35m"
DEVICE = "\033[01;33m"

_INDICATORS: dict[FileKind, str] = {
    FileKind.DIRECTORY: "/",
    FileKind.SYMLINK: "@",
    FileKind.FIFO: "|",
    FileKind.SOCKET: "=",
}


def type_indicator(mode: int) -> str | None:
    """Return the ``-F`` classification character for a mode, if any.

    Executable regular files get '*', directories '/', symlinks '@',
    fifos '|' and sockets '='. Everything else gets nothing.
    """
    kind = FileKind.from_mode(mode)
    if kind is FileKind.REGULAR:
        return "*" if mode & EXECUTE_BITS else None
    return _INDICATORS.get(kind)


def _regular_color(mode: int) -> str:
    if mode & stat.S_ISUID:
        return SETUID_FILE
    if mode & stat.S_ISGID:
        return SETGID_FILE
    if mode & EXECUTE_BITS:
        return EXECUTABLE_FILE
    return RESET


def _directory_color(mode: int) -> str:
    sticky = bool(mode & stat.S_ISVTX)
    other_writable = bool(mode & stat.S_IWOTH)
    if sticky and other_writable:
        return STICKY_OTHER_WRITABLE_DIR
    if other_writable:
        return OTHER_WRITABLE_DIR
    if sticky:
        return STICKY_DIR
    return DIRECTORY


# Every FileKind has a rule; unknown types get no escape before the name
_COLOR_RULES: dict[FileKind, Callable[[int], str]] = {
    FileKind.REGULAR: _regular_color,
    FileKind.DIRECTORY: _directory_color,
    FileKind.SYMLINK: lambda _mode: SYMLINK,
    FileKind.FIFO: lambda _mode: FIFO,
    FileKind.SOCKET: lambda _mode: SOCKET,
    FileKind.BLOCK: lambda _mode: DEVICE,
    FileKind.CHAR: lambda _mode: DEVICE,
    FileKind.UNKNOWN: lambda _mode: "",
}


def color_escape(mode: int, link_ok: bool = True) -> str:
    """Pick the escape sequence used to color a name.

    Args:
        mode: Mode bits of the entry being colored.
        link_ok: False for a symlink whose target does not resolve,
            which overrides the mode entirely.

    Returns:
        ANSI SGR escape sequence. Plain files and unknown types get
        the reset sequence.
    """
    if not link_ok:
        return BROKEN_LINK
    return _COLOR_RULES[FileKind.from_mode(mode)](mode)


def colorize(name: str, mode: int, link_ok: bool = True) -> str:
    """Wrap a name in its color escape, always followed by a reset."""
    return f"{color_escape(mode, link_ok)}{name}{RESET}"
