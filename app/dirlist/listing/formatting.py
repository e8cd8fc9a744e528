"""Metadata formatting for long-format listings.

Pure functions that turn raw file metadata into the text columns of a
long-format line: permission string, link count, owner and group names,
size or device numbers, and modification time.
"""

import stat
from collections.abc import Callable
from datetime import datetime

from dirlist.models.entry import FileKind, FileMetadata

# Field widths of the long-format columns
NAME_FIELD_WIDTH = 8
NLINK_FIELD_WIDTH = 3
SIZE_FIELD_WIDTH = 9
DEVICE_FIELD_WIDTH = 4

RECENT_TIME_FORMAT = "%m/%d %H:%M"
OLD_TIME_FORMAT = "%m/%d  %Y"

NameLookup = Callable[[int], str | None]


def _execute_char(mode: int, exec_bit: int, special_bit: int, special: str) -> str:
    """Render an execute position, folding in the matching special bit.

    Args:
        mode: Mode bits.
        exec_bit: Execute bit of this triplet.
        special_bit: setuid, setgid or sticky bit sharing this position.
        special: Lowercase marker for the special bit ('s' or 't').

    Returns:
        'x' or '-' without the special bit; the marker in lower case
        when executable, upper case otherwise.
    """
    if mode & special_bit:
        return special if mode & exec_bit else special.upper()
    return "x" if mode & exec_bit else "-"


def format_permissions(mode: int) -> str:
    """Build the 10-character ``ls -l`` style mode string.

    Args:
        mode: Raw mode bits including the file type.

    Returns:
        Type glyph followed by owner, group and other rwx triplets.
    """
    return "".join(
        (
            FileKind.from_mode(mode).glyph,
            "r" if mode & stat.S_IRUSR else "-",
            "w" if mode & stat.S_IWUSR else "-",
            _execute_char(mode, stat.S_IXUSR, stat.S_ISUID, "s"),
            "r" if mode & stat.S_IRGRP else "-",
            "w" if mode & stat.S_IWGRP else "-",
            _execute_char(mode, stat.S_IXGRP, stat.S_ISGID, "s"),
            "r" if mode & stat.S_IROTH else "-",
            "w" if mode & stat.S_IWOTH else "-",
            _execute_char(mode, stat.S_IXOTH, stat.S_ISVTX, "t"),
        )
    )


def format_owner_name(uid: int, lookup: NameLookup) -> str:
    """Resolve a user id to its account name, falling back to the number."""
    name = lookup(uid)
    return name if name is not None else str(uid)


def format_group_name(gid: int, lookup: NameLookup) -> str:
    """Resolve a group id to its group name, falling back to the number."""
    name = lookup(gid)
    return name if name is not None else str(gid)


def format_timestamp(mtime: int, cutoff: int) -> str:
    """Format a modification time relative to the half-year cutoff.

    Times strictly newer than the cutoff show hour and minute, older
    ones show the year instead. Both forms are rendered in local time.

    Args:
        mtime: Modification time in seconds since the epoch.
        cutoff: Timestamp of six months ago.

    Returns:
        ``MM/DD HH:MM`` or ``MM/DD  YYYY``.
    """
    fmt = RECENT_TIME_FORMAT if mtime - cutoff > 0 else OLD_TIME_FORMAT
    return datetime.fromtimestamp(mtime).strftime(fmt)


def format_device_numbers(rdev_major: int, rdev_minor: int) -> str:
    """Format device major and minor numbers as ``%4d,%4d``."""
    return f"{rdev_major:{DEVICE_FIELD_WIDTH}d},{rdev_minor:{DEVICE_FIELD_WIDTH}d}"


def format_size_column(metadata: FileMetadata) -> str:
    """Render the size column, or device numbers for special files."""
    if metadata.is_device:
        return format_device_numbers(metadata.rdev_major, metadata.rdev_minor)
    return f"{metadata.size:{SIZE_FIELD_WIDTH}d}"


def format_long_prefix(
    metadata: FileMetadata,
    cutoff: int,
    user_lookup: NameLookup,
    group_lookup: NameLookup,
) -> str:
    """Build everything a long-format line shows before the entry name.

    Args:
        metadata: Metadata of the entry (symlinks not followed).
        cutoff: Half-year cutoff for the time column.
        user_lookup: Callable mapping a uid to a user name or None.
        group_lookup: Callable mapping a gid to a group name or None.

    Returns:
        Prefix text ending with a single space.
    """
    owner = format_owner_name(metadata.uid, user_lookup)
    group = format_group_name(metadata.gid, group_lookup)
    return (
        f"{format_permissions(metadata.mode)} "
        f"{metadata.nlink:{NLINK_FIELD_WIDTH}d} "
        f"{owner:>{NAME_FIELD_WIDTH}} "
        f"{group:>{NAME_FIELD_WIDTH}} "
        f"{format_size_column(metadata)} "
        f"{format_timestamp(metadata.mtime, cutoff)} "
    )
