"""Entry lister for a single directory.

Enumerates the children of one directory, applies the hidden-file
policy, resolves symlinks and writes one formatted line per surviving
entry. Subdirectories found along the way are returned to the caller
so the traversal engine can schedule them.
"""

import logging
import os
from collections.abc import Callable, Iterator

from dirlist.core.config import ListingConfig
from dirlist.filesystem.base import PATH_MAX, FileSystem
from dirlist.listing.decoration import colorize, type_indicator
from dirlist.listing.formatting import NameLookup, format_long_prefix
from dirlist.models.entry import DirEntry, FileKind
from dirlist.models.listing import PendingDirectory, is_dot_entry

logger = logging.getLogger(__name__)

Writer = Callable[[str], None]
ErrorHandler = Callable[[str, Exception], None]


class ListingError(Exception):
    """Base exception for listing failures not raised by the OS."""


class PathTooLongError(ListingError):
    """Raised when a path would not fit in the maximum path length."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__("too long path")


class OutputError(ListingError):
    """Raised when a finished line cannot be written.

    Kept apart from OSError so a failing output stream is never
    reported as a failure of the directory being listed.
    """

    def __init__(self, error: OSError) -> None:
        self.error = error
        super().__init__(str(error))


def emit(write: Writer, line: str) -> None:
    """Pass one line to the writer.

    Raises:
        OutputError: If the writer fails with an OSError.
    """
    try:
        write(line)
    except OSError as e:
        raise OutputError(e) from e


def _path_length(path: str) -> int:
    return len(os.fsencode(path))


def _with_separator(path: str) -> str:
    """Ensure a directory path ends with exactly one trailing '/'."""
    return path if path.endswith("/") else f"{path}/"


def _render_name(name: str, mode: int, link_ok: bool, color: bool) -> str:
    return colorize(name, mode, link_ok) if color else name


def render_entry(
    entry: DirEntry,
    config: ListingConfig,
    *,
    user_lookup: NameLookup,
    group_lookup: NameLookup,
) -> str:
    """Render the listing line for one entry, without a newline.

    Args:
        entry: Entry to render.
        config: Listing options.
        user_lookup: Maps a uid to a user name or None (long format only).
        group_lookup: Maps a gid to a group name or None (long format only).

    Returns:
        The complete line text.
    """
    parts: list[str] = []
    mode = entry.metadata.mode

    if config.long_format and config.half_year_cutoff is not None:
        parts.append(
            format_long_prefix(entry.metadata, config.half_year_cutoff, user_lookup, group_lookup)
        )

    parts.append(_render_name(entry.name, mode, entry.link_ok, config.color))

    if config.classify:
        parts.append(type_indicator(mode) or "")

    # Only the entry itself is classified, never the link target
    if config.long_format and entry.link_target is not None:
        target_mode = entry.target_metadata.mode if entry.target_metadata else 0
        parts.append(" -> ")
        parts.append(_render_name(entry.link_target, target_mode, entry.link_ok, config.color))

    return "".join(parts)


class DirectoryLister:
    """Lists the contents of one directory at a time.

    Args:
        config: Listing options.
        filesystem: Operating system primitives.
        write: Callable receiving each finished line.
        on_error: Callable receiving the path and exception of every
            reported failure. Listing failures never propagate to the caller;
            only a failing writer does, as OutputError.
    """

    def __init__(
        self,
        config: ListingConfig,
        filesystem: FileSystem,
        write: Writer,
        on_error: ErrorHandler,
    ) -> None:
        self._config = config
        self._fs = filesystem
        self._write = write
        self._on_error = on_error

    def list_directory(self, directory: PendingDirectory) -> list[PendingDirectory]:
        """List one directory.

        Open failures and a base path that is too long are reported
        against the directory and end the listing. Per-entry failures
        are reported and the entry is skipped.

        Args:
            directory: Directory to list.

        Returns:
            Subdirectories to visit next, in enumeration order. Always
            empty unless recursive listing is enabled.
        """
        subdirectories: list[PendingDirectory] = []

        try:
            with self._fs.open_directory(directory.path) as names:
                if _path_length(directory.path) >= PATH_MAX - 1:
                    self._report(directory.path, PathTooLongError(directory.path))
                    return subdirectories
                self._list_entries(directory, names, subdirectories)
        except OSError as e:
            # Open failure, or enumeration failing part way through
            self._report(directory.path, e)

        return subdirectories

    def _list_entries(
        self,
        directory: PendingDirectory,
        names: Iterator[str],
        subdirectories: list[PendingDirectory],
    ) -> None:
        prefix = _with_separator(directory.path)
        for name in names:
            if self._config.hidden_policy.hides(name):
                continue

            path = prefix + name
            entry = self._read_entry(name, path)
            if entry is None:
                continue

            if self._should_descend(entry):
                subdirectories.append(PendingDirectory(path=path, depth=directory.depth + 1))

            emit(
                self._write,
                render_entry(
                    entry,
                    self._config,
                    user_lookup=self._fs.user_name,
                    group_lookup=self._fs.group_name,
                ),
            )

    def _read_entry(self, name: str, path: str) -> DirEntry | None:
        """Fetch metadata for a child, resolving it if it is a symlink.

        Args:
            name: Child name.
            path: Full path of the child.

        Returns:
            DirEntry, or None if the entry was reported and must be skipped.
        """
        if _path_length(path) > PATH_MAX:
            self._report(path, PathTooLongError(path))
            return None

        try:
            metadata = self._fs.lstat(path)
        except OSError as e:
            self._report(path, e)
            return None

        if metadata.kind is not FileKind.SYMLINK:
            return DirEntry(name=name, metadata=metadata)

        try:
            link_target = self._fs.readlink(path) or None
        except OSError:
            logger.debug("Cannot read link target of %s", path)
            link_target = None

        try:
            target_metadata = self._fs.stat(path)
        except OSError:
            logger.debug("Broken symlink: %s", path)
            return DirEntry(name=name, metadata=metadata, link_target=link_target, link_ok=False)

        return DirEntry(
            name=name,
            metadata=metadata,
            link_target=link_target,
            target_metadata=target_metadata,
        )

    def _should_descend(self, entry: DirEntry) -> bool:
        """Check whether an entry is scheduled for recursive listing.

        Uses the unfollowed metadata, so symlinks to directories are
        never descended into.
        """
        return (
            self._config.recursive
            and entry.kind is FileKind.DIRECTORY
            and not is_dot_entry(entry.name)
        )

    def _report(self, path: str, error: Exception) -> None:
        logger.debug("Skipping %s: %s", path, error)
        self._on_error(path, error)
