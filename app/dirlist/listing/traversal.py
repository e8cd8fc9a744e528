"""Traversal engine for recursive listings.

Owns the queue of directories waiting to be listed and drives the
directory lister over it until the queue is empty.

Scheduling order: the subdirectories found while listing a directory
are inserted directly after that directory's own queue position, in
the order they were found, ahead of anything queued earlier. Every
directory's children therefore form one contiguous run that is visited
before the remaining siblings of any ancestor. Subdirectories are only
ever discovered through directory enumeration with unfollowed
metadata, so symlinked directories are never entered and no cycle
detection is needed.
"""

import logging
from collections import deque
from collections.abc import Iterable

from dirlist.listing.lister import DirectoryLister, Writer, emit
from dirlist.models.listing import PendingDirectory

logger = logging.getLogger(__name__)


class WorkQueue:
    """Ordered queue of directories awaiting traversal.

    Args:
        initial: Directories to start with, in visiting order.
    """

    def __init__(self, initial: Iterable[PendingDirectory] = ()) -> None:
        self._items: deque[PendingDirectory] = deque(initial)

    def __bool__(self) -> bool:
        return bool(self._items)

    def pop(self) -> PendingDirectory:
        """Remove and return the next directory to visit."""
        return self._items.popleft()

    def splice_after_current(self, directories: list[PendingDirectory]) -> None:
        """Insert directories right after the one just popped.

        The directories keep their relative order and are visited
        before anything that was already waiting in the queue.
        """
        self._items.extendleft(reversed(directories))


def format_header(directory: PendingDirectory) -> str | None:
    """Return the section header text for a directory, None for the root.

    The header is preceded by a blank line, so the returned text starts
    with a newline.
    """
    if directory.depth == 0:
        return None
    return f"\n{directory.path}:"


class TraversalEngine:
    """Visits queued directories one at a time.

    Args:
        lister: Lister invoked for every visited directory.
        write: Callable receiving section header lines.
    """

    def __init__(self, lister: DirectoryLister, write: Writer) -> None:
        self._lister = lister
        self._write = write

    def run(self, root: str) -> int:
        """List ``root`` and, when recursive, everything below it.

        Args:
            root: Starting directory path.

        Returns:
            Number of directories visited.

        Raises:
            OutputError: If a line cannot be written.
        """
        queue = WorkQueue([PendingDirectory(path=root, depth=0)])
        visited = 0

        while queue:
            directory = queue.pop()
            header = format_header(directory)
            if header is not None:
                emit(self._write, header)

            logger.debug("Listing %s (depth %d)", directory.path, directory.depth)
            queue.splice_after_current(self._lister.list_directory(directory))
            visited += 1

        logger.debug("Visited %d directories", visited)
        return visited
