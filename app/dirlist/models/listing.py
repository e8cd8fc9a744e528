"""Listing control models.

This module defines the hidden-file policy applied to directory children
and the pending directory records held by the traversal work queue.
"""

from dataclasses import dataclass
from enum import Enum


class HiddenPolicy(str, Enum):
    """Which dot-prefixed names are shown.

    Attributes:
        DEFAULT: Hide every name starting with '.'.
        ALMOST: Show dot files, hide only '.' and '..'.
        ALL: Show everything.
    """

    DEFAULT = "default"
    ALMOST = "almost"
    ALL = "all"

    def hides(self, name: str) -> bool:
        """Check whether a directory child name is filtered out."""
        if self is HiddenPolicy.ALL or not name.startswith("."):
            return False
        if self is HiddenPolicy.DEFAULT:
            return True
        return is_dot_entry(name)


def is_dot_entry(name: str) -> bool:
    """Return True for the self and parent entries '.' and '..'."""
    return name in (".", "..")


@dataclass(slots=True)
class PendingDirectory:
    """A directory waiting to be listed.

    Attributes:
        path: Directory path as it will appear in section headers.
        depth: Nesting level relative to the starting directory (root is 0).
    """

    path: str
    depth: int = 0

    def __post_init__(self) -> None:
        """Validate pending directory data after initialization."""
        if not self.path:
            msg = "Path cannot be empty"
            raise ValueError(msg)
        if self.depth < 0:
            msg = f"Depth must not be negative, got {self.depth}"
            raise ValueError(msg)
