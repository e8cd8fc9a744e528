"""Directory listing pipeline.

This module provides metadata formatting, name decoration, the
single-directory lister and the recursive traversal engine.
"""

from dirlist.listing.decoration import color_escape, colorize, type_indicator
from dirlist.listing.formatting import (
    format_device_numbers,
    format_group_name,
    format_long_prefix,
    format_owner_name,
    format_permissions,
    format_timestamp,
)
from dirlist.listing.lister import (
    DirectoryLister,
    ListingError,
    OutputError,
    PathTooLongError,
    emit,
    render_entry,
)
from dirlist.listing.traversal import TraversalEngine, WorkQueue, format_header

__all__ = [
    "DirectoryLister",
    "ListingError",
    "OutputError",
    "PathTooLongError",
    "TraversalEngine",
    "WorkQueue",
    "color_escape",
    "colorize",
    "emit",
    "format_device_numbers",
    "format_group_name",
    "format_header",
    "format_long_prefix",
    "format_owner_name",
    "format_permissions",
    "format_timestamp",
    "render_entry",
    "type_indicator",
]
