"""dirlist - directory listing with recursion, long format and colors."""

__version__ = "0.1.0"
