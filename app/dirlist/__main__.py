"""Allow running dirlist as ``python -m dirlist``."""

from dirlist.cli.main import app

if __name__ == "__main__":
    app(prog_name="dirlist")
