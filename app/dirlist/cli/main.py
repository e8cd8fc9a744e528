"""Main CLI application entry point.

Defines the Typer application: parses the listing flags, merges them
with the user's default settings and runs the traversal.
"""

import logging
from typing import Annotated

import typer

from dirlist import __version__
from dirlist.core.config import ListingConfig, resolve_hidden_policy
from dirlist.core.settings import ListingDefaults, SettingsError, load_settings
from dirlist.filesystem.posix import PosixFileSystem
from dirlist.listing.lister import DirectoryLister, OutputError
from dirlist.listing.traversal import TraversalEngine
from dirlist.models.listing import HiddenPolicy
from dirlist.utils.formatting import print_path_error, print_warning, stdout_is_terminal

logger = logging.getLogger(__name__)

DEFAULT_PATH = "./"

# ctx.meta key holding the -a/-A flags in command-line order
HIDDEN_FLAGS_KEY = "dirlist.hidden_flags"

# Create main Typer app
app = typer.Typer(
    name="dirlist",
    help="List directory contents.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirlist version {__version__}")
        raise typer.Exit()


def _hidden_flag_callback(policy: HiddenPolicy):
    """Build a callback recording a hidden-file flag when it is given.

    Click runs parameter callbacks in the order the options appeared on
    the command line, so the recorded list preserves that order.
    """

    def callback(ctx: typer.Context, value: bool) -> bool:
        if value:
            ctx.meta.setdefault(HIDDEN_FLAGS_KEY, []).append(policy)
        return value

    return callback


def _load_defaults(skip: bool) -> ListingDefaults:
    """Load default options from the settings file.

    An unusable settings file is reported as a warning and ignored.
    """
    if skip:
        return ListingDefaults()
    try:
        return load_settings().defaults
    except SettingsError as e:
        print_warning(f"{e} (settings ignored)")
        return ListingDefaults()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@app.command()
def main(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Directory to list.", show_default=True),
    ] = DEFAULT_PATH,
    show_all: Annotated[
        bool,
        typer.Option(
            "--all",
            "-a",
            callback=_hidden_flag_callback(HiddenPolicy.ALL),
            help="Show all entries, including '.' and '..'.",
        ),
    ] = False,
    almost_all: Annotated[
        bool,
        typer.Option(
            "--almost-all",
            "-A",
            callback=_hidden_flag_callback(HiddenPolicy.ALMOST),
            help="Show hidden entries except '.' and '..'.",
        ),
    ] = False,
    color: Annotated[
        bool,
        typer.Option("--color", "-C", help="Colorize names when writing to a terminal."),
    ] = False,
    classify: Annotated[
        bool,
        typer.Option("--classify", "-F", help="Append a type indicator (one of */@|=)."),
    ] = False,
    long_format: Annotated[
        bool,
        typer.Option("--long-format", "-l", help="Use the long listing format."),
    ] = False,
    recursive: Annotated[
        bool,
        typer.Option("--recursive", "-R", help="List subdirectories recursively."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging on stderr."),
    ] = False,
    no_config: Annotated[
        bool,
        typer.Option("--no-config", help="Ignore the user settings file."),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """List the contents of PATH (default: the current directory).

    Entries are shown in the order the filesystem returns them.

    Examples:
        dirlist                     # Current directory, hidden entries omitted
        dirlist -la /etc            # Everything in /etc, with metadata
        dirlist -RF src             # Recursive listing with type indicators
    """
    _configure_logging(verbose)

    if not path:
        raise typer.BadParameter("Path cannot be empty.", param_hint="PATH")

    defaults = _load_defaults(no_config)

    config = ListingConfig.create(
        hidden_policy=resolve_hidden_policy(
            ctx.meta.get(HIDDEN_FLAGS_KEY, []),
            show_all=defaults.all,
            almost_all=defaults.almost_all,
        ),
        color=(color or defaults.color) and stdout_is_terminal(),
        classify=classify or defaults.classify,
        long_format=long_format or defaults.long_format,
        recursive=recursive or defaults.recursive,
    )
    logger.debug("Listing configuration: %s", config)

    def write(line: str) -> None:
        typer.echo(line, color=config.color or None)

    lister = DirectoryLister(config, PosixFileSystem(), write, print_path_error)
    try:
        TraversalEngine(lister, write).run(path)
    except OutputError as e:
        # A closed pipe (e.g. piping into head) ends the listing quietly
        if not isinstance(e.error, BrokenPipeError):
            print_path_error("<stdout>", e.error)
        raise typer.Exit(code=1) from e


if __name__ == "__main__":
    app()
