"""Resolved listing configuration.

The configuration is built once at startup from command-line flags and
user defaults, then passed read-only to every listing component.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

from dirlist.models.listing import HiddenPolicy

# Six months, as half of a 365-day year
HALF_YEAR_SECONDS = 365 * 24 * 60 * 60 // 2


class ListingConfig(BaseModel):
    """Immutable options controlling a listing run.

    Attributes:
        hidden_policy: Which dot-prefixed entries are shown.
        color: Wrap names in ANSI color escapes.
        classify: Append a type indicator after each name.
        long_format: Prefix each name with its metadata columns.
        recursive: Descend into subdirectories.
        half_year_cutoff: Timestamp of six months before startup. Only
            set, and only used, when long_format is enabled.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    hidden_policy: HiddenPolicy = HiddenPolicy.DEFAULT
    color: bool = False
    classify: bool = False
    long_format: bool = False
    recursive: bool = False
    half_year_cutoff: Annotated[
        int | None,
        Field(description="Seconds since the epoch, six months before startup"),
    ] = None

    @model_validator(mode="after")
    def check_cutoff(self) -> ListingConfig:
        """Require a cutoff exactly when long format is enabled."""
        if self.long_format and self.half_year_cutoff is None:
            msg = "half_year_cutoff is required for long format"
            raise ValueError(msg)
        if not self.long_format and self.half_year_cutoff is not None:
            msg = "half_year_cutoff is only meaningful with long format"
            raise ValueError(msg)
        return self

    @classmethod
    def create(
        cls,
        *,
        hidden_policy: HiddenPolicy = HiddenPolicy.DEFAULT,
        color: bool = False,
        classify: bool = False,
        long_format: bool = False,
        recursive: bool = False,
        now: int | None = None,
    ) -> ListingConfig:
        """Create a configuration, deriving the half-year cutoff.

        Args:
            hidden_policy: Which dot-prefixed entries are shown.
            color: Colorize names.
            classify: Append type indicators.
            long_format: Show metadata columns.
            recursive: Descend into subdirectories.
            now: Current time in seconds. Defaults to the system clock.

        Returns:
            ListingConfig with half_year_cutoff set when long_format is.
        """
        cutoff = None
        if long_format:
            current = int(time.time()) if now is None else now
            cutoff = current - HALF_YEAR_SECONDS

        return cls(
            hidden_policy=hidden_policy,
            color=color,
            classify=classify,
            long_format=long_format,
            recursive=recursive,
            half_year_cutoff=cutoff,
        )


def resolve_hidden_policy(
    requested: Sequence[HiddenPolicy],
    *,
    show_all: bool = False,
    almost_all: bool = False,
) -> HiddenPolicy:
    """Pick the hidden-file policy.

    The last of the -a/-A flags given on the command line wins. Without
    either flag the settings defaults apply, and there ``all`` takes
    precedence over ``almost_all``.

    Args:
        requested: Policies of the -a/-A flags in command-line order.
        show_all: Default for -a from the settings file.
        almost_all: Default for -A from the settings file.
    """
    if requested:
        return requested[-1]
    if show_all:
        return HiddenPolicy.ALL
    if almost_all:
        return HiddenPolicy.ALMOST
    return HiddenPolicy.DEFAULT
