"""Canonical Pydantic models shared across all justcomplete modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into two groups:

**Table models** -- immutable descriptions of what the completer offers:
    :class:`Flag` (one flag of the completed tool, with all its forms) and
    :class:`Candidate` (one completion suggestion).

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`CompleterConfig`, :class:`OutputConfig`, and :class:`GlobalConfig`.

Table models are frozen so that the completion table built at import time
cannot be mutated by any caller.
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from rich.cells import cell_len


def display_width(text: str) -> int:
    """Return the number of terminal cells *text* occupies.

    Wide characters (CJK ideographs, most emoji) count as two cells and
    zero-width combining marks as none, so padding computed from this value
    lines descriptions up in a terminal column.
    """
    return cell_len(text)


# --- Table Models ---


class Flag(BaseModel):
    """A single flag of the completed command, with every spelling it accepts.

    ``long`` and ``short`` are stored without their leading dashes; use
    :attr:`forms` for the dash-prefixed spellings in completion order (short
    form first).

    Example::

        Flag(
            long="justfile",
            short="f",
            help="Use JUSTFILE as justfile.",
            value_names=("JUSTFILE",),
            value_hint="file",
        )
    """

    model_config = ConfigDict(frozen=True)

    long: str = Field(description="Long name without the leading '--'")
    short: Optional[str] = Field(
        default=None, description="Single-character short name without the '-'"
    )
    help: str = Field(description="One-line description shown next to the flag")
    value_names: tuple[str, ...] = Field(
        default=(), description="Names of the values the flag consumes"
    )
    possible_values: tuple[str, ...] = Field(
        default=(), description="Closed set of accepted values, if any"
    )
    value_hint: Literal["none", "file", "dir", "command"] = Field(
        default="none", description="What kind of value the flag expects"
    )
    multiple: bool = Field(default=False, description="Flag may be repeated")

    @field_validator("long")
    @classmethod
    def _check_long(cls, value: str) -> str:
        if not value or value.startswith("-"):
            raise ValueError(f"long flag name must be bare, got {value!r}")
        return value

    @field_validator("short")
    @classmethod
    def _check_short(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and (len(value) != 1 or value == "-"):
            raise ValueError(f"short flag name must be one character, got {value!r}")
        return value

    @property
    def takes_value(self) -> bool:
        """Whether the flag consumes at least one value."""
        return bool(self.value_names)

    @property
    def forms(self) -> tuple[str, ...]:
        """Dash-prefixed spellings, short form first."""
        if self.short is None:
            return (f"--{self.long}",)
        return (f"-{self.short}", f"--{self.long}")


class Candidate(BaseModel):
    """One completion suggestion: the replacement text and its description.

    Candidates have no identity beyond :attr:`text`; within one command path
    no two candidates share a text.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    description: str

    def padding(self, width: int = 14) -> str:
        """Spaces that pad :attr:`text` out to *width* display cells.

        Empty (never negative) when the text is already wider than *width*.
        """
        return " " * max(0, width - display_width(self.text))

    def display_suffix(self, width: int = 14) -> str:
        """The string shown after the candidate text in a completion menu.

        One separating space, the padding, then the description, so that
        descriptions of candidates no wider than *width* start in the same
        column.
        """
        return f" {self.padding(width)}{self.description}"


# --- Configuration Models ---


class CompleterConfig(BaseModel):
    """Completer settings stored in :class:`GlobalConfig`."""

    command: str = Field(
        default="just", description="Root command name the table is keyed by"
    )
    column_width: int = Field(
        default=14, ge=1, description="Display cells reserved for candidate text"
    )
    separator: str = Field(
        default=";", min_length=1, description="Joins words into a command path"
    )


class OutputConfig(BaseModel):
    """Default output format preferences stored in :class:`GlobalConfig`."""

    format: Literal["auto", "json", "plain", "rich"] = Field(
        default="auto", description="Output format used when no --json or --plain flag is given"
    )


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/justcomplete/config.json``.

    Loaded and saved by :func:`~justcomplete.config.load_global_config` and
    :func:`~justcomplete.config.save_global_config`. Fields here have the
    lowest precedence and can be overridden by environment variables or CLI
    flags. See :func:`~justcomplete.config.resolve_config` for the full
    precedence chain.
    """

    completer: CompleterConfig = Field(default_factory=CompleterConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
