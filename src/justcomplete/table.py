"""The flags of ``just`` and the completion table built from them.

:data:`JUST_FLAGS` lists every flag in the order completions are offered:
flags that take a value first, then plain switches. :data:`COMPLETION_TABLE`
is built from it once, at import time, and is read-only afterwards.

The table maps a *command path* (the root command name, optionally followed
by ``;``-joined subcommand words) to the ordered candidates offered at that
position. ``just`` has no subcommands, so the table has a single key.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Optional

from justcomplete.models import Candidate, Flag

ROOT_COMMAND = "just"
"""Name of the completed program and the root key of the table."""

SHELL_NAMES: tuple[str, ...] = ("bash", "elvish", "fish", "powershell", "zsh")
"""Shells accepted by ``just --completions``."""

COLOR_VALUES: tuple[str, ...] = ("auto", "always", "never")


JUST_FLAGS: tuple[Flag, ...] = (
    Flag(
        long="color",
        help="Print colorful output",
        value_names=("COLOR",),
        possible_values=COLOR_VALUES,
    ),
    Flag(
        long="justfile",
        short="f",
        help="Use JUSTFILE as justfile.",
        value_names=("JUSTFILE",),
        value_hint="file",
    ),
    Flag(
        long="set",
        help="Override VARIABLE with VALUE",
        value_names=("VARIABLE", "VALUE"),
        multiple=True,
    ),
    Flag(
        long="shell",
        help="Invoke SHELL to run recipes",
        value_names=("SHELL",),
        value_hint="command",
    ),
    Flag(
        long="shell-arg",
        help="Invoke shell with SHELL-ARG as an argument",
        value_names=("SHELL-ARG",),
        multiple=True,
    ),
    Flag(
        long="working-directory",
        short="d",
        help="Use WORKING-DIRECTORY as working directory. --justfile must also be set",
        value_names=("WORKING-DIRECTORY",),
        value_hint="dir",
    ),
    Flag(
        long="completions",
        help="Print shell completion script for SHELL",
        value_names=("SHELL",),
        possible_values=SHELL_NAMES,
    ),
    Flag(
        long="show",
        short="s",
        help="Show information about RECIPE",
        value_names=("RECIPE",),
    ),
    Flag(long="dry-run", help="Print what just would do without doing it"),
    Flag(long="highlight", help="Highlight echoed recipe lines in bold"),
    Flag(long="no-highlight", help="Don't highlight echoed recipe lines in bold"),
    Flag(long="quiet", short="q", help="Suppress all output"),
    Flag(long="clear-shell-args", help="Clear shell arguments"),
    Flag(long="verbose", short="v", help="Use verbose output", multiple=True),
    Flag(long="dump", help="Print entire justfile"),
    Flag(
        long="edit",
        short="e",
        help="Edit justfile with editor given by $VISUAL or $EDITOR, falling back to vim",
    ),
    Flag(long="evaluate", help="Print evaluated variables"),
    Flag(long="init", help="Initialize new justfile in project root"),
    Flag(long="list", short="l", help="List available recipes and their arguments"),
    Flag(long="summary", help="List names of available recipes"),
    Flag(long="variables", help="List names of variables"),
    Flag(long="help", short="h", help="Print help information"),
    Flag(long="version", short="V", help="Print version information"),
)


def flag_candidates(flags: Iterable[Flag]) -> tuple[Candidate, ...]:
    """Expand *flags* into one candidate per form, short form first.

    Raises:
        ValueError: If two flags share a form.
    """
    candidates: list[Candidate] = []
    seen: set[str] = set()
    for flag in flags:
        for form in flag.forms:
            if form in seen:
                raise ValueError(f"duplicate flag form: {form}")
            seen.add(form)
            candidates.append(Candidate(text=form, description=flag.help))
    return tuple(candidates)


def build_completion_table(
    command: str = ROOT_COMMAND,
    flags: Iterable[Flag] = JUST_FLAGS,
) -> Mapping[str, tuple[Candidate, ...]]:
    """Build the read-only completion table for *command*.

    Args:
        command: Root command name; used as the table's only key. Passing an
            alias (e.g. ``"j"``) keys the same candidates under that name.
        flags: Flag definitions to expand into candidates.

    Returns:
        A read-only mapping from command path to ordered candidates.
    """
    return MappingProxyType({command: flag_candidates(flags)})


def flag_for(form: str, flags: Iterable[Flag] = JUST_FLAGS) -> Optional[Flag]:
    """Return the flag that owns the spelling *form* (e.g. ``"-f"``), if any."""
    for flag in flags:
        if form in flag.forms:
            return flag
    return None


COMPLETION_TABLE: Mapping[str, tuple[Candidate, ...]] = build_completion_table()
"""The table for ``just`` keyed by its default root name."""
