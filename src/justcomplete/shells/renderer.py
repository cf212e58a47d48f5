"""Render the completion table as a static script for a specific shell.

Every supported shell registers completions differently, but all of them
receive the same data: the flags of :data:`~justcomplete.table.JUST_FLAGS`
and the completion table built from them. This module assembles that data
into a template context and renders ``templates/<shell>.j2`` with Jinja2.

The quoting rules differ per shell, so each one gets its own filter:

* ``sh`` -- POSIX single quotes (bash, zsh).
* ``fish`` -- fish single quotes, where ``\\`` and ``'`` are escaped.
* ``doubled`` -- single quotes with ``'`` doubled (elvish, PowerShell).

Display padding is computed here, in Python, with the same display-width
rules as :func:`~justcomplete.completer.complete`, so a script renders
aligned descriptions even in shells without a width builtin.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader

from justcomplete import __version__
from justcomplete.completer import DEFAULT_COLUMN_WIDTH, DEFAULT_SEPARATOR, complete
from justcomplete.exceptions import UnsupportedShellError
from justcomplete.models import Flag
from justcomplete.table import JUST_FLAGS, ROOT_COMMAND, build_completion_table

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``shells/templates/``)."""

SUPPORTED_SHELLS: tuple[str, ...] = ("bash", "elvish", "fish", "powershell", "zsh")

_ZSH_ACTIONS = {
    "file": "_files",
    "dir": "_files -/",
    "command": "_command_names -e",
}


def normalize_shell(shell: str) -> str:
    """Return the canonical lower-case name of *shell*.

    Accepts any casing and a path (``/usr/bin/zsh``), as found in ``$SHELL``.

    Raises:
        UnsupportedShellError: If no template exists for the shell.
    """
    name = Path(shell.strip()).name.lower()
    if name in ("pwsh", "pwsh.exe", "powershell.exe"):
        name = "powershell"
    if name not in SUPPORTED_SHELLS:
        raise UnsupportedShellError(shell, SUPPORTED_SHELLS)
    return name


def render_script(
    shell: str,
    command: str = ROOT_COMMAND,
    column_width: int = DEFAULT_COLUMN_WIDTH,
    separator: str = DEFAULT_SEPARATOR,
    flags: Iterable[Flag] = JUST_FLAGS,
) -> str:
    """Render the completion script for *shell*.

    Args:
        shell: Target shell name (``bash``, ``elvish``, ``fish``,
            ``powershell``, ``zsh``); case-insensitive.
        command: Command the script registers completions for.
        column_width: Display cells reserved for candidate text in shells
            that show padded descriptions.
        separator: Joins words into a command path in shells that walk one.
        flags: Flag definitions to render.

    Returns:
        The script text, ending with a newline.

    Raises:
        UnsupportedShellError: If *shell* has no template.
    """
    name = normalize_shell(shell)
    flags = tuple(flags)
    env = _create_jinja_env()
    context = _build_context(command, column_width, separator, flags)
    logger.debug("Rendering %s completion script for %s", name, command)
    return env.get_template(f"{name}.j2").render(context)


def _create_jinja_env() -> Environment:
    """Create the Jinja2 environment for shell templates.

    Autoescape is off: the output is shell source, and each template quotes
    its strings with the filter for its own shell.
    """
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    env.filters["sh"] = sh_quote
    env.filters["fish"] = fish_quote
    env.filters["doubled"] = doubled_quote
    env.filters["zsh_specs"] = zsh_specs
    env.filters["fish_value_args"] = fish_value_args
    env.filters["bash_compgen"] = bash_compgen
    return env


def _build_context(
    command: str,
    column_width: int,
    separator: str,
    flags: tuple[Flag, ...],
) -> dict[str, Any]:
    """Assemble the variables shared by every shell template."""
    table = build_completion_table(command, flags)
    paths = []
    for path, candidates in table.items():
        # A word list that ends on this path plus an empty word being typed.
        words = [command, *path.split(separator)[1:], ""]
        completions = complete(
            words, table=table, command=command, separator=separator, width=column_width
        )
        paths.append({
            "path": path,
            "candidates": [
                {
                    "text": c.text,
                    "description": candidate.description,
                    "display": c.display,
                }
                for c, candidate in zip(completions, candidates)
            ],
        })

    return {
        "command": command,
        "function_name": "_" + re.sub(r"\W", "_", command),
        "separator": separator,
        "column_width": column_width,
        "flags": flags,
        "value_flags": [f for f in flags if f.takes_value],
        "forms": [form for f in flags for form in f.forms],
        "paths": paths,
        "version": __version__,
    }


# ---------------------------------------------------------------------------
# Quoting filters
# ---------------------------------------------------------------------------


def sh_quote(value: str) -> str:
    """Quote *value* for bash or zsh, always using single quotes."""
    return "'" + value.replace("'", "'\\''") + "'"


def fish_quote(value: str) -> str:
    """Quote *value* for fish."""
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


def doubled_quote(value: str) -> str:
    """Quote *value* for elvish or PowerShell single-quoted strings."""
    return "'" + value.replace("'", "''") + "'"


# ---------------------------------------------------------------------------
# Per-shell flag helpers
# ---------------------------------------------------------------------------


def _zsh_escape(text: str) -> str:
    for char in ("\\", "[", "]", ":"):
        text = text.replace(char, "\\" + char)
    return text


def zsh_specs(flag: Flag) -> list[str]:
    """Return the unquoted ``_arguments`` specs for every form of *flag*.

    Example::

        >>> zsh_specs(Flag(long="quiet", short="q", help="Suppress all output"))
        ['(-q --quiet)-q[Suppress all output]', '(-q --quiet)--quiet[Suppress all output]']
    """
    if flag.multiple:
        prefix = "*"
    elif flag.short is not None:
        prefix = f"({' '.join(flag.forms)})"
    else:
        prefix = ""

    values = ""
    if flag.takes_value:
        if flag.possible_values:
            action = f"({' '.join(flag.possible_values)})"
        else:
            action = _ZSH_ACTIONS.get(flag.value_hint, " ")
        values = ":" + ":".join(
            f"{_zsh_escape(name)}:{action if i == 0 else ' '}"
            for i, name in enumerate(flag.value_names)
        )

    specs = []
    for form in flag.forms:
        if flag.takes_value and len(flag.value_names) == 1:
            form += "+" if len(form) == 2 else "="
        specs.append(f"{prefix}{form}[{_zsh_escape(flag.help)}]{values}")
    return specs


def fish_value_args(flag: Flag) -> str:
    """Return the ``complete`` arguments describing the value *flag* takes."""
    if not flag.takes_value:
        return ""
    if flag.possible_values:
        return " -r -f -a " + fish_quote(" ".join(flag.possible_values))
    if flag.value_hint == "file":
        return " -r -F"
    if flag.value_hint == "dir":
        return " -r -f -a '(__fish_complete_directories)'"
    if flag.value_hint == "command":
        return " -r -f -a '(__fish_complete_command)'"
    return " -r"


def bash_compgen(flag: Flag) -> str:
    """Return the bash statement that fills ``COMPREPLY`` for the value of *flag*."""
    if flag.possible_values:
        words = " ".join(flag.possible_values)
        return f'COMPREPLY=($(compgen -W "{words}" -- "${{cur}}"))'
    if flag.value_hint == "file":
        return 'COMPREPLY=($(compgen -f -- "${cur}"))'
    if flag.value_hint == "dir":
        return 'COMPREPLY=($(compgen -d -- "${cur}"))'
    if flag.value_hint == "command":
        return 'COMPREPLY=($(compgen -c -- "${cur}"))'
    return "COMPREPLY=()"
