"""Completion commands -- query the completer and inspect the table.

``justcomplete complete`` is the runtime entry point for shell glue that
asks for candidates on every tab press::

    justcomplete complete -- just --h

In plain mode (the default whenever stdout is piped, which it always is
under a shell completer) each candidate is printed as one line,
``<text><TAB><display suffix>``. An unknown command path prints nothing and
exits successfully: no completions is a normal answer.

``justcomplete table`` prints the candidates registered for a command path
for humans.
"""

from __future__ import annotations

import json
from typing import Optional

import typer

from justcomplete.output import OutputFormat, debug, error, get_output, print_table


def _resolve(command: Optional[str], width: Optional[int]):
    """Resolve the effective completer config, exiting on config errors."""
    from justcomplete.config import resolve_config
    from justcomplete.exceptions import JustCompleteError

    try:
        return resolve_config(cli_command=command, cli_width=width).completer
    except JustCompleteError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


def complete_command(
    words: Optional[list[str]] = typer.Argument(
        None,
        help="Words on the command line, program name first, word being completed last.",
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Root command name (default: just)."
    ),
    width: Optional[int] = typer.Option(
        None, "--width", "-w", min=1, help="Column width for candidate text."
    ),
) -> None:
    """Print the completions offered after WORDS.

    Rebuilds the command path from the typed words, looks it up in the
    completion table, and prints each candidate with its padded
    description.

    Args:
        words: Every word on the current line. Options for this command must
            precede them; put ``--`` first when the words start with a dash.
        command: Root command name override.
        width: Column width override.

    Example::

        justcomplete complete -- just ""
        justcomplete --json complete -- just --h
    """
    from justcomplete.completer import command_path, complete

    settings = _resolve(command, width)
    words = words or []

    path = command_path(words, command=settings.command, separator=settings.separator)
    debug(f"Command path: {path!r}")

    completions = complete(
        words,
        command=settings.command,
        separator=settings.separator,
        width=settings.column_width,
    )

    output = get_output()
    if output.format == OutputFormat.JSON:
        output.print_data(json.dumps(
            [{"text": c.text, "display_suffix": c.display_suffix} for c in completions],
            indent=2,
            ensure_ascii=False,
        ))
    elif output.format == OutputFormat.RICH:
        print_table(
            ["Candidate", "Display"],
            [[c.text, c.display_suffix] for c in completions],
            title=path,
        )
    else:
        for c in completions:
            output.print_data(f"{c.text}\t{c.display_suffix}")


def table_command(
    path: Optional[str] = typer.Argument(
        None, help="Command path to show (default: the root command)."
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Root command name (default: just)."
    ),
) -> None:
    """Show the flags and descriptions registered for a command path.

    Raises:
        typer.Exit: With code 4 if the path has no table entry.

    Example::

        justcomplete table
        justcomplete --json table just
    """
    from justcomplete.completer import table_for
    from justcomplete.exceptions import CommandPathNotFoundError

    settings = _resolve(command, None)
    table = table_for(settings.command)
    key = path if path is not None else settings.command

    candidates = table.get(key)
    if candidates is None:
        exc = CommandPathNotFoundError(f"No completions registered for '{key}'")
        error(str(exc))
        raise typer.Exit(code=exc.exit_code)

    print_table(
        ["Flag", "Description"],
        [[c.text, c.description] for c in candidates],
        title=key,
    )
