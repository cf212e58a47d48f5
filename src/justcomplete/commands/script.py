"""Script commands -- print and install static completion scripts.

This module implements the ``justcomplete script`` command group with two
sub-commands:

* ``script show`` -- Print the completion script for a shell to stdout for
  manual installation or piping to a file.
* ``script install`` -- Auto-detect (or explicitly specify) the user's shell
  and write the script to that shell's completion directory.

Supported shells: bash, elvish, fish, PowerShell, zsh.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import typer

from justcomplete.output import error, info, print_data, success, suggest


script_app = typer.Typer(no_args_is_help=True)
"""Typer application for the ``script`` command group."""


@script_app.command("show")
def script_show(
    shell: str = typer.Argument(
        help="Shell to render the script for (bash, elvish, fish, powershell, zsh).",
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Command to complete (default: just)."
    ),
    width: Optional[int] = typer.Option(
        None, "--width", "-w", min=1, help="Column width for candidate text."
    ),
) -> None:
    """Print the completion script for a shell to stdout.

    Args:
        shell: Shell name, case-insensitive.
        command: Command name override (e.g. an alias such as ``j``).
        width: Column width override.

    Raises:
        typer.Exit: With code 2 if the shell is unsupported.

    Example::

        justcomplete script show bash
        justcomplete script show zsh > ~/.zfunc/_just
    """
    from justcomplete.config import resolve_config
    from justcomplete.exceptions import JustCompleteError
    from justcomplete.shells import render_script

    try:
        settings = resolve_config(cli_command=command, cli_width=width).completer
        script = render_script(
            shell,
            command=settings.command,
            column_width=settings.column_width,
            separator=settings.separator,
        )
    except JustCompleteError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    print_data(script.rstrip("\n"))


@script_app.command("install")
def script_install(
    shell: Optional[str] = typer.Argument(
        None,
        help="Shell to install completion for. Auto-detected from $SHELL if omitted.",
    ),
    path: Optional[Path] = typer.Option(
        None, "--path", "-p", help="Write the script here instead of the default location."
    ),
    command: Optional[str] = typer.Option(
        None, "--command", "-c", help="Command to complete (default: just)."
    ),
) -> None:
    """Install the completion script for a shell.

    Detects the current shell from the ``SHELL`` environment variable, or
    accepts an explicit shell name argument, and writes the script to the
    standard location for that shell:

    * **bash**: ``~/.local/share/bash-completion/completions/just``
    * **zsh**: ``~/.zfunc/_just``
    * **fish**: ``~/.config/fish/completions/just.fish``
    * **elvish**: ``~/.config/elvish/lib/just-completions.elv``
    * **powershell**: Prints manual installation instructions unless
      ``--path`` is given.

    Raises:
        typer.Exit: With code 2 if the shell is unsupported.

    Example::

        justcomplete script install
        justcomplete script install fish
        justcomplete script install powershell --path ~/just.ps1
    """
    from justcomplete.config import resolve_config
    from justcomplete.exceptions import JustCompleteError
    from justcomplete.shells import activation_hint, install_script, normalize_shell

    if shell is None:
        shell = os.path.basename(os.environ.get("SHELL", "bash"))

    try:
        name = normalize_shell(shell)
        settings = resolve_config(cli_command=command).completer

        if name == "powershell" and path is None:
            info("PowerShell has no standard completion directory.")
            info("Save the script and dot-source it from your profile:")
            suggest(f"justcomplete script show powershell > {settings.command}.ps1")
            return

        written = install_script(
            name,
            command=settings.command,
            column_width=settings.column_width,
            separator=settings.separator,
            path=path,
        )
    except JustCompleteError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except OSError as exc:
        error(f"Cannot write completion script: {exc}")
        raise typer.Exit(code=1) from None

    success(f"{name} completion installed to {written}")
    suggest(activation_hint(name, written, settings.command))
