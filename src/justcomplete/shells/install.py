"""Write rendered completion scripts to the user's shell configuration.

Each shell looks for completion files in its own user-level directory:

* **bash**: ``~/.local/share/bash-completion/completions/<command>``
* **zsh**: ``~/.zfunc/_<command>`` (the directory must be on ``$fpath``)
* **fish**: ``~/.config/fish/completions/<command>.fish``
* **elvish**: ``~/.config/elvish/lib/<command>-completions.elv``
* **powershell**: no standard location; the script is sourced from the
  profile instead, so :func:`default_install_path` returns ``None``.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from justcomplete.completer import DEFAULT_COLUMN_WIDTH, DEFAULT_SEPARATOR
from justcomplete.config import atomic_write
from justcomplete.exceptions import InvalidUsageError
from justcomplete.shells.renderer import normalize_shell, render_script
from justcomplete.table import ROOT_COMMAND

logger = logging.getLogger(__name__)

DEFAULT_PATHS: dict[str, str] = {
    "bash": "~/.local/share/bash-completion/completions/{command}",
    "zsh": "~/.zfunc/_{command}",
    "fish": "~/.config/fish/completions/{command}.fish",
    "elvish": "~/.config/elvish/lib/{command}-completions.elv",
}

ACTIVATION_HINTS: dict[str, str] = {
    "bash": "Restart your shell or run: source {path}",
    "zsh": "Add to .zshrc: fpath+=~/.zfunc && autoload -Uz compinit && compinit",
    "fish": "Restart your shell to activate completions.",
    "elvish": "Add to rc.elv: use {command}-completions",
    "powershell": "Add to your $PROFILE: . {path}",
}


def default_install_path(shell: str, command: str = ROOT_COMMAND) -> Optional[Path]:
    """Return the user-level completion file for *shell*, or ``None`` for PowerShell.

    Raises:
        UnsupportedShellError: If *shell* is not supported.
    """
    name = normalize_shell(shell)
    template = DEFAULT_PATHS.get(name)
    if template is None:
        return None
    return Path(template.format(command=command)).expanduser()


def install_script(
    shell: str,
    command: str = ROOT_COMMAND,
    column_width: int = DEFAULT_COLUMN_WIDTH,
    separator: str = DEFAULT_SEPARATOR,
    path: Optional[Path] = None,
) -> Path:
    """Render the script for *shell* and write it atomically.

    Args:
        shell: Target shell name.
        command: Command the script completes.
        column_width: Display cells reserved for candidate text.
        separator: Command-path separator used by the script.
        path: Destination file. Defaults to :func:`default_install_path`;
            required for PowerShell.

    Returns:
        The path the script was written to.

    Raises:
        UnsupportedShellError: If *shell* is not supported.
        InvalidUsageError: If no *path* is given and the shell has no
            default location.
    """
    name = normalize_shell(shell)
    target = path if path is not None else default_install_path(name, command)
    if target is None:
        raise InvalidUsageError(
            f"{name} has no default completion directory; pass --path"
        )

    script = render_script(
        name, command=command, column_width=column_width, separator=separator
    )
    atomic_write(target, script)
    logger.info("Wrote %s completion script to %s", name, target)
    return target


def activation_hint(shell: str, path: Path, command: str = ROOT_COMMAND) -> str:
    """Return the next step the user takes to load an installed script."""
    name = normalize_shell(shell)
    return ACTIVATION_HINTS[name].format(path=path, command=command)
