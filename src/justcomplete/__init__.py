"""justcomplete -- tab-completion tables and shell scripts for ``just``.

This package owns the completion surface of the ``just`` command runner: a
static table of its flags and their descriptions, a pure completer that maps
the words typed so far to the candidates offered at that position, and
renderers that adapt the same table to each supported shell.

Typical workflow::

    justcomplete script install zsh        # write a static zsh script
    justcomplete complete -- just --h      # ask the completer directly

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models shared across the package.
    table: The flag definitions and the completion table built from them.
    completer: Command-path reconstruction, lookup, and display padding.
    shells: Per-shell script rendering and installation.
    config: XDG-aware configuration and precedence resolution.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
