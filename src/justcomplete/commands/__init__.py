"""Built-in CLI sub-commands for justcomplete.

This package groups all Typer sub-command modules that form the CLI's
top-level command tree:

* :mod:`~justcomplete.commands.complete` -- query the completer
  (``complete``) and inspect the completion table (``table``).
* :mod:`~justcomplete.commands.script` -- print and install per-shell
  completion scripts.
* :mod:`~justcomplete.commands.config` -- view and modify global settings.

Each module either exports a :class:`typer.Typer` sub-application (for
multi-command groups like ``script`` and ``config``) or plain callback
functions registered directly on the root app (for single commands like
``complete``).
"""
