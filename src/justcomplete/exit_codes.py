"""Numeric process exit codes following `clig.dev <https://clig.dev/>`_ conventions.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~justcomplete.exceptions.JustCompleteError` subclass.
Shell glue can inspect the exit code to tell a bad invocation apart from a
broken configuration without parsing stderr.

Example::

    $ justcomplete script show tcsh
    $ echo $?
    2   # EXIT_INVALID_USAGE -- the shell is not supported
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments (e.g. an unsupported shell)."""

EXIT_NOT_FOUND = 4
"""The requested command path is not present in the completion table."""
