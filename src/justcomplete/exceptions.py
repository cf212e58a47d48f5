"""Exception hierarchy for justcomplete.

All exceptions inherit from :class:`JustCompleteError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`justcomplete.exit_codes`.
The top-level error handler in :func:`justcomplete.app.main` catches
``JustCompleteError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

The completer never raises for an unknown command path: an empty candidate
list is the normal answer there. These exceptions belong to the CLI surface
(script rendering, table inspection, configuration).

Subclass hierarchy::

    JustCompleteError (exit 1)
    +-- InvalidUsageError            (exit 2)
    |   +-- UnsupportedShellError    (exit 2)
    +-- CommandPathNotFoundError     (exit 4)
    +-- ConfigError                  (exit 1)
"""

from justcomplete.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_NOT_FOUND,
)


class JustCompleteError(Exception):
    """Base exception for all justcomplete errors.

    Every subclass sets a class-level ``exit_code`` corresponding to one of
    the constants in :mod:`justcomplete.exit_codes`. The entry point catches
    this exception type and calls ``sys.exit(exc.exit_code)``.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(JustCompleteError):
    """Raised for invalid CLI arguments or missing required parameters."""

    exit_code = EXIT_INVALID_USAGE


class UnsupportedShellError(InvalidUsageError):
    """Raised when a script is requested for a shell with no renderer."""

    def __init__(self, shell: str, supported: tuple[str, ...]):
        super().__init__(
            f"Unsupported shell: {shell}. Supported: {', '.join(supported)}"
        )
        self.shell = shell


class CommandPathNotFoundError(JustCompleteError):
    """Raised when a command path is inspected explicitly but has no table entry."""

    exit_code = EXIT_NOT_FOUND


class ConfigError(JustCompleteError):
    """Raised for configuration problems (invalid JSON, bad values, bad env overrides)."""

    exit_code = EXIT_GENERIC_FAILURE
