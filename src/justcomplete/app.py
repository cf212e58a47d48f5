"""Typer application factory and CLI entry point for justcomplete.

This module wires together the top-level Typer application and registers
the built-in sub-commands (``complete``, ``table``, ``script``,
``config``).

The :func:`main` function is the console-script entry point declared in
``pyproject.toml``. It installs signal handlers and invokes the Typer app.
:class:`~justcomplete.exceptions.JustCompleteError` exits with its own
code; any other unhandled exception is written to a crash log under the
data directory.

See Also:
    :mod:`justcomplete.config`: Configuration resolution.
    :mod:`justcomplete.output`: Output formatting initialised in :func:`main_callback`.
"""

from __future__ import annotations

import logging
import signal
import sys
import traceback
from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from justcomplete import __version__
from justcomplete.exit_codes import EXIT_GENERIC_FAILURE

if TYPE_CHECKING:
    from justcomplete.output import OutputFormat


app = typer.Typer(
    name="justcomplete",
    help="Tab-completion tables and shell scripts for the just command runner.",
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

# ------------------------------------------------------------------ #
# Commands
# ------------------------------------------------------------------ #

from justcomplete.commands.complete import complete_command, table_command  # noqa: E402
from justcomplete.commands.config import config_app  # noqa: E402
from justcomplete.commands.script import script_app  # noqa: E402

app.command(
    "complete",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)(complete_command)
app.command("table")(table_command)
app.add_typer(script_app, name="script", help="Print and install shell completion scripts.")
app.add_typer(config_app, name="config", help="Configuration management.")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"justcomplete {__version__}")
        raise typer.Exit()


def _resolve_format(cli_format: Optional[str]) -> OutputFormat:
    """Return the output format from the flag, else from the user config.

    An unreadable config falls back to the flag or ``AUTO``; the sub-command
    that loads the config reports the problem.
    """
    from justcomplete.config import resolve_config
    from justcomplete.exceptions import ConfigError
    from justcomplete.output import OutputFormat

    try:
        return OutputFormat(resolve_config(cli_format=cli_format).output.format)
    except ConfigError:
        return OutputFormat(cli_format or OutputFormat.AUTO)


def _configure_logging(verbose: bool) -> None:
    """Route library log records to stderr through Rich.

    Only warnings surface by default; ``--verbose`` shows debug records such
    as command-path lookup misses.
    """
    package_logger = logging.getLogger("justcomplete")
    package_logger.handlers[:] = [
        RichHandler(console=Console(stderr=True), show_path=False)
    ]
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="JSON output format."
    ),
    plain_output: bool = typer.Option(
        False, "--plain", help="Plain text output."
    ),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable color output."
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug output."
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Skip confirmations."
    ),
) -> None:
    """Root callback executed before every sub-command.

    Initialises the global :class:`~justcomplete.output.OutputManager` from
    CLI flags and stores shared options in the Typer context so that
    sub-commands can read them via ``ctx.obj``.

    Args:
        ctx: Typer invocation context.
        version: If ``True``, print the version string and exit.
        json_output: Force JSON output format.
        plain_output: Force plain-text output format.
        no_color: Disable all colour and Rich markup.
        quiet: Suppress non-essential diagnostic output.
        verbose: Enable debug-level diagnostic output.
        force: Skip interactive confirmations.
    """
    from justcomplete.output import OutputFormat, OutputManager, set_output

    cli_format = None
    if json_output:
        cli_format = OutputFormat.JSON.value
    elif plain_output:
        cli_format = OutputFormat.PLAIN.value
    fmt = _resolve_format(cli_format)

    output = OutputManager(
        format=fmt,
        no_color=no_color,
        quiet=quiet,
        verbose=verbose,
    )
    set_output(output)
    _configure_logging(verbose)

    ctx.ensure_object(dict)
    ctx.obj["force"] = force
    ctx.obj["verbose"] = verbose


def _setup_signal_handlers() -> None:
    """Install a SIGINT handler so Ctrl-C exits cleanly."""

    def _handler(signum: int, frame: Any) -> None:  # noqa: ANN401
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)

    signal.signal(signal.SIGINT, _handler)


def _write_crash_log(exc: Exception) -> str:
    """Write a crash traceback to disk and return the log file path.

    Args:
        exc: The unhandled exception to log.

    Returns:
        Absolute path to the written crash log file.
    """
    from justcomplete.config import get_data_dir

    logs_dir = get_data_dir() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    log_path = logs_dir / f"crash-{timestamp}.log"
    log_path.write_text(
        "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    )
    return str(log_path)


def main() -> None:
    """CLI entry point invoked by the ``justcomplete`` console script.

    Unhandled :class:`~justcomplete.exceptions.JustCompleteError` instances
    cause a clean exit with the error's ``exit_code``. All other exceptions
    produce a crash log and a generic failure exit.

    Raises:
        SystemExit: Always raised (either by Typer or explicitly).
    """
    _setup_signal_handlers()
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        from justcomplete.exceptions import JustCompleteError
        from justcomplete.output import error

        if isinstance(exc, JustCompleteError):
            error(str(exc))
            sys.exit(exc.exit_code)
        else:
            log_path = _write_crash_log(exc)
            error(f"Unexpected error. Debug log: {log_path}")
            sys.exit(EXIT_GENERIC_FAILURE)
