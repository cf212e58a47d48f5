"""Terminal output for the justcomplete CLI.

Two streams, two jobs:

* **stdout** carries data only: completion lines, rendered scripts, flag
  tables, the config dump. A shell calling ``justcomplete complete`` offers
  every stdout line as a candidate, so nothing else may land there.
* **stderr** carries everything meant for a person: errors, confirmations,
  next-step hints and ``--verbose`` debug lines.

The data format is picked once per invocation. ``AUTO`` becomes ``RICH`` on
an interactive terminal with colour allowed and ``PLAIN`` otherwise, which
is the case whenever a shell completer captures the output. Colour is off
when ``--no-color`` is passed, ``NO_COLOR`` is set, or ``TERM=dumb``.

:func:`~justcomplete.app.main_callback` installs one :class:`OutputManager`
with :func:`set_output`; commands call the module-level helpers below.
"""

from __future__ import annotations

import json
import os
import sys
from enum import Enum
from typing import Any, Optional

from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table


class OutputFormat(str, Enum):
    """How data written to stdout is shaped."""

    AUTO = "auto"
    JSON = "json"
    PLAIN = "plain"
    RICH = "rich"


class OutputManager:
    """Routes data to stdout and diagnostics to stderr.

    Args:
        format: Requested data format; ``AUTO`` is resolved on construction.
        no_color: Force colour and markup off.
        quiet: Drop informational stderr messages (errors still print).
        verbose: Print :meth:`debug` messages.
    """

    def __init__(
        self,
        format: OutputFormat = OutputFormat.AUTO,
        no_color: bool = False,
        quiet: bool = False,
        verbose: bool = False,
    ) -> None:
        self._no_color = no_color or _should_disable_color()
        self._quiet = quiet
        self._verbose = verbose

        if format == OutputFormat.AUTO:
            interactive = _is_tty() and not self._no_color
            format = OutputFormat.RICH if interactive else OutputFormat.PLAIN
        self._format = format

        self._stdout = Console(
            file=sys.stdout,
            no_color=self._no_color,
            force_terminal=format == OutputFormat.RICH,
        )
        self._stderr = Console(file=sys.stderr, no_color=self._no_color, stderr=True)

    @property
    def format(self) -> OutputFormat:
        """The resolved data format; never ``AUTO``."""
        return self._format

    # --- stdout ---

    def print_data(self, text: str) -> None:
        """Write *text* and a newline to stdout with no styling."""
        print(text, file=sys.stdout, flush=True)

    def format_response(self, data: dict[str, Any]) -> None:
        """Write a mapping such as a config dump.

        JSON mode dumps it, plain mode writes ``key<TAB>value`` lines and rich
        mode shows highlighted JSON.
        """
        if self._format == OutputFormat.PLAIN:
            for key, value in data.items():
                self.print_data(f"{key}\t{value}")
            return

        text = json.dumps(data, indent=2, ensure_ascii=False, default=str)
        if self._format == OutputFormat.JSON:
            self.print_data(text)
        else:
            self._stdout.print(Syntax(text, "json", theme="monokai", word_wrap=True))

    def print_table(
        self,
        headers: list[str],
        rows: list[list[str]],
        title: Optional[str] = None,
    ) -> None:
        """Write rows under *headers*.

        JSON mode emits a list of objects keyed by header, plain mode
        tab-separated lines with the header first, rich mode a
        :class:`~rich.table.Table` titled *title*.
        """
        if self._format == OutputFormat.JSON:
            self.print_data(json.dumps(
                [dict(zip(headers, row)) for row in rows],
                indent=2,
                ensure_ascii=False,
            ))
        elif self._format == OutputFormat.PLAIN:
            for row in [headers, *rows]:
                self.print_data("\t".join(row))
        else:
            table = Table(title=title, header_style="bold cyan")
            for header in headers:
                table.add_column(header)
            for row in rows:
                table.add_row(*row)
            self._stdout.print(table)

    # --- stderr ---

    def info(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message)

    def success(self, message: str) -> None:
        if not self._quiet:
            self._diagnostic(message, style="green")

    def suggest(self, message: str) -> None:
        """Print a next step such as an activation hint, prefixed with an arrow."""
        if not self._quiet:
            self._diagnostic(f"→ {message}", style="dim")

    def error(self, message: str) -> None:
        """Print an error. ``--quiet`` does not hide errors."""
        self._diagnostic(f"Error: {message}", style="bold red")

    def debug(self, message: str) -> None:
        if self._verbose:
            self._diagnostic(f"[debug] {message}", style="dim")

    def _diagnostic(self, message: str, style: Optional[str] = None) -> None:
        if self._no_color:
            print(message, file=sys.stderr, flush=True)
        else:
            self._stderr.print(message, style=style, markup=False, highlight=False)


def _is_tty() -> bool:
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _should_disable_color() -> bool:
    """True when ``NO_COLOR`` is set to anything or ``TERM`` is ``dumb``."""
    return "NO_COLOR" in os.environ or os.environ.get("TERM") == "dumb"


# --- global instance ---

_output: Optional[OutputManager] = None


def get_output() -> OutputManager:
    """Return the installed :class:`OutputManager`, creating an ``AUTO`` one if needed."""
    global _output
    if _output is None:
        _output = OutputManager()
    return _output


def set_output(output: OutputManager) -> None:
    global _output
    _output = output


def reset_output() -> None:
    """Drop the installed manager so the next call builds a fresh one."""
    global _output
    _output = None


def print_data(text: str) -> None:
    get_output().print_data(text)


def format_response(data: dict[str, Any]) -> None:
    get_output().format_response(data)


def print_table(
    headers: list[str],
    rows: list[list[str]],
    title: Optional[str] = None,
) -> None:
    get_output().print_table(headers, rows, title)


def info(message: str) -> None:
    get_output().info(message)


def success(message: str) -> None:
    get_output().success(message)


def suggest(message: str) -> None:
    get_output().suggest(message)


def error(message: str) -> None:
    get_output().error(message)


def debug(message: str) -> None:
    get_output().debug(message)
