"""Turn the words typed on a command line into completion candidates.

The shell hands over every word on the current line; the last one is the
word being completed and may be incomplete. :func:`complete` then:

1. Rebuilds the *command path*: the root name followed by each word after
   the program name, joined by ``;``, stopping at the first word that starts
   with ``-`` (flags never extend the path).
2. Looks the path up in the completion table. A miss yields no completions;
   shells treat that as normal, so nothing is raised.
3. Pads every candidate's text to a fixed column width, measured in display
   cells, and pairs it with a display suffix ending in its description.

Matching the partial word against the candidates is left to the shell.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import lru_cache
from typing import NamedTuple, Optional

from justcomplete.models import Candidate, display_width
from justcomplete.table import COMPLETION_TABLE, ROOT_COMMAND, build_completion_table

logger = logging.getLogger(__name__)

DEFAULT_COLUMN_WIDTH = 14
"""Display cells reserved for candidate text before its description."""

DEFAULT_SEPARATOR = ";"
"""Joins the words of a command path."""

__all__ = [
    "DEFAULT_COLUMN_WIDTH",
    "DEFAULT_SEPARATOR",
    "Completion",
    "command_path",
    "complete",
    "display_width",
    "table_for",
]


class Completion(NamedTuple):
    """A ``(replacement text, display suffix)`` pair handed back to the shell."""

    text: str
    display_suffix: str

    @property
    def display(self) -> str:
        """Full menu line: the text followed by its padded description."""
        return self.text + self.display_suffix


def command_path(
    words: Sequence[str],
    command: str = ROOT_COMMAND,
    separator: str = DEFAULT_SEPARATOR,
) -> str:
    """Rebuild the command path from the words typed so far.

    The first word (the program name as typed) and the last word (the one
    being completed) never contribute.

    Args:
        words: Every word on the current command line.
        command: Root name the path starts from.
        separator: String placed between path words.

    Returns:
        The lookup key, e.g. ``"just"``.

    Example::

        >>> command_path(["just", "--list", ""])
        'just'
    """
    path = command
    for word in words[1:-1]:
        if word.startswith("-"):
            break
        path = f"{path}{separator}{word}"
    return path


@lru_cache(maxsize=8)
def table_for(command: str) -> Mapping[str, tuple[Candidate, ...]]:
    """Return the completion table keyed under *command*.

    The default ``just`` table is the module constant; other names (aliases
    such as ``j``) get the same candidates under their own root key.
    """
    if command == ROOT_COMMAND:
        return COMPLETION_TABLE
    return build_completion_table(command)


def complete(
    words: Sequence[str],
    table: Optional[Mapping[str, tuple[Candidate, ...]]] = None,
    command: str = ROOT_COMMAND,
    separator: str = DEFAULT_SEPARATOR,
    width: int = DEFAULT_COLUMN_WIDTH,
) -> list[Completion]:
    """Return the completions applicable after *words*.

    Args:
        words: Every word on the current command line, including the program
            name and the (possibly empty) word being completed.
        table: Completion table to consult. Defaults to :func:`table_for`
            *command*.
        command: Root name of the command path.
        separator: String placed between command path words.
        width: Column width, in display cells, that candidate text is padded
            to before the description.

    Returns:
        One :class:`Completion` per candidate, in table order. Empty when the
        command path is unknown.
    """
    if table is None:
        table = table_for(command)

    path = command_path(words, command=command, separator=separator)
    candidates = table.get(path)
    if candidates is None:
        logger.debug("No completions for command path %r", path)
        return []

    return [Completion(c.text, c.display_suffix(width)) for c in candidates]
