"""Tests for justcomplete.table -- flag definitions and the completion table."""

from __future__ import annotations

from types import MappingProxyType

import pytest

from justcomplete.models import Candidate, Flag
from justcomplete.table import (
    COMPLETION_TABLE,
    JUST_FLAGS,
    ROOT_COMMAND,
    build_completion_table,
    flag_candidates,
    flag_for,
)


EXPECTED_ROWS = [
    (("--color",), "Print colorful output"),
    (("-f", "--justfile"), "Use JUSTFILE as justfile."),
    (("--set",), "Override VARIABLE with VALUE"),
    (("--shell",), "Invoke SHELL to run recipes"),
    (("--shell-arg",), "Invoke shell with SHELL-ARG as an argument"),
    (
        ("-d", "--working-directory"),
        "Use WORKING-DIRECTORY as working directory. --justfile must also be set",
    ),
    (("--completions",), "Print shell completion script for SHELL"),
    (("-s", "--show"), "Show information about RECIPE"),
    (("--dry-run",), "Print what just would do without doing it"),
    (("--highlight",), "Highlight echoed recipe lines in bold"),
    (("--no-highlight",), "Don't highlight echoed recipe lines in bold"),
    (("-q", "--quiet"), "Suppress all output"),
    (("--clear-shell-args",), "Clear shell arguments"),
    (("-v", "--verbose"), "Use verbose output"),
    (("--dump",), "Print entire justfile"),
    (
        ("-e", "--edit"),
        "Edit justfile with editor given by $VISUAL or $EDITOR, falling back to vim",
    ),
    (("--evaluate",), "Print evaluated variables"),
    (("--init",), "Initialize new justfile in project root"),
    (("-l", "--list"), "List available recipes and their arguments"),
    (("--summary",), "List names of available recipes"),
    (("--variables",), "List names of variables"),
    (("-h", "--help"), "Print help information"),
    (("-V", "--version"), "Print version information"),
]


class TestJustFlags:
    def test_twenty_three_flags(self):
        assert len(JUST_FLAGS) == 23

    def test_forms_and_descriptions_match_in_order(self):
        actual = [(flag.forms, flag.help) for flag in JUST_FLAGS]
        assert actual == EXPECTED_ROWS

    def test_value_taking_flags_come_first(self):
        takes_value = [flag.takes_value for flag in JUST_FLAGS]
        first_switch = takes_value.index(False)
        assert all(takes_value[:first_switch])
        assert not any(takes_value[first_switch:])

    def test_color_choices(self):
        assert flag_for("--color").possible_values == ("auto", "always", "never")

    def test_completions_choices(self):
        assert flag_for("--completions").possible_values == (
            "bash", "elvish", "fish", "powershell", "zsh",
        )

    def test_set_takes_two_values(self):
        flag = flag_for("--set")
        assert flag.value_names == ("VARIABLE", "VALUE")
        assert flag.multiple is True

    def test_value_hints(self):
        assert flag_for("-f").value_hint == "file"
        assert flag_for("--working-directory").value_hint == "dir"
        assert flag_for("--shell").value_hint == "command"


class TestFlagFor:
    def test_short_form(self):
        assert flag_for("-l").long == "list"

    def test_long_form(self):
        assert flag_for("--list").short == "l"

    def test_unknown_form(self):
        assert flag_for("--nope") is None

    def test_bare_name_is_not_a_form(self):
        assert flag_for("list") is None


class TestCompletionTable:
    def test_single_root_key(self):
        assert list(COMPLETION_TABLE) == [ROOT_COMMAND]

    def test_one_candidate_per_form(self):
        short_forms = [f.short for f in JUST_FLAGS if f.short is not None]
        assert short_forms == ["f", "d", "s", "q", "v", "e", "l", "h", "V"]
        assert len(COMPLETION_TABLE["just"]) == len(JUST_FLAGS) + len(short_forms) == 32

    def test_candidates_follow_flag_order_short_first(self):
        texts = [c.text for c in COMPLETION_TABLE["just"]]
        expected = [form for forms, _ in EXPECTED_ROWS for form in forms]
        assert texts == expected

    def test_candidate_texts_unique(self):
        texts = [c.text for c in COMPLETION_TABLE["just"]]
        assert len(texts) == len(set(texts))

    def test_both_forms_share_description(self):
        by_text = {c.text: c.description for c in COMPLETION_TABLE["just"]}
        assert by_text["-h"] == by_text["--help"] == "Print help information"

    def test_table_is_read_only(self):
        assert isinstance(COMPLETION_TABLE, MappingProxyType)
        with pytest.raises(TypeError):
            COMPLETION_TABLE["just;x"] = ()  # type: ignore[index]

    def test_candidates_are_immutable(self):
        candidate = COMPLETION_TABLE["just"][0]
        with pytest.raises(Exception):
            candidate.text = "--other"  # type: ignore[misc]

    def test_custom_root_command(self):
        table = build_completion_table("j")
        assert list(table) == ["j"]
        assert table["j"] == COMPLETION_TABLE["just"]

    def test_custom_flags(self):
        flags = [Flag(long="alpha", short="a", help="First")]
        table = build_completion_table("tool", flags)
        assert table["tool"] == (
            Candidate(text="-a", description="First"),
            Candidate(text="--alpha", description="First"),
        )


class TestFlagCandidates:
    def test_duplicate_form_rejected(self):
        flags = [
            Flag(long="one", short="x", help="One"),
            Flag(long="two", short="x", help="Two"),
        ]
        with pytest.raises(ValueError, match="duplicate flag form: -x"):
            flag_candidates(flags)

    def test_empty(self):
        assert flag_candidates([]) == ()
