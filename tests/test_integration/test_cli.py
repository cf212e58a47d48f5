"""End-to-end tests for the justcomplete CLI through Typer's CliRunner."""

from __future__ import annotations

import json

import pytest

from justcomplete.app import app


PREFIX = ["--no-color"]


@pytest.fixture
def invoke(cli_runner, isolated_config):
    def _invoke(*args: str, **kwargs):
        return cli_runner.invoke(app, [*PREFIX, *args], **kwargs)

    return _invoke


class TestVersion:
    def test_version(self, cli_runner):
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "justcomplete 0.1.0" in result.output


class TestComplete:
    def test_root_path_lists_every_candidate(self, invoke):
        result = invoke("complete", "--", "just", "")
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert len(lines) == 32
        assert lines[0] == "--color\t" + " " * 8 + "Print colorful output"
        assert lines[-1] == "--version\t" + " " * 6 + "Print version information"

    def test_partial_word_returns_full_table(self, invoke):
        result = invoke("complete", "--", "just", "--h")
        assert result.exit_code == 0
        texts = [line.split("\t")[0] for line in result.stdout.splitlines()]
        assert "--help" in texts
        assert "-h" in texts

    def test_flags_after_root_keep_path(self, invoke):
        result = invoke("complete", "--", "just", "--quiet", "build", "")
        assert len(result.stdout.splitlines()) == 32

    def test_unknown_path_prints_nothing(self, invoke):
        result = invoke("complete", "--", "just", "build", "")
        assert result.exit_code == 0
        assert result.stdout == ""

    def test_no_words_completes_root(self, invoke):
        result = invoke("complete")
        assert result.exit_code == 0
        assert len(result.stdout.splitlines()) == 32

    def test_json(self, invoke):
        result = invoke("--json", "complete", "--", "just", "")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert len(data) == 32
        assert data[1] == {"text": "-f", "display_suffix": " " * 13 + "Use JUSTFILE as justfile."}

    def test_width_option(self, invoke):
        result = invoke("complete", "-w", "20", "--", "just", "")
        line = next(row for row in result.stdout.splitlines() if row.startswith("-q\t"))
        assert line == "-q\t" + " " * 19 + "Suppress all output"

    def test_alias_command(self, invoke):
        result = invoke("complete", "-c", "j", "--", "j", "")
        assert len(result.stdout.splitlines()) == 32

    def test_env_width(self, invoke, monkeypatch):
        monkeypatch.setenv("JUSTCOMPLETE_COLUMN_WIDTH", "3")
        result = invoke("complete", "--", "just", "")
        assert result.stdout.splitlines()[0] == "--color\t Print colorful output"

    def test_invalid_env_width(self, invoke, monkeypatch):
        monkeypatch.setenv("JUSTCOMPLETE_COLUMN_WIDTH", "wide")
        result = invoke("complete", "--", "just", "")
        assert result.exit_code == 1
        assert "JUSTCOMPLETE_COLUMN_WIDTH must be an integer" in result.output

    def test_leaves_filesystem_untouched(self, invoke, isolated_config):
        result = invoke("complete", "--", "just", "")
        assert result.exit_code == 0
        assert not (isolated_config / "config").exists()

    def test_json_flag_with_broken_config(self, invoke, isolated_config):
        config_dir = isolated_config / "config" / "justcomplete"
        config_dir.mkdir(parents=True)
        (config_dir / "config.json").write_text("{not json")
        result = invoke("--json", "complete", "--", "just", "")
        assert result.exit_code == 1
        assert "Invalid global config" in result.output

    def test_verbose_reports_path(self, invoke):
        result = invoke("-v", "complete", "--", "just", "nope", "")
        assert result.exit_code == 0
        assert "[debug] Command path: 'just;nope'" in result.output


class TestTable:
    def test_root_table(self, invoke):
        result = invoke("--plain", "table")
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert lines[0] == "Flag\tDescription"
        assert lines[1] == "--color\tPrint colorful output"
        assert len(lines) == 33

    def test_json_table(self, invoke):
        result = invoke("--json", "table", "just")
        data = json.loads(result.stdout)
        assert {"Flag": "-V", "Description": "Print version information"} in data

    def test_unknown_path(self, invoke):
        result = invoke("table", "just;build")
        assert result.exit_code == 4
        assert "No completions registered for 'just;build'" in result.output


class TestScript:
    @pytest.mark.parametrize(
        ("shell", "marker"),
        [
            ("bash", "complete -F _just"),
            ("zsh", "#compdef just"),
            ("fish", "complete -c just -s q -l quiet"),
            ("elvish", "set edit:completion:arg-completer[just]"),
            ("powershell", "Register-ArgumentCompleter"),
        ],
    )
    def test_show(self, invoke, shell, marker):
        result = invoke("script", "show", shell)
        assert result.exit_code == 0
        assert marker in result.stdout

    def test_show_alias(self, invoke):
        result = invoke("script", "show", "fish", "--command", "j")
        assert "complete -c j -s h -l help" in result.stdout

    def test_show_unsupported(self, invoke):
        result = invoke("script", "show", "tcsh")
        assert result.exit_code == 2
        assert "Unsupported shell: tcsh" in result.output

    def test_install_explicit_shell(self, invoke, isolated_config):
        result = invoke("script", "install", "fish")
        assert result.exit_code == 0
        target = isolated_config / ".config" / "fish" / "completions" / "just.fish"
        assert target.is_file()
        assert "fish completion installed" in result.output

    def test_install_detects_shell(self, invoke, isolated_config, monkeypatch):
        monkeypatch.setenv("SHELL", "/usr/bin/zsh")
        result = invoke("script", "install")
        assert result.exit_code == 0
        assert (isolated_config / ".zfunc" / "_just").is_file()
        assert "fpath+=~/.zfunc" in result.output

    def test_install_powershell_prints_instructions(self, invoke):
        result = invoke("script", "install", "powershell")
        assert result.exit_code == 0
        assert "no standard completion directory" in result.output

    def test_install_powershell_with_path(self, invoke, isolated_config):
        target = isolated_config / "just.ps1"
        result = invoke("script", "install", "pwsh", "--path", str(target))
        assert result.exit_code == 0
        assert target.is_file()

    def test_install_unsupported(self, invoke):
        result = invoke("script", "install", "tcsh")
        assert result.exit_code == 2


class TestConfig:
    def test_show_defaults(self, invoke):
        result = invoke("--json", "-q", "config", "show")
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["completer"] == {"command": "just", "column_width": 14, "separator": ";"}

    def test_set_persists(self, invoke, isolated_config):
        result = invoke("config", "set", "completer.column_width", "20")
        assert result.exit_code == 0
        assert (isolated_config / "config" / "justcomplete" / "config.json").is_file()

        result = invoke("complete", "--", "just", "")
        assert result.stdout.splitlines()[0] == "--color\t" + " " * 14 + "Print colorful output"

    def test_set_string_value(self, invoke):
        invoke("config", "set", "completer.command", "j")
        result = invoke("complete", "--", "j", "")
        assert len(result.stdout.splitlines()) == 32

    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("completer.nope", "1"),
            ("nope.column_width", "1"),
            ("completer", "1"),
            ("completer.column_width", "wide"),
            ("completer.column_width", "0"),
        ],
    )
    def test_set_rejects(self, invoke, key, value):
        result = invoke("config", "set", key, value)
        assert result.exit_code == 2

    def test_reset_force(self, invoke):
        invoke("config", "set", "completer.column_width", "20")
        result = invoke("--force", "config", "reset")
        assert result.exit_code == 0

        result = invoke("--json", "-q", "config", "show")
        assert json.loads(result.stdout)["completer"]["column_width"] == 14

    def test_reset_declined(self, invoke):
        invoke("config", "set", "completer.column_width", "20")
        result = invoke("config", "reset", input="n\n")
        assert result.exit_code == 0
        assert "Cancelled." in result.output

        result = invoke("--json", "-q", "config", "show")
        assert json.loads(result.stdout)["completer"]["column_width"] == 20

    def test_saved_output_format(self, invoke):
        invoke("config", "set", "output.format", "json")
        result = invoke("complete", "--", "just", "")
        assert len(json.loads(result.stdout)) == 32

        result = invoke("--plain", "complete", "--", "just", "")
        assert len(result.stdout.splitlines()) == 32

    def test_set_rejects_unknown_format(self, invoke):
        result = invoke("config", "set", "output.format", "xml")
        assert result.exit_code == 2
