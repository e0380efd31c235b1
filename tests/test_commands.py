"""Tests for the demo REPL's slash commands and help text."""

from unittest.mock import patch

import pytest

from lineedit.commands import QUIT, command_names, handle_slash_command
from lineedit.config import HintColor
from lineedit.help import COMMAND_HELP


def run(line, editor, **kwargs):
    return handle_slash_command(line, editor=editor, **kwargs)


class TestHelpCoverage:
    def test_all_commands_have_help(self):
        expected = {
            "historylen", "history", "multiline", "hintcolor", "hintbold",
            "save", "load", "clear", "help", "quit",
        }
        assert set(COMMAND_HELP.keys()) >= expected

    def test_command_names_have_slash(self):
        assert all(name.startswith("/") for name in command_names())
        assert "/historylen" in command_names()


class TestHistoryCommands:
    def test_historylen(self, editor):
        editor.history.push("1", "2", "3")
        result = run("/historylen 2", editor)
        assert result == "History length set to 2"
        assert editor.history.capacity == 2
        assert list(editor.history) == ["2", "3"]

    def test_historylen_usage(self, editor):
        assert "Usage" in run("/historylen", editor)

    def test_historylen_not_a_number(self, editor):
        assert "Not a number" in run("/historylen lots", editor)

    def test_historylen_zero_reports_error(self, editor):
        result = run("/historylen 0", editor)
        assert result.startswith("[red]Error:[/red]")
        assert editor.history.capacity == 100

    def test_history_listing(self, editor):
        editor.history.push("ls", "pwd")
        result = run("/history", editor)
        assert result.splitlines() == ["   0  ls", "   1  pwd"]

    def test_history_empty(self, editor):
        assert "empty" in run("/history", editor)

    def test_save_and_load(self, editor, tmp_path):
        path = str(tmp_path / "h.txt")
        editor.history.push("a", "b")
        assert run("/save", editor, history_path=path) == f"Saved 2 entries to {path}"

        editor.history.clear()
        assert run(f"/load {path}", editor) == f"Loaded 2 entries from {path}"
        assert list(editor.history) == ["a", "b"]

    def test_save_without_path(self, editor):
        assert "Usage: /save" in run("/save", editor)

    def test_load_missing_file_reports_error(self, editor, tmp_path):
        result = run(f"/load {tmp_path / 'missing.txt'}", editor)
        assert result.startswith("[red]Error:[/red]")


class TestSettingCommands:
    def test_multiline_off(self, editor, engine):
        assert run("/multiline off", editor) == "Multi-line mode disabled."
        assert editor.multiline is False
        engine.set_multiline.assert_called_with(False)

    def test_multiline_on(self, editor):
        editor.set_multiline(False)
        assert run("/multiline ON", editor) == "Multi-line mode enabled."
        assert editor.multiline is True

    def test_multiline_usage(self, editor):
        assert "Usage" in run("/multiline maybe", editor)

    def test_hintcolor_by_name(self, editor):
        assert run("/hintcolor red", editor) == "Hint color set to red"
        assert editor.hint_color is HintColor.RED

    def test_hintcolor_by_code(self, editor):
        assert run("/hintcolor 36", editor) == "Hint color set to cyan"

    def test_hintcolor_out_of_range(self, editor):
        assert run("/hintcolor 38", editor).startswith("[red]Error:[/red]")
        assert editor.hint_color is None

    def test_hintcolor_off(self, editor):
        editor.hint_color = 31
        assert run("/hintcolor off", editor) == "Hint color cleared"
        assert editor.hint_color is None

    def test_hintcolor_unknown_name(self, editor):
        assert "Usage" in run("/hintcolor purple", editor)

    def test_hintbold(self, editor):
        assert run("/hintbold on", editor) == "Bold hints enabled"
        assert editor.hint_bold is True
        assert run("/hintbold off", editor) == "Bold hints disabled"

    def test_clear(self, editor, engine):
        assert run("/clear", editor) is None
        engine.clear_screen.assert_called_once_with()


class TestOtherCommands:
    def test_quit(self, editor):
        assert run("/quit", editor) is QUIT

    def test_unknown(self, editor):
        result = run("/bogus", editor)
        assert "Unknown" in result

    @pytest.mark.parametrize("line,target", [
        ("/help", "lineedit.commands.print_help_overview"),
        ("/help historylen", "lineedit.commands.print_help_topic"),
    ])
    def test_help_prints_directly(self, editor, line, target):
        with patch(target) as printer:
            assert run(line, editor) is None
        printer.assert_called_once()
