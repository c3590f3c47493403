"""CLI tests for eval and repl commands."""

import json

import pytest
from click.testing import CliRunner

from redex.cli import main as cli_main


class TestEvalCommand:
    """Tests for the eval CLI command."""

    @pytest.fixture
    def runner(self):
        """CLI runner."""
        return CliRunner()

    def test_eval_expression(self, runner):
        """Arguments are joined and evaluated."""
        result = runner.invoke(cli_main, ["eval", "1", "+", "2", "*", "3"])
        assert result.exit_code == 0
        assert "Result: 7" in result.output

    def test_eval_shows_env_and_provenance(self, runner):
        """Bindings are listed after the result."""
        result = runner.invoke(cli_main, ["eval", "let x = 4"])
        assert result.exit_code == 0
        assert "Env: x=4" in result.output
        assert "Provenance: x=script" in result.output

    def test_eval_from_stdin(self, runner):
        """Multi-line programs can be piped in."""
        result = runner.invoke(cli_main, ["eval"], input="let a = 1\nlet b = 2\na + b\n")
        assert result.exit_code == 0
        assert "Result: 3" in result.output

    def test_eval_with_context(self, runner):
        """--context injects numeric bindings."""
        result = runner.invoke(cli_main, ["eval", "-c", "x=10", "-c", "y=2.5", "x * y"])
        assert result.exit_code == 0
        assert "Result: 25.0" in result.output

    def test_eval_bad_context(self, runner):
        """Non-numeric context is a usage error."""
        result = runner.invoke(cli_main, ["eval", "-c", "x=abc", "x"])
        assert result.exit_code == 2
        assert "must be numeric" in result.output

    def test_eval_malformed_context(self, runner):
        """Context items need NAME=VALUE form."""
        result = runner.invoke(cli_main, ["eval", "-c", "x", "x"])
        assert result.exit_code == 2

    def test_eval_json_output(self, runner):
        """--json prints the structured result."""
        result = runner.invoke(cli_main, ["eval", "--json", "let x = 2\nx + 1"])
        assert result.exit_code == 0
        output = json.loads(result.output)
        assert output["success"] is True
        assert output["result"] == 3
        assert output["env"] == {"x": 2}
        assert output["errors"] == []

    @pytest.mark.parametrize("source,message", [
        ("1 +", "unexpected end"),
        ("nope", "undefined variable `nope`"),
        ("1 / 0", "division by zero"),
    ])
    def test_eval_errors(self, runner, source, message):
        """Typed errors print a message and exit 1."""
        result = runner.invoke(cli_main, ["eval", source])
        assert result.exit_code == 1
        assert f"Error: {message}" in result.output

    def test_eval_nothing(self, runner):
        """Empty stdin is rejected."""
        result = runner.invoke(cli_main, ["eval"], input="")
        assert result.exit_code == 1

    def test_version(self, runner):
        """--version reports the package version."""
        from redex import __version__
        result = runner.invoke(cli_main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestReplCommand:
    """Tests for the interactive REPL."""

    @pytest.fixture
    def runner(self):
        """CLI runner."""
        return CliRunner()

    def test_session_keeps_bindings(self, runner):
        """Earlier lines' bindings are visible to later lines."""
        result = runner.invoke(cli_main, ["repl"], input="let x = 10\nx * 2\nexit\n")
        assert result.exit_code == 0
        assert "=> 10" in result.output
        assert "=> 20" in result.output

    def test_errors_do_not_end_session(self, runner):
        """A failing line is reported and the loop continues."""
        result = runner.invoke(cli_main, ["repl"], input="1 / 0\n2 + 2\n")
        assert result.exit_code == 0
        assert "Error: division by zero" in result.output
        assert "=> 4" in result.output

    def test_history_and_clear(self, runner):
        """history lists inputs; clear resets the session."""
        result = runner.invoke(
            cli_main, ["repl"], input="let a = 1\nhistory\nclear\na\nquit\n"
        )
        assert "1. let a = 1" in result.output
        assert "Environment and history cleared" in result.output
        assert "undefined variable `a`" in result.output

    def test_help(self, runner):
        """help prints usage."""
        result = runner.invoke(cli_main, ["repl"], input="help\n")
        assert "Commands:" in result.output

    def test_eof_ends_session(self, runner):
        """End of input exits cleanly."""
        result = runner.invoke(cli_main, ["repl"], input="")
        assert result.exit_code == 0
