# =============================================================================
# test_cli.py - c1check Command-Line Tests
# =============================================================================
# Tests for the c1check command, run through click's CliRunner.
# =============================================================================

import pytest
from click.testing import CliRunner

from c1_toolkit import __version__
from c1_toolkit.cli.c1check import main
from c1_toolkit.cli.errors import ExitCode, handle_cli_exception
from c1_toolkit.syntax.errors import UnexpectedEndOfInputError


VALID_PROGRAM = "int main() {\n    return 0;\n}\n"
NESTED_FUNCTION = "int bar() {\n    return 0;\nint foo() {}\n"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def valid_file(tmp_path):
    path = tmp_path / "good.c1"
    path.write_text(VALID_PROGRAM)
    return path


@pytest.fixture
def invalid_file(tmp_path):
    path = tmp_path / "bad.c1"
    path.write_text(NESTED_FUNCTION)
    return path


# =============================================================================
# Basic Invocation
# =============================================================================

class TestInvocation:
    """Tests for help, version and argument handling."""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "Check C1 source files for syntax errors" in result.output
        assert "--brief" in result.output

    def test_version(self, runner):
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_no_arguments(self, runner):
        result = runner.invoke(main, [])
        assert result.exit_code == 2

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, [str(tmp_path / "missing.c1")])
        assert result.exit_code == 2


# =============================================================================
# Checking Files
# =============================================================================

class TestChecking:
    """Tests for checking files."""

    def test_valid_file(self, runner, valid_file):
        result = runner.invoke(main, [str(valid_file)])
        assert result.exit_code == ExitCode.SUCCESS
        assert f"{valid_file}: OK" in result.output

    def test_invalid_file(self, runner, invalid_file):
        result = runner.invoke(main, [str(invalid_file)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert f"{invalid_file}:3:1: error: Invalid statement list" in result.output
        assert "    int foo() {}" in result.output

    def test_brief(self, runner, invalid_file):
        result = runner.invoke(main, ["--brief", str(invalid_file)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert (
            f"{invalid_file}: Invalid statement list at line 3 with text: 'int'"
            in result.output
        )

    def test_quiet_valid(self, runner, valid_file):
        result = runner.invoke(main, ["-q", str(valid_file)])
        assert result.exit_code == 0
        assert result.output.strip() == ""

    def test_quiet_still_reports_errors(self, runner, invalid_file):
        result = runner.invoke(main, ["-q", str(invalid_file)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "Invalid statement list" in result.output

    def test_multiple_files(self, runner, valid_file, invalid_file):
        result = runner.invoke(main, [str(valid_file), str(invalid_file)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert f"{valid_file}: OK" in result.output
        assert "1 accepted, 1 rejected" in result.output

    def test_verbose_token_count(self, runner, valid_file):
        result = runner.invoke(main, ["-v", str(valid_file)])
        assert result.exit_code == 0
        assert "Tokenized: 9 tokens" in result.output

    def test_encoding_option(self, runner, tmp_path):
        path = tmp_path / "latin.c1"
        path.write_bytes("// caf\xe9\nvoid f() {}\n".encode("latin-1"))

        result = runner.invoke(main, [str(path)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert "Error:" in result.output

        result = runner.invoke(main, ["--encoding", "latin-1", str(path)])
        assert result.exit_code == ExitCode.SUCCESS

    def test_unreadable_file_does_not_stop_batch(self, runner, tmp_path, valid_file):
        path = tmp_path / "latin.c1"
        path.write_bytes("// caf\xe9\nvoid f() {}\n".encode("latin-1"))

        result = runner.invoke(main, [str(path), str(valid_file)])
        assert result.exit_code == ExitCode.INVALID_ARGS
        assert f"Error: {path}:" in result.output
        assert f"{valid_file}: OK" in result.output
        assert "1 accepted, 0 rejected, 1 unreadable" in result.output

    def test_deep_nesting_is_a_syntax_error(self, runner, tmp_path):
        path = tmp_path / "deep.c1"
        path.write_text("void f() " + "{" * 1000 + "}" * 1000)
        result = runner.invoke(main, ["--brief", str(path)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "Nesting too deep" in result.output


# =============================================================================
# Token Dump
# =============================================================================

class TestTokenDump:
    """Tests for --tokens."""

    def test_tokens(self, runner, valid_file):
        result = runner.invoke(main, ["--tokens", str(valid_file)])
        assert result.exit_code == 0
        assert "Token(KW_INT, 'int', 1:1)" in result.output
        assert "Token(IDENTIFIER, 'main', 1:5)" in result.output
        assert "Token(EOF, 4:1)" in result.output

    def test_tokens_invalid_character(self, runner, tmp_path):
        path = tmp_path / "odd.c1"
        path.write_text("void f() { @ }")
        result = runner.invoke(main, ["--tokens", str(path)])
        assert result.exit_code == ExitCode.SYNTAX_ERROR
        assert "error: Invalid character" in result.output


# =============================================================================
# Error Handling
# =============================================================================

class TestErrorHandling:
    """Tests for the shared CLI exception handler."""

    def test_exit_codes(self):
        assert ExitCode.SUCCESS == 0
        assert ExitCode.SYNTAX_ERROR == 1
        assert ExitCode.INVALID_ARGS == 2
        assert ExitCode.INTERNAL_ERROR == 3

    def test_syntax_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(UnexpectedEndOfInputError("Expected an identifier"))
        assert exc_info.value.code == ExitCode.SYNTAX_ERROR
        assert "error: Expected an identifier: reached end of input" in capsys.readouterr().err

    def test_file_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(FileNotFoundError("Source file not found: x.c1"))
        assert exc_info.value.code == ExitCode.INVALID_ARGS
        assert "Error: Source file not found: x.c1" in capsys.readouterr().err

    def test_internal_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            handle_cli_exception(RuntimeError("boom"))
        assert exc_info.value.code == ExitCode.INTERNAL_ERROR
        assert "Internal error: boom" in capsys.readouterr().err
