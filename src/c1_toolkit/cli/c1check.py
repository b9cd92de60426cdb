"""
c1check - C1 Syntax Checker Command-Line Interface
==================================================

This module implements the command-line interface for the C1 syntax
checker. Each file is checked independently; for each one the first
syntax error, if any, is reported.

Usage Examples
--------------
Check a file:
    $ c1check calc.c1

Check several files, only printing failures:
    $ c1check -q src/*.c1

Dump the token stream:
    $ c1check --tokens calc.c1

Trace the grammar rules the parser enters:
    $ c1check --trace calc.c1
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from c1_toolkit import __version__
from c1_toolkit.cli.errors import ExitCode, handle_cli_exception
from c1_toolkit.syntax import C1Lexer, CheckerOptions, SyntaxChecker


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Only report rejected files",
)
@click.option(
    "--brief",
    is_flag=True,
    help="One-line diagnostics without source context",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print the token stream and exit (for debugging)",
)
@click.option(
    "--trace",
    is_flag=True,
    help="Log every grammar rule the parser enters (implies --verbose)",
)
@click.option(
    "--encoding",
    default=None,
    help="Source file encoding (default: utf-8, or $C1_ENCODING)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="c1check")
def main(
    input_files: tuple[Path, ...],
    quiet: bool,
    brief: bool,
    tokens: bool,
    trace: bool,
    encoding: Optional[str],
    verbose: bool,
) -> None:
    """
    Check C1 source files for syntax errors.

    INPUT_FILES are the C1 source files to check.

    Exits with status 0 if every file is accepted, 1 if any file is
    rejected and 2 if any file cannot be read or decoded.

    \b
    Examples:
        c1check calc.c1              # Check one file
        c1check -q *.c1              # Only print failures
        c1check --brief calc.c1      # One-line diagnostics
        c1check --tokens calc.c1     # Dump tokens
    """
    verbose = verbose or trace
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )

    options = CheckerOptions.from_env()
    if encoding:
        options.encoding = encoding
    if trace:
        options.trace = True
    if brief:
        options.show_source = False

    rejected = 0
    unreadable = 0

    try:
        # Token dump mode
        if tokens:
            for input_file in input_files:
                source = input_file.read_text(encoding=options.encoding)
                for token in C1Lexer(source, str(input_file)).tokenize():
                    click.echo(repr(token))
            return

        checker = SyntaxChecker(options)
        for input_file in input_files:
            try:
                result = checker.check_file(input_file)
            except (PermissionError, UnicodeDecodeError) as e:
                # Counted as a failure; the remaining files are still checked
                unreadable += 1
                click.echo(f"Error: {input_file}: {e}", err=True)
                continue

            if result.success:
                if not quiet:
                    click.echo(result.report())
                if verbose:
                    click.echo(f"Tokenized: {result.token_count} tokens")
            else:
                rejected += 1
                click.echo(result.report(), err=True)

    except Exception as e:
        handle_cli_exception(e, verbose)

    if len(input_files) > 1 and not quiet:
        accepted = len(input_files) - rejected - unreadable
        summary = f"{accepted} accepted, {rejected} rejected"
        if unreadable:
            summary += f", {unreadable} unreadable"
        click.echo(summary)

    if unreadable:
        sys.exit(ExitCode.INVALID_ARGS)
    if rejected:
        sys.exit(ExitCode.SYNTAX_ERROR)


if __name__ == "__main__":
    main()
