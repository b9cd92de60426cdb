"""
C1 Syntax Checker
=================

This module provides the driver-level interface to the C1 front end. It
reads source text, runs the parser once per input, and packages the
outcome as a CheckResult:

    Source → Lexer → TokenStream → Parser → CheckResult

Usage
-----
Command line:
    $ c1check calc.c1

Programmatic:
    >>> from c1_toolkit.syntax import SyntaxChecker
    >>> result = SyntaxChecker().check_source("void main() { }")
    >>> result.success
    True

Error Handling
--------------
Syntax errors never escape check_source/check_file: the first one is
stored on the result. Only problems outside the language itself (a
missing file, an undecodable file) are raised.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from c1_toolkit.syntax.parser import C1Parser
from c1_toolkit.syntax.errors import C1SyntaxError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class CheckerOptions:
    """
    Checker configuration options.

    Attributes:
        encoding: Text encoding used to read source files
        trace: Log every grammar rule the parser enters (DEBUG level)
        show_source: Include the offending source line in reports
    """
    encoding: str = "utf-8"
    trace: bool = False
    show_source: bool = True

    @classmethod
    def from_env(cls) -> "CheckerOptions":
        """
        Create CheckerOptions from environment variables.

        Environment variables (all optional):
            C1_ENCODING: Source file encoding (e.g. "latin-1")
            C1_TRACE: Enable grammar tracing ("1", "true", "yes", "on")

        Returns:
            CheckerOptions with values from environment variables
        """
        options = cls()

        if encoding := os.environ.get("C1_ENCODING"):
            options.encoding = encoding

        if trace := os.environ.get("C1_TRACE"):
            options.trace = trace.strip().lower() in _TRUE_VALUES

        return options


@dataclass
class CheckResult:
    """
    Result of checking one source text.

    Attributes:
        filename: Source filename
        success: True if the program was accepted
        token_count: Number of tokens consumed before acceptance or failure
        error: The first syntax error, if any
        show_source: Whether report() includes source context
    """
    filename: str = ""
    success: bool = False
    token_count: int = 0
    error: Optional[C1SyntaxError] = None
    show_source: bool = True

    @property
    def message(self) -> Optional[str]:
        """The one-line diagnostic, or None if the program was accepted."""
        return str(self.error) if self.error else None

    def report(self) -> str:
        """Format the outcome for display."""
        if self.error is None:
            return f"{self.filename}: OK"
        if not self.show_source:
            return f"{self.filename}: {self.error}"
        report = self.error.report()
        if self.error.location is None:
            # End-of-input errors carry no location to name the file
            report = f"{self.filename}: {report}"
        return report


class SyntaxChecker:
    """
    Syntax checker for C1 programs.

    Each check builds a fresh parser, so results never depend on what
    was checked before.

    Example:
        checker = SyntaxChecker()
        result = checker.check_file("calc.c1")
        if not result.success:
            print(result.report())

    Attributes:
        options: Checker configuration options
    """

    def __init__(self, options: Optional[CheckerOptions] = None):
        """
        Initialize the checker.

        Args:
            options: Checker configuration (uses defaults if None)
        """
        self.options = options or CheckerOptions()

    def check_source(self, source: str, filename: str = "<input>") -> CheckResult:
        """
        Check C1 source code.

        Args:
            source: C1 source code string
            filename: Source filename for error messages

        Returns:
            CheckResult describing acceptance or the first syntax error
        """
        result = CheckResult(filename=filename, show_source=self.options.show_source)
        logger.debug(f"Checking {filename} ({len(source)} characters)")

        parser = C1Parser.from_source(source, filename, trace=self.options.trace)
        try:
            parser.parse()
            result.success = True
            logger.info(f"{filename}: accepted ({parser.tokens_consumed} tokens)")
        except C1SyntaxError as e:
            result.error = e
            logger.info(f"{filename}: rejected: {e}")

        result.token_count = parser.tokens_consumed
        return result

    def check_file(self, filepath: str | Path) -> CheckResult:
        """
        Check a C1 source file.

        Args:
            filepath: Path to the C1 source file

        Returns:
            CheckResult describing acceptance or the first syntax error

        Raises:
            FileNotFoundError: If source file not found
            UnicodeDecodeError: If the file is not valid in the configured encoding
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding=self.options.encoding)
        return self.check_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def check_source(source: str, filename: str = "<input>") -> CheckResult:
    """Check C1 source code with default options."""
    return SyntaxChecker().check_source(source, filename)


def check_file(filepath: str | Path) -> CheckResult:
    """Check a C1 source file with default options."""
    return SyntaxChecker().check_file(filepath)
