"""
C1 Toolkit - Front-End Tools for the C1 Teaching Language
=========================================================

C1 is a small C-like language used to teach compiler construction. This
package provides its syntax front end and a command-line checker.

Main Components
---------------
- **syntax**: lexer, token stream, recursive descent parser and checker
- **cli**: the `c1check` command-line tool

Quick Start
-----------
    >>> from c1_toolkit import parse_source
    >>> parse_source("void main() { printf(1 + 2); }")

Or use the command-line tool:
    $ c1check main.c1
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from c1_toolkit.errors import C1Error, SourceLocation
from c1_toolkit.syntax import (
    C1SyntaxError,
    C1Parser,
    SyntaxChecker,
    CheckerOptions,
    CheckResult,
    parse_source,
    check_syntax,
)

__all__ = [
    "__version__",
    "C1Error",
    "SourceLocation",
    "C1SyntaxError",
    "C1Parser",
    "SyntaxChecker",
    "CheckerOptions",
    "CheckResult",
    "parse_source",
    "check_syntax",
]
