"""
C1 Toolkit Error Hierarchy
==========================

This module defines the base of the exception hierarchy for the toolkit.
All exceptions inherit from C1Error, allowing callers to catch every
toolkit-related error with a single except clause if desired.

Exception Hierarchy
-------------------
C1Error (base)
└── C1SyntaxError (see c1_toolkit.syntax.errors)
    ├── UnexpectedTokenError - token outside the expected FIRST set
    ├── UnexpectedEndOfInputError - input ended where a token is required
    ├── InvalidCharacterError - character the scanner cannot tokenize
    ├── UnterminatedCommentError - block comment missing its closing */
    └── UnterminatedStringError - string literal missing its closing quote

Design Philosophy
-----------------
Each exception captures source location information (filename, line, column)
when applicable. This allows for detailed error messages that help users
quickly locate and fix issues in their source code.
"""

from dataclasses import dataclass


# =============================================================================
# Base Exception Class
# =============================================================================

class C1Error(Exception):
    """
    Base exception for all C1 toolkit errors.

    All exceptions in the toolkit inherit from this class, allowing callers
    to catch all toolkit-related errors with a single except clause:

        try:
            parse_source(text)
        except C1Error as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in source code for error reporting.

    Tokens and errors carry one of these so diagnostics can point at the
    exact position in the source file. The immutable (frozen) design
    ensures locations cannot be accidentally modified.

    Attributes:
        filename: Name of the source file (or "<input>" for string input)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"
