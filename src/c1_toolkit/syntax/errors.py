"""
C1 Syntax Error Hierarchy
=========================

Exceptions raised by the C1 scanner and parser. Every one of them is a
C1SyntaxError: the front end only decides acceptance, so there are no
semantic or code generation errors here.

Message Format
--------------
``str(error)`` is the one-line diagnostic:

    Expected ';' after statement at line 3 with text: 'y'
    Expected '}' at end of function body. Reached EOF

``error.report()`` renders a compiler-style report with source context:

    calc.c1:3:5: error: Expected ';' after statement
        x = 4 y = 2;
              ^
"""

from typing import Optional

from c1_toolkit.errors import C1Error, SourceLocation


# =============================================================================
# Base Syntax Exception
# =============================================================================

class C1SyntaxError(C1Error):
    """
    Syntax error in C1 source code.

    Raised by the lexer or the parser on the first violation found. The
    parser never recovers from one of these; it propagates unmodified to
    the caller of the parse.

    Attributes:
        reason: What the grammar expected, e.g. "Expected ';' after statement"
        location: Where the offending token starts, None at end of input
        text: Literal text of the offending token, None at end of input
        hint: A suggestion for fixing the error
        source_line: The source line containing the offending token
    """

    def __init__(
        self,
        reason: str,
        location: Optional[SourceLocation] = None,
        text: Optional[str] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.reason = reason
        self.location = location
        self.text = text
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    @property
    def line(self) -> Optional[int]:
        """Line number of the offending token, or None at end of input."""
        return self.location.line if self.location else None

    @property
    def at_end_of_input(self) -> bool:
        """True if the input ended before the grammar was satisfied."""
        return self.location is None

    def _format_message(self) -> str:
        """Format the one-line diagnostic."""
        if self.location is None:
            return f"{self.reason}. Reached EOF"
        return f"{self.reason} at line {self.location.line} with text: '{self.text}'"

    def report(self) -> str:
        """
        Format a multi-line report with location, source context, and hint.

        Example:
            calc.c1:3:5: error: Expected ';' after statement
                x = 4 y = 2;
                      ^
            hint: ...
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.reason}")
        else:
            parts.append(f"error: {self.reason}: reached end of input")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Parser Errors
# =============================================================================

class UnexpectedTokenError(C1SyntaxError):
    """
    Unexpected token during parsing.

    Raised when the current token is not in the FIRST set required by the
    active grammar rule, or is not the terminal the rule must consume.
    """
    pass


class UnexpectedEndOfInputError(C1SyntaxError):
    """
    Premature end of input.

    Raised when no token remains where the grammar requires one, e.g.
    a function body missing its closing brace.
    """

    def __init__(self, reason: str, hint: Optional[str] = None):
        super().__init__(reason, hint=hint)


# =============================================================================
# Scanner Errors
# =============================================================================

class InvalidCharacterError(C1SyntaxError):
    """
    Invalid character in source code.

    Raised when the lexer encounters a character that cannot start
    any C1 token, such as '@' or a lone '&'.
    """

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            "Invalid character",
            location=location,
            text=char,
            source_line=source_line,
        )


class UnterminatedCommentError(C1SyntaxError):
    """Block comment without a closing '*/'."""

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated block comment",
            location=location,
            text="/*",
            hint="add closing */ to terminate the comment",
            source_line=source_line,
        )


class UnterminatedStringError(C1SyntaxError):
    """
    Unterminated string literal.

    Raised when a string literal is not closed before the end of the
    line or file.
    """

    def __init__(
        self,
        text: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "Unterminated string literal",
            location=location,
            text=text,
            hint="add closing '\"' to complete the string",
            source_line=source_line,
        )
