"""
C1 Lexer (Tokenizer)
====================

This module implements the scanner for the C1 teaching language and the
forward-only token stream the parser reads from.

Token Categories
----------------
- Keywords: bool, do, else, float, for, if, int, printf, return, void, while
- Boolean constants: true, false
- Identifiers: a letter followed by letters, digits or underscores
- Numbers: integers (42) and floats (1.5, .5, 2e10, 1.5E-3)
- Strings: "double quoted", no newlines
- Operators: + - * / = == != < <= > >= && ||
- Delimiters: ( ) { } ; ,

Comments
--------
- Single-line: // comment
- Multi-line: /* comment */

Example Usage
-------------
>>> from c1_toolkit.syntax.lexer import C1Lexer
>>> for token in C1Lexer('int main() { return 42; }', "test.c1").tokenize():
...     print(token)
Token(KW_INT, 'int', 1:1)
Token(IDENTIFIER, 'main', 1:5)
Token(LPAREN, '(', 1:9)
Token(RPAREN, ')', 1:10)
Token(LBRACE, '{', 1:12)
Token(KW_RETURN, 'return', 1:14)
Token(CONST_INT, '42', 1:21)
Token(SEMICOLON, ';', 1:23)
Token(RBRACE, '}', 1:25)
Token(EOF, 1:26)
"""

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterable, Iterator, Optional

from c1_toolkit.errors import SourceLocation
from c1_toolkit.syntax.errors import (
    InvalidCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)


# =============================================================================
# Token Type Enumeration
# =============================================================================

class C1TokenType(Enum):
    """
    Token types for the C1 language.

    Keywords are distinguished from identifiers to simplify parsing. The
    grammar compares tokens by type only; the literal text is carried on
    the token for diagnostics.
    """

    # === Structural Tokens ===
    EOF = auto()            # End of input

    # === Keywords ===
    KW_BOOLEAN = auto()     # bool
    KW_DO = auto()          # do
    KW_ELSE = auto()        # else
    KW_FLOAT = auto()       # float
    KW_FOR = auto()         # for
    KW_IF = auto()          # if
    KW_INT = auto()         # int
    KW_PRINTF = auto()      # printf
    KW_RETURN = auto()      # return
    KW_VOID = auto()        # void
    KW_WHILE = auto()       # while

    # === Arithmetic Operators ===
    PLUS = auto()           # +
    MINUS = auto()          # -
    ASTERISK = auto()       # *
    SLASH = auto()          # /

    # === Assignment and Comparison ===
    ASSIGN = auto()         # =
    EQUAL = auto()          # ==
    NOT_EQUAL = auto()      # !=
    LESS = auto()           # <
    GREATER = auto()        # >
    LESS_EQUAL = auto()     # <=
    GREATER_EQUAL = auto()  # >=

    # === Logical Operators ===
    AND = auto()            # &&
    OR = auto()             # ||

    # === Delimiters ===
    COMMA = auto()          # ,
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }

    # === Literals ===
    CONST_INT = auto()      # 42
    CONST_FLOAT = auto()    # 1.5
    CONST_BOOLEAN = auto()  # true / false
    CONST_STRING = auto()   # "text"
    IDENTIFIER = auto()     # names


# =============================================================================
# Keyword Mapping
# =============================================================================

KEYWORDS: dict[str, C1TokenType] = {
    "bool": C1TokenType.KW_BOOLEAN,
    "do": C1TokenType.KW_DO,
    "else": C1TokenType.KW_ELSE,
    "float": C1TokenType.KW_FLOAT,
    "for": C1TokenType.KW_FOR,
    "if": C1TokenType.KW_IF,
    "int": C1TokenType.KW_INT,
    "printf": C1TokenType.KW_PRINTF,
    "return": C1TokenType.KW_RETURN,
    "void": C1TokenType.KW_VOID,
    "while": C1TokenType.KW_WHILE,
    "true": C1TokenType.CONST_BOOLEAN,
    "false": C1TokenType.CONST_BOOLEAN,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class C1Token:
    """
    Represents a single token from C1 source code.

    Attributes:
        type: The C1TokenType classification
        text: The literal source text of the token (None for EOF)
        line: Line number in source (1-indexed)
        column: Column number in source (1-indexed)
        filename: Name of the source file
    """
    type: C1TokenType
    text: Optional[str]
    line: int
    column: int
    filename: str

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.text is not None:
            return f"Token({self.type.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.type.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)


# =============================================================================
# Lexer Implementation
# =============================================================================

class C1Lexer:
    """
    Tokenizes C1 source code.

    Usage:
        lexer = C1Lexer(source_text, filename)
        tokens = list(lexer.tokenize())

    The scanner is a generator: tokens are produced only as the consumer
    asks for them, so an invalid character late in a file is reported only
    once the parser gets that far.

    Attributes:
        source: The source code being tokenized
        filename: Name of the source file (for error reporting)
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier
    IDENT_CHARS = string.ascii_letters + string.digits + "_"

    # Characters that form numbers (ASCII only)
    DIGITS = frozenset(string.digits)

    # Operators, longest first so "==" wins over "="
    OPERATORS: tuple[tuple[str, C1TokenType], ...] = (
        ("==", C1TokenType.EQUAL),
        ("!=", C1TokenType.NOT_EQUAL),
        ("<=", C1TokenType.LESS_EQUAL),
        (">=", C1TokenType.GREATER_EQUAL),
        ("&&", C1TokenType.AND),
        ("||", C1TokenType.OR),
        ("+", C1TokenType.PLUS),
        ("-", C1TokenType.MINUS),
        ("*", C1TokenType.ASTERISK),
        ("/", C1TokenType.SLASH),
        ("=", C1TokenType.ASSIGN),
        ("<", C1TokenType.LESS),
        (">", C1TokenType.GREATER),
        (",", C1TokenType.COMMA),
        (";", C1TokenType.SEMICOLON),
        ("(", C1TokenType.LPAREN),
        (")", C1TokenType.RPAREN),
        ("{", C1TokenType.LBRACE),
        ("}", C1TokenType.RBRACE),
    )

    def __init__(
        self,
        source: str,
        filename: str = "<input>",
        line_number: int = 1,
    ):
        """
        Initialize the lexer with source code.

        Args:
            source: The C1 source code to tokenize
            filename: Name of the source file (for error messages)
            line_number: Starting line number
        """
        self.source = source
        self.filename = filename

        # Current position in source
        self._pos = 0
        self._line = line_number
        self._column = 1

        # Track line start position for error reporting
        self._line_start_pos = 0

    def tokenize(self) -> Iterator[C1Token]:
        """
        Generate tokens from the source code.

        Yields:
            C1Token objects, always ending with a single EOF token

        Raises:
            C1SyntaxError: If invalid input is encountered
        """
        while True:
            self._skip_whitespace_and_comments()
            if self._at_end():
                break
            yield self._scan_token()

        yield C1Token(C1TokenType.EOF, None, self._line, self._column, self.filename)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self, offset: int = 0) -> str:
        """
        Look at character at current position + offset without advancing.

        Returns empty string if past end of source.
        """
        pos = self._pos + offset
        if pos >= len(self.source):
            return ""
        return self.source[pos]

    def _advance(self) -> str:
        """Consume and return the current character, tracking line and column."""
        if self._at_end():
            return ""

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self._line += 1
            self._column = 1
            self._line_start_pos = self._pos
        else:
            self._column += 1

        return char

    def _make_token(
        self,
        token_type: C1TokenType,
        start_pos: int,
        start_line: int,
        start_column: int,
    ) -> C1Token:
        """Create a token spanning from start_pos to the current position."""
        return C1Token(
            type=token_type,
            text=self.source[start_pos:self._pos],
            line=start_line,
            column=start_column,
            filename=self.filename,
        )

    # =========================================================================
    # Whitespace and Comment Handling
    # =========================================================================

    def _skip_whitespace_and_comments(self) -> None:
        """Skip all whitespace and comments."""
        while not self._at_end():
            char = self._peek()

            if char in " \t\n\r\f\v":
                self._advance()
                continue

            # Single-line comment: //
            if char == "/" and self._peek(1) == "/":
                while not self._at_end() and self._peek() != "\n":
                    self._advance()
                continue

            # Multi-line comment: /* */
            if char == "/" and self._peek(1) == "*":
                self._skip_block_comment()
                continue

            break

    def _skip_block_comment(self) -> None:
        """
        Skip a multi-line comment (/* ... */).

        Raises:
            UnterminatedCommentError: If the comment is not closed
        """
        location = SourceLocation(self.filename, self._line, self._column)
        source_line = self._get_current_line()

        self._advance()
        self._advance()

        while not self._at_end():
            if self._peek() == "*" and self._peek(1) == "/":
                self._advance()
                self._advance()
                return
            self._advance()

        raise UnterminatedCommentError(location, source_line)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> C1Token:
        """Scan the next token from source."""
        start_pos = self._pos
        start_line = self._line
        start_column = self._column

        char = self._peek()

        if char in self.IDENT_START:
            return self._scan_identifier(start_pos, start_line, start_column)

        if char in self.DIGITS or (char == "." and self._peek(1) in self.DIGITS):
            return self._scan_number(start_pos, start_line, start_column)

        if char == '"':
            return self._scan_string(start_pos, start_line, start_column)

        return self._scan_operator(start_pos, start_line, start_column)

    def _scan_identifier(self, start_pos: int, start_line: int, start_column: int) -> C1Token:
        """Scan an identifier, keyword or boolean constant."""
        while self._peek() and self._peek() in self.IDENT_CHARS:
            self._advance()

        name = self.source[start_pos:self._pos]
        token_type = KEYWORDS.get(name, C1TokenType.IDENTIFIER)
        return self._make_token(token_type, start_pos, start_line, start_column)

    def _scan_number(self, start_pos: int, start_line: int, start_column: int) -> C1Token:
        """
        Scan an integer or floating point literal.

        Handles:
        - Integer: 42
        - Float: 1.5, .5, 1.5e3, 2E-4
        """
        token_type = C1TokenType.CONST_INT
        self._consume_digits()

        # Fraction part, only if a digit follows the dot ("1." is not a float)
        if self._peek() == "." and self._peek(1) in self.DIGITS:
            self._advance()
            self._consume_digits()
            token_type = C1TokenType.CONST_FLOAT

        # Exponent part: e/E, optional sign, at least one digit
        if self._peek() in ("e", "E"):
            sign_offset = 2 if self._peek(1) in ("+", "-") else 1
            if self._peek(sign_offset) in self.DIGITS:
                for _ in range(sign_offset):
                    self._advance()
                self._consume_digits()
                token_type = C1TokenType.CONST_FLOAT

        return self._make_token(token_type, start_pos, start_line, start_column)

    def _consume_digits(self) -> None:
        while self._peek() in self.DIGITS:
            self._advance()

    def _scan_string(self, start_pos: int, start_line: int, start_column: int) -> C1Token:
        """Scan a double-quoted string literal (no escapes, no newlines)."""
        self._advance()  # consume opening "

        while not self._at_end() and self._peek() not in ('"', "\n"):
            self._advance()

        if self._peek() != '"':
            raise UnterminatedStringError(
                self.source[start_pos:self._pos],
                SourceLocation(self.filename, start_line, start_column),
                self._get_current_line(),
            )

        self._advance()  # consume closing "
        return self._make_token(C1TokenType.CONST_STRING, start_pos, start_line, start_column)

    def _scan_operator(self, start_pos: int, start_line: int, start_column: int) -> C1Token:
        """Scan an operator or delimiter."""
        for symbol, token_type in self.OPERATORS:
            if self.source.startswith(symbol, self._pos):
                for _ in symbol:
                    self._advance()
                return self._make_token(token_type, start_pos, start_line, start_column)

        raise InvalidCharacterError(
            self._peek(),
            SourceLocation(self.filename, start_line, start_column),
            self._get_current_line(),
        )

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def _get_current_line(self) -> str:
        """Get the current line of source text for error reporting."""
        line_end = self.source.find("\n", self._line_start_pos)
        if line_end == -1:
            line_end = len(self.source)
        return self.source[self._line_start_pos:line_end]


# =============================================================================
# Token Stream
# =============================================================================

class TokenStream:
    """
    Forward-only cursor over a token sequence with one token of lookahead.

    This is the query surface the parser consumes. The EOF token acts as
    the implicit end-of-input marker: at the end, every query returns None.
    The cursor never rewinds, and tokens are pulled from the underlying
    iterable only when the cursor or the lookahead reaches them.

    Example:
        stream = TokenStream(C1Lexer("x = 1;").tokenize())
        stream.current()    # C1TokenType.IDENTIFIER
        stream.peek()       # C1TokenType.ASSIGN
        stream.advance()
        stream.current_text()  # "="
    """

    def __init__(self, tokens: Iterable[C1Token]):
        self._tokens = iter(tokens)
        self._window: list[C1Token] = []
        self._exhausted = False
        self.consumed = 0

    @classmethod
    def from_source(cls, source: str, filename: str = "<input>") -> "TokenStream":
        """Create a stream over a fresh lexer for the given source text."""
        return cls(C1Lexer(source, filename).tokenize())

    def _fill(self, size: int) -> None:
        """Pull tokens until the window holds `size` tokens or input ends."""
        while len(self._window) < size and not self._exhausted:
            token = next(self._tokens, None)
            if token is None or token.type == C1TokenType.EOF:
                self._exhausted = True
                break
            self._window.append(token)

    def _token_at(self, offset: int) -> Optional[C1Token]:
        self._fill(offset + 1)
        if offset < len(self._window):
            return self._window[offset]
        return None

    def current_token(self) -> Optional[C1Token]:
        """Full token at the cursor, or None at end of input."""
        return self._token_at(0)

    def peek_token(self) -> Optional[C1Token]:
        """Full token after the cursor, or None."""
        return self._token_at(1)

    def current(self) -> Optional[C1TokenType]:
        """Type of the token at the cursor, or None at end of input."""
        token = self._token_at(0)
        return token.type if token else None

    def peek(self) -> Optional[C1TokenType]:
        """Type of the token immediately after the cursor, or None."""
        token = self._token_at(1)
        return token.type if token else None

    def advance(self) -> None:
        """Move the cursor forward by one token. No-op at end of input."""
        self._fill(1)
        if self._window:
            self._window.pop(0)
            self.consumed += 1

    def at_end(self) -> bool:
        """True once every token has been consumed."""
        return self._token_at(0) is None

    def current_line(self) -> Optional[int]:
        token = self._token_at(0)
        return token.line if token else None

    def current_text(self) -> Optional[str]:
        token = self._token_at(0)
        return token.text if token else None

    def current_location(self) -> Optional[SourceLocation]:
        token = self._token_at(0)
        return token.location if token else None

    def peek_line(self) -> Optional[int]:
        token = self._token_at(1)
        return token.line if token else None

    def peek_text(self) -> Optional[str]:
        token = self._token_at(1)
        return token.text if token else None

    def peek_location(self) -> Optional[SourceLocation]:
        token = self._token_at(1)
        return token.location if token else None
