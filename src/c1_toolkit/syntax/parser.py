"""
C1 Recursive Descent Parser
===========================

This module implements a predictive recursive descent parser for the C1
teaching language. It pulls tokens from a TokenStream and decides whether
they form a syntactically valid program. No tree is built: the parser
either returns (accepted) or raises a C1SyntaxError describing the first
violation.

Grammar (EBNF)
--------------
program             ::= ( function_definition )* EOF
function_definition ::= return_type ID "(" ")" "{" statement_list "}"
return_type         ::= "void" | "bool" | "int" | "float"
block               ::= "{" statement_list "}" | statement
statement_list      ::= ( block )*
statement           ::= if_statement
                      | "return" ( assignment )? ";"
                      | "printf" "(" assignment ")" ";"
                      | stat_assignment ";"
                      | function_call ";"
if_statement        ::= "if" "(" assignment ")" block
stat_assignment     ::= ID "=" assignment
function_call       ::= ID "(" ")"
assignment          ::= ( ID "=" assignment ) | expr
expr                ::= simp_expr ( ( "==" | "!=" | "<=" | ">=" | "<" | ">" ) simp_expr )?
simp_expr           ::= ( "-" )? term ( ( "+" | "-" | "||" ) term )*
term                ::= factor ( ( "*" | "/" | "&&" ) factor )*
factor              ::= CONST_INT | CONST_FLOAT | CONST_BOOLEAN
                      | function_call | ID | "(" assignment ")"

Expression Precedence (lowest to highest)
-----------------------------------------
1. relational      == != <= >= < >   (at most one per expr)
2. additive        + - ||            (optional leading unary -)
3. multiplicative  * / &&
4. factor          constants, identifiers, calls, ( assignment )

Every decision is taken on the current token, or on the current and the
next token where an identifier may start either an assignment or a call.
The parser never backtracks: once a production is chosen, an error inside
it ends the parse.

Example Usage
-------------
>>> from c1_toolkit.syntax.parser import parse_source, check_syntax
>>> parse_source("int main() { return 0; }")
>>> check_syntax("void foo()) {}")
"Expected '{' to open function body at line 1 with text: ')'"
"""

import logging
from typing import Optional

from c1_toolkit.syntax.lexer import C1TokenType, TokenStream
from c1_toolkit.syntax.errors import (
    C1SyntaxError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# FIRST Sets and Operator Levels
# =============================================================================

RETURN_TYPES = frozenset({
    C1TokenType.KW_VOID,
    C1TokenType.KW_BOOLEAN,
    C1TokenType.KW_INT,
    C1TokenType.KW_FLOAT,
})

STATEMENT_START = frozenset({
    C1TokenType.KW_IF,
    C1TokenType.KW_RETURN,
    C1TokenType.KW_PRINTF,
    C1TokenType.IDENTIFIER,
})

BLOCK_START = STATEMENT_START | {C1TokenType.LBRACE}

ASSIGNMENT_START = frozenset({
    C1TokenType.IDENTIFIER,
    C1TokenType.CONST_INT,
    C1TokenType.CONST_FLOAT,
    C1TokenType.CONST_BOOLEAN,
    C1TokenType.LPAREN,
    C1TokenType.MINUS,
})

CONSTANTS = frozenset({
    C1TokenType.CONST_INT,
    C1TokenType.CONST_FLOAT,
    C1TokenType.CONST_BOOLEAN,
})

RELATIONAL_OPERATORS = frozenset({
    C1TokenType.EQUAL,
    C1TokenType.NOT_EQUAL,
    C1TokenType.LESS_EQUAL,
    C1TokenType.GREATER_EQUAL,
    C1TokenType.LESS,
    C1TokenType.GREATER,
})

UNARY_OPERATORS = frozenset({C1TokenType.MINUS})

ADDITIVE_OPERATORS = frozenset({
    C1TokenType.PLUS,
    C1TokenType.MINUS,
    C1TokenType.OR,
})

MULTIPLICATIVE_OPERATORS = frozenset({
    C1TokenType.ASTERISK,
    C1TokenType.SLASH,
    C1TokenType.AND,
})


class C1Parser:
    """
    Recursive descent parser for C1.

    One instance performs one parse: it owns its token stream, moves the
    cursor strictly forward, and is discarded afterwards. The lookahead
    and consume operations of the stream are exposed here by delegation
    so grammar procedures read like the grammar.

    Attributes:
        filename: Source filename for error reporting
        source_lines: Original source lines for error context
        trace: Log every grammar rule entered (at DEBUG level)
    """

    def __init__(
        self,
        tokens: TokenStream,
        filename: str = "<input>",
        source_lines: Optional[list[str]] = None,
        trace: bool = False,
    ):
        """
        Initialize the parser.

        Args:
            tokens: Token stream to parse; owned by this parser from now on
            filename: Source filename for error messages
            source_lines: Original source lines for error context
            trace: Log grammar rule entry at DEBUG level
        """
        self._tokens = tokens
        self.filename = filename
        self.source_lines = source_lines or []
        self.trace = trace

    @classmethod
    def from_source(
        cls,
        source: str,
        filename: str = "<input>",
        trace: bool = False,
    ) -> "C1Parser":
        """Create a parser over a fresh token stream for the full source text."""
        return cls(
            TokenStream.from_source(source, filename),
            filename,
            source.split("\n"),
            trace=trace,
        )

    def parse(self) -> None:
        """
        Derive `program` from the token stream.

        Returns normally if every token is consumed and the grammar
        accepts.

        Raises:
            C1SyntaxError: On the first violated expectation, or when the
                program nests deeper than the interpreter stack allows
        """
        try:
            self._parse_program()
        except RecursionError:
            # Each nesting level costs several Python frames
            raise self._error_current("Nesting too deep") from None

    @property
    def tokens_consumed(self) -> int:
        """Number of tokens consumed so far."""
        return self._tokens.consumed

    # =========================================================================
    # Token Access Methods (delegated to the token stream)
    # =========================================================================

    def current_token(self) -> Optional[C1TokenType]:
        return self._tokens.current()

    def peek_token(self) -> Optional[C1TokenType]:
        return self._tokens.peek()

    def eat(self) -> None:
        self._tokens.advance()

    def current_line_number(self) -> Optional[int]:
        return self._tokens.current_line()

    def current_text(self) -> Optional[str]:
        return self._tokens.current_text()

    def peek_line_number(self) -> Optional[int]:
        return self._tokens.peek_line()

    def peek_text(self) -> Optional[str]:
        return self._tokens.peek_text()

    # =========================================================================
    # Matching Primitives
    # =========================================================================

    def _at_end(self) -> bool:
        return self.current_token() is None

    def _check(self, *types: C1TokenType) -> bool:
        """Check if current token is one of the given types."""
        return self.current_token() in types

    def _check_next(self, token_type: C1TokenType) -> bool:
        """Check if the token after the current one has the given type."""
        return self.peek_token() == token_type

    def _match(self, types: frozenset) -> bool:
        """Consume the current token if it is in `types`."""
        if self.current_token() in types:
            self.eat()
            return True
        return False

    def _expect(self, token_type: C1TokenType, reason: str) -> None:
        """
        Expect and consume a specific token type.

        Raises:
            C1SyntaxError: If the current token is anything else
        """
        if not self._check(token_type):
            raise self._error_current(reason)
        self.eat()

    def _error_current(self, reason: str) -> C1SyntaxError:
        """Build the error for an unacceptable current token."""
        location = self._tokens.current_location()
        if location is None:
            return UnexpectedEndOfInputError(reason)
        return UnexpectedTokenError(
            reason,
            location,
            self.current_text(),
            source_line=self._get_source_line(location.line),
        )

    def _error_peek(self, reason: str) -> C1SyntaxError:
        """Build the error for an unacceptable lookahead token."""
        location = self._tokens.peek_location()
        if location is None:
            return UnexpectedEndOfInputError(reason)
        return UnexpectedTokenError(
            reason,
            location,
            self.peek_text(),
            source_line=self._get_source_line(location.line),
        )

    def _trace(self, rule: str) -> None:
        """Log entry into a grammar rule when tracing is enabled."""
        if self.trace:
            logger.debug(
                f"{rule}: line {self.current_line_number()}, "
                f"token {self.current_text()!r}"
            )

    def _get_source_line(self, line: int) -> Optional[str]:
        """Get source line for error reporting."""
        if 0 < line <= len(self.source_lines):
            return self.source_lines[line - 1]
        return None

    # =========================================================================
    # Top-Level Structure
    # =========================================================================

    def _parse_program(self) -> None:
        """program ::= ( function_definition )* EOF"""
        self._trace("program")
        while not self._at_end():
            self._parse_function_definition()

    def _parse_function_definition(self) -> None:
        """function_definition ::= return_type ID "(" ")" "{" statement_list "}" """
        self._trace("function_definition")
        self._parse_return_type()
        self._parse_identifier()
        self._expect(C1TokenType.LPAREN, "Expected '(' after function name")
        self._expect(C1TokenType.RPAREN, "Expected ')' after '(' in function definition")
        self._expect(C1TokenType.LBRACE, "Expected '{' to open function body")
        self._parse_statement_list()
        self._expect(C1TokenType.RBRACE, "Expected '}' at end of function body")

    def _parse_return_type(self) -> None:
        self._trace("return_type")
        if not self._match(RETURN_TYPES):
            raise self._error_current("Expected a return type")

    def _parse_identifier(self) -> None:
        self._trace("identifier")
        self._expect(C1TokenType.IDENTIFIER, "Expected an identifier")

    def _parse_block(self) -> None:
        """block ::= "{" statement_list "}" | statement"""
        self._trace("block")
        if self._check(C1TokenType.LBRACE):
            self._parse_braced_block()
        else:
            self._parse_statement()

    def _parse_braced_block(self) -> None:
        self._trace("braced_block")
        self._expect(C1TokenType.LBRACE, "Expected '{' before statement list")
        self._parse_statement_list()
        self._expect(C1TokenType.RBRACE, "Expected '}' after statement list")

    def _parse_statement_list(self) -> None:
        """
        statement_list ::= ( block )*

        The list has no terminator of its own: it stops on '}' or at end
        of input and leaves the closing brace to the enclosing rule. Any
        other token that cannot start a block is an error here.
        """
        self._trace("statement_list")
        while True:
            if self.current_token() in BLOCK_START:
                self._parse_block()
            elif self._check(C1TokenType.RBRACE) or self._at_end():
                return
            else:
                raise self._error_current("Invalid statement list")

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_statement(self) -> None:
        """
        statement ::= if_statement
                    | "return" ( assignment )? ";"
                    | "printf" "(" assignment ")" ";"
                    | stat_assignment ";"
                    | function_call ";"
        """
        self._trace("statement")
        token = self.current_token()

        # An if statement ends in a block, so it takes no ';'
        if token == C1TokenType.KW_IF:
            self._parse_if_statement()
            return

        if token == C1TokenType.KW_RETURN:
            self._parse_return_statement()
        elif token == C1TokenType.KW_PRINTF:
            self._parse_printf_statement()
        elif token == C1TokenType.IDENTIFIER:
            next_token = self.peek_token()
            if next_token == C1TokenType.ASSIGN:
                self._parse_stat_assignment()
            elif next_token == C1TokenType.LPAREN:
                self._parse_function_call()
            else:
                raise self._error_peek(
                    "Expected '=' or '(' after identifier in statement"
                )
        else:
            raise self._error_current("Invalid statement")

        self._expect(C1TokenType.SEMICOLON, "Expected ';' after statement")

    def _parse_if_statement(self) -> None:
        """if_statement ::= "if" "(" assignment ")" block"""
        self._trace("if_statement")
        self._expect(C1TokenType.KW_IF, "Expected 'if'")
        self._parse_assignment_in_parentheses()
        self._parse_block()

    def _parse_return_statement(self) -> None:
        """return_statement ::= "return" ( assignment )?"""
        self._trace("return_statement")
        self._expect(C1TokenType.KW_RETURN, "Expected 'return'")
        if self.current_token() in ASSIGNMENT_START:
            self._parse_assignment()

    def _parse_printf_statement(self) -> None:
        """printf_statement ::= "printf" "(" assignment ")" """
        self._trace("printf_statement")
        self._expect(C1TokenType.KW_PRINTF, "Expected 'printf'")
        self._parse_assignment_in_parentheses()

    def _parse_stat_assignment(self) -> None:
        """stat_assignment ::= ID "=" assignment"""
        self._trace("stat_assignment")
        self._parse_identifier()
        self._expect(C1TokenType.ASSIGN, "Expected '=' in assignment")
        self._parse_assignment()

    def _parse_function_call(self) -> None:
        """function_call ::= ID "(" ")" """
        self._trace("function_call")
        self._parse_identifier()
        self._expect(C1TokenType.LPAREN, "Expected '(' after function name")
        self._expect(C1TokenType.RPAREN, "Expected ')' in function call")

    # =========================================================================
    # Expressions
    # =========================================================================

    def _parse_assignment(self) -> None:
        """assignment ::= ( ID "=" assignment ) | expr"""
        self._trace("assignment")
        if self._check(C1TokenType.IDENTIFIER) and self._check_next(C1TokenType.ASSIGN):
            self._parse_identifier()
            self.eat()  # '='
            self._parse_assignment()
        else:
            self._parse_expr()

    def _parse_assignment_in_parentheses(self) -> None:
        """ "(" assignment ")" """
        self._trace("assignment_in_parentheses")
        self._expect(C1TokenType.LPAREN, "Expected '('")
        self._parse_assignment()
        self._expect(C1TokenType.RPAREN, "Expected ')'")

    def _parse_expr(self) -> None:
        """expr ::= simp_expr ( relational_operator simp_expr )?"""
        self._trace("expr")
        self._parse_simp_expr()
        # Not a loop: relational operators do not chain
        if self._match(RELATIONAL_OPERATORS):
            self._parse_simp_expr()

    def _parse_simp_expr(self) -> None:
        """simp_expr ::= ( "-" )? term ( ( "+" | "-" | "||" ) term )*"""
        self._trace("simp_expr")
        self._match(UNARY_OPERATORS)
        self._parse_term()
        while self._match(ADDITIVE_OPERATORS):
            self._parse_term()

    def _parse_term(self) -> None:
        """term ::= factor ( ( "*" | "/" | "&&" ) factor )*"""
        self._trace("term")
        self._parse_factor()
        while self._match(MULTIPLICATIVE_OPERATORS):
            self._parse_factor()

    def _parse_factor(self) -> None:
        """
        factor ::= CONST_INT | CONST_FLOAT | CONST_BOOLEAN
                 | function_call | ID | "(" assignment ")"
        """
        self._trace("factor")
        token = self.current_token()

        if token in CONSTANTS:
            self.eat()
        elif token == C1TokenType.LPAREN:
            self._parse_assignment_in_parentheses()
        elif token == C1TokenType.IDENTIFIER:
            if self._check_next(C1TokenType.LPAREN):
                self._parse_function_call()
            else:
                self._parse_identifier()
        else:
            raise self._error_current("Invalid factor")


# =============================================================================
# Convenience Functions
# =============================================================================

def parse_source(source: str, filename: str = "<input>") -> None:
    """
    Check C1 source code for syntactic validity.

    This is a convenience function that combines lexing and parsing.

    Args:
        source: The C1 source code
        filename: Source filename for error messages

    Raises:
        C1SyntaxError: On the first syntax error
    """
    C1Parser.from_source(source, filename).parse()


def check_syntax(source: str, filename: str = "<input>") -> Optional[str]:
    """
    Check C1 source code and return the diagnostic instead of raising.

    Returns:
        None if the program is accepted, otherwise the diagnostic for the
        first syntax error.

    Example:
        >>> check_syntax("int bar() { return 0; int foo() {} }")
        "Invalid statement list at line 1 with text: 'int'"
    """
    try:
        parse_source(source, filename)
    except C1SyntaxError as e:
        return str(e)
    return None
