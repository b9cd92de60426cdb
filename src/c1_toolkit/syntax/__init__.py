"""
C1 Syntax Front End
===================

This package implements a syntax validator for C1, a small C-like
teaching language: functions with typed return values, `if`, `return`,
`printf`, assignment, and arithmetic/boolean expressions.

It provides:

- A lexer (tokenizer) and a forward-only token stream with one token
  of lookahead
- A predictive recursive descent parser that accepts or rejects a
  program, stopping at the first syntax error
- A checker that wraps both for files and strings

Pipeline
--------
    C1 Source → Lexer → TokenStream → Parser → accept / C1SyntaxError

Usage
-----
>>> from c1_toolkit.syntax import parse_source, check_syntax
>>> parse_source("float calc() { x = 1.0; y = 2.2; return x + y; }")
>>> check_syntax("int bar() { return 0; int foo() {} }")
"Invalid statement list at line 1 with text: 'int'"

Language Subset
---------------
Supported:
- Return types: void, bool, int, float
- Statements: if (without else), return, printf, assignment, call
- Operators: == != < <= > >= + - || * / && and a leading unary minus

Not supported:
- Parameters, declarations, loops, else, arrays, structs
"""

from c1_toolkit.syntax.errors import (
    C1SyntaxError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    InvalidCharacterError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from c1_toolkit.syntax.lexer import C1Lexer, C1Token, C1TokenType, TokenStream
from c1_toolkit.syntax.parser import C1Parser, parse_source, check_syntax
from c1_toolkit.syntax.checker import (
    SyntaxChecker,
    CheckerOptions,
    CheckResult,
    check_source,
    check_file,
)

__all__ = [
    # Errors
    "C1SyntaxError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "InvalidCharacterError",
    "UnterminatedCommentError",
    "UnterminatedStringError",
    # Lexer
    "C1Lexer",
    "C1Token",
    "C1TokenType",
    "TokenStream",
    # Parser
    "C1Parser",
    "parse_source",
    "check_syntax",
    # Checker
    "SyntaxChecker",
    "CheckerOptions",
    "CheckResult",
    "check_source",
    "check_file",
]
