#!/usr/bin/env python3
"""
C1 Syntax Checker Demo
======================

This script demonstrates how to use the C1 toolkit to:
1. Check source text held in memory
2. Check source files and print compiler-style reports
3. Inspect the token stream the parser consumes

Usage:
    source .venv/bin/activate
    python examples/check_demo.py
"""

from pathlib import Path

from c1_toolkit.syntax import C1Lexer, SyntaxChecker, check_syntax


def main():
    # ==========================================================================
    # 1. Check source text
    # ==========================================================================
    # check_syntax() returns None for an accepted program, otherwise the
    # diagnostic for the first error.

    snippets = [
        "void foo() {}",
        "int bar() {return 0;}",
        "void foo()) {}",
        "int bar() { if(x == ) {} }",
    ]
    for snippet in snippets:
        message = check_syntax(snippet)
        print(f"{snippet!r:40} -> {message or 'accepted'}")

    # ==========================================================================
    # 2. Check files
    # ==========================================================================

    checker = SyntaxChecker()
    programs = Path(__file__).parent / "programs"
    for path in sorted(programs.glob("*.c1")):
        result = checker.check_file(path)
        print()
        print(result.report())

    # ==========================================================================
    # 3. Token stream
    # ==========================================================================

    print()
    for token in C1Lexer("x = y * (2.5 - z);", "<demo>").tokenize():
        print(f"  {token!r}")


if __name__ == "__main__":
    main()
