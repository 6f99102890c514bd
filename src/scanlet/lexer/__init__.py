"""Single-pass lexer for Scanlet.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, EOF_SENTINEL
├── core.py              # Lexer class (cursor window + dispatch)
└── charsets.py          # Whitespace, letter and digit classes

Usage:
    >>> from scanlet.lexer import Lexer
    >>> [t.literal for t in Lexer("let x = 1;").lex()]
    ['let', 'x', '=', '1', ';']

"""

from scanlet.lexer.core import EOF_SENTINEL, Lexer

__all__ = ["EOF_SENTINEL", "Lexer"]
