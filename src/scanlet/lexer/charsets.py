"""Character sets for O(1) classification.

All sets are ASCII-only frozensets. Anything outside them (including
every non-ASCII character) is routed to the ILLEGAL path by the lexer.

Usage:
    from scanlet.lexer.charsets import LETTERS

    if char in LETTERS:  # O(1) lookup
        ...
"""

import string

# Skipped between tokens; never produces a token.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r")

# Identifier characters. Digits never continue an identifier: "x1" scans as
# IDENT "x" followed by INT "1".
LETTERS: frozenset[str] = frozenset(string.ascii_letters + "_")

DIGITS: frozenset[str] = frozenset(string.digits)
