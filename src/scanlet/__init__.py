"""
Scanlet: a small single-pass lexer.

Turns source text for a tiny expression language (``let`` bindings,
``fn`` literals, integers, identifiers and a handful of punctuation) into
typed tokens for a parser.

Quick Start:
    >>> from scanlet import lex
    >>> [(t.kind.name, t.literal) for t in lex("let five = 5;")]
    [('LET', 'let'), ('IDENT', 'five'), ('ASSIGN', '='), ('INT', '5'), ('SEMICOLON', ';')]

    >>> # Or drive the lexer one token at a time
    >>> from scanlet import Lexer
    >>> lexer = Lexer("x + 1")
    >>> lexer.next_token()
    Token(IDENT, 'x', 1:1)

Unrecognized characters come back as ILLEGAL tokens. Use ScanConfig to
skip them or turn them into IllegalCharacterError instead.
"""

from scanlet.config import (
    IllegalPolicy,
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from scanlet.diagnostics import apply_illegal_policy, find_illegal
from scanlet.errors import IllegalCharacterError, ScanletError, SerializationError
from scanlet.lexer import EOF_SENTINEL, Lexer
from scanlet.location import SourceLocation
from scanlet.serialization import from_json, to_json
from scanlet.tokens import KEYWORDS, PUNCTUATION, Token, TokenKind, lookup_ident

__version__ = "0.1.0"


def lex(
    source: str,
    *,
    source_file: str | None = None,
    config: ScanConfig | None = None,
) -> list[Token]:
    """Scan source into a list of tokens, EOF excluded.

    Args:
        source: Source text
        source_file: Optional source file path for token locations
        config: Configuration to use (defaults to the active context config)

    Returns:
        Tokens in source order.

    Raises:
        IllegalCharacterError: If the illegal policy is RAISE and the source
            contains an unrecognized character.

    Example:
        >>> [t.literal for t in lex("add(1, 2)")]
        ['add', '(', '1', ',', '2', ')']
    """
    if config is None:
        config = get_scan_config()
    tokens = Lexer(source, source_file=source_file).lex()
    return apply_illegal_policy(tokens, config.illegal_policy)


__all__ = [
    "EOF_SENTINEL",
    "KEYWORDS",
    "PUNCTUATION",
    "IllegalCharacterError",
    "IllegalPolicy",
    "Lexer",
    "ScanConfig",
    "ScanletError",
    "SerializationError",
    "SourceLocation",
    "Token",
    "TokenKind",
    "__version__",
    "apply_illegal_policy",
    "find_illegal",
    "from_json",
    "get_scan_config",
    "lex",
    "lookup_ident",
    "reset_scan_config",
    "scan_config_context",
    "set_scan_config",
    "to_json",
]
