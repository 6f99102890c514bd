"""Illegal-token handling on top of the lexer.

The lexer reports unrecognized characters as ILLEGAL tokens and keeps
going. This module lets the caller decide what to do with them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scanlet.config import IllegalPolicy
from scanlet.errors import IllegalCharacterError
from scanlet.tokens import Token, TokenKind
from scanlet.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)


def find_illegal(tokens: Iterable[Token]) -> list[Token]:
    """Return the ILLEGAL tokens in source order."""
    return [t for t in tokens if t.kind is TokenKind.ILLEGAL]


def apply_illegal_policy(tokens: Iterable[Token], policy: IllegalPolicy) -> list[Token]:
    """Apply an IllegalPolicy to a token sequence.

    Args:
        tokens: Tokens as produced by Lexer.lex()
        policy: KEEP returns them unchanged, SKIP drops ILLEGAL tokens,
            RAISE fails on the first one

    Returns:
        The resulting token list.

    Raises:
        IllegalCharacterError: Under RAISE, for the first ILLEGAL token.
    """
    if policy is IllegalPolicy.KEEP:
        return list(tokens)

    result: list[Token] = []
    for token in tokens:
        if token.kind is not TokenKind.ILLEGAL:
            result.append(token)
        elif policy is IllegalPolicy.RAISE:
            raise IllegalCharacterError(token.literal, token.location)
        else:
            logger.warning("Skipping illegal character %r at %s", token.literal, token.location)
    return result


__all__ = ["IllegalPolicy", "apply_illegal_policy", "find_illegal"]
