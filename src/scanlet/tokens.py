"""Token and TokenKind definitions for the Scanlet lexer.

The lexer produces a stream of Token objects that a parser consumes.
Each Token pairs a kind with the exact source text it was scanned from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable). KEYWORDS and PUNCTUATION
are read-only mappings built once at import.

Performance Note:
Token stores raw coordinates and lazily creates SourceLocation on demand.
Most consumers only look at kind and literal, so no location object is
allocated for them.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from types import MappingProxyType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping

    from scanlet.location import SourceLocation


class TokenKind(Enum):
    """Closed set of token kinds produced by the lexer.

    Adding a lexical category means adding a member here and a dispatch
    arm in Lexer.next_token.

    """

    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers + literals
    IDENT = auto()  # add, foo_bar
    INT = auto()  # 12345

    # Operators
    ASSIGN = auto()  # =
    PLUS = auto()  # +

    # Delimiters
    COMMA = auto()  # ,
    SEMICOLON = auto()  # ;
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Keywords
    FUNCTION = auto()  # fn
    LET = auto()  # let

    @property
    def is_keyword(self) -> bool:
        """True for reserved-word kinds."""
        return self in _KEYWORD_KINDS

    @property
    def is_punctuation(self) -> bool:
        """True for single-character operator and delimiter kinds."""
        return self in _PUNCTUATION_KINDS


# Reserved words. Lookup is exact and case-sensitive.
KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
    }
)

# Single-character operators and delimiters.
PUNCTUATION: Mapping[str, TokenKind] = MappingProxyType(
    {
        "=": TokenKind.ASSIGN,
        ";": TokenKind.SEMICOLON,
        "(": TokenKind.LPAREN,
        ")": TokenKind.RPAREN,
        ",": TokenKind.COMMA,
        "+": TokenKind.PLUS,
        "{": TokenKind.LBRACE,
        "}": TokenKind.RBRACE,
    }
)

_KEYWORD_KINDS = frozenset(KEYWORDS.values())
_PUNCTUATION_KINDS = frozenset(PUNCTUATION.values())


def lookup_ident(literal: str) -> TokenKind:
    """Return the keyword kind for literal, or IDENT if it is not reserved."""
    return KEYWORDS.get(literal, TokenKind.IDENT)


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Equality and hashing only consider kind and literal, so hand-built
    tokens compare equal to scanned ones regardless of position.

    Attributes:
        kind: The token kind (from TokenKind enum)
        literal: The exact source text consumed for this token
        _offset: Absolute start position in source
        _end_offset: Absolute end position in source (exclusive)
        _lineno: Start line number (1-indexed, 0 if unknown)
        _col: Start column (1-indexed, 0 if unknown)
        _source_file: Optional source file path

    Thread Safety:
        Frozen dataclass ensures immutability for safe sharing.
        The lazy cache uses idempotent write (safe for concurrent access).

    """

    kind: TokenKind
    literal: str
    _offset: int = field(default=0, compare=False)
    _end_offset: int = field(default=0, compare=False)
    _lineno: int = field(default=0, compare=False)
    _col: int = field(default=0, compare=False)
    _source_file: str | None = field(default=None, compare=False)
    _location_cache: SourceLocation | None = field(
        default=None, repr=False, compare=False
    )

    @property
    def location(self) -> SourceLocation:
        """Get source location (lazily created and cached)."""
        if self._location_cache is not None:
            return self._location_cache

        # Import here to avoid circular import at module load
        from scanlet.location import SourceLocation

        loc = SourceLocation(
            lineno=self._lineno,
            col_offset=self._col,
            offset=self._offset,
            end_offset=self._end_offset,
            source_file=self._source_file,
        )
        object.__setattr__(self, "_location_cache", loc)
        return loc

    @property
    def offset(self) -> int:
        """Start offset in source (convenience accessor)."""
        return self._offset

    @property
    def end_offset(self) -> int:
        """End offset in source, exclusive (convenience accessor)."""
        return self._end_offset

    @property
    def lineno(self) -> int:
        """Line number (convenience accessor)."""
        return self._lineno

    @property
    def col(self) -> int:
        """Column (convenience accessor)."""
        return self._col

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        lit = self.literal
        if len(lit) > 20:
            lit = lit[:17] + "..."
        return f"Token({self.kind.name}, {lit!r}, {self._lineno}:{self._col})"
