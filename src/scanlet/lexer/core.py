"""Single-pass scanning state machine.

The lexer keeps a one-character window over the source: ``_pos`` is the
character under examination, ``_read_pos`` the next one to read. Every
scan is composed of calls to ``_advance``, the only cursor mutator, so the
scan never rewinds and always terminates.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; calls on one instance must not interleave.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scanlet.lexer.charsets import DIGITS, LETTERS, WHITESPACE
from scanlet.tokens import PUNCTUATION, Token, TokenKind, lookup_ident
from scanlet.utils.logger import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = get_logger(__name__)

# Value of the current character once input is exhausted.
EOF_SENTINEL = ""


class Lexer:
    """Converts source text into a sequence of typed tokens.

    Usage:
            >>> lexer = Lexer("let five = 5;")
            >>> for token in lexer.lex():
            ...     print(token)
        Token(LET, 'let', 1:1)
        Token(IDENT, 'five', 1:5)
        Token(ASSIGN, '=', 1:10)
        Token(INT, '5', 1:12)
        Token(SEMICOLON, ';', 1:13)

    Unrecognized characters never abort the scan; they come back as ILLEGAL
    tokens and scanning resumes at the following character. After the
    source is exhausted, next_token() keeps returning EOF.

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_source_file",
        "_pos",
        "_read_pos",
        "_ch",
        "_lineno",
        "_line_start",
    )

    def __init__(self, source: str, source_file: str | None = None) -> None:
        """Initialize lexer and load the first character.

        Args:
            source: Source text (ASCII expected)
            source_file: Optional source file path for token locations
        """
        self._source = source
        self._source_len = len(source)
        self._source_file = source_file
        self._pos = 0
        self._read_pos = 0
        self._ch = EOF_SENTINEL

        # Line tracking for token locations
        self._lineno = 1
        self._line_start = 0

        self._advance()

    @property
    def position(self) -> int:
        """Index of the character under examination."""
        return self._pos

    @property
    def read_position(self) -> int:
        """Index of the next character to read."""
        return self._read_pos

    @property
    def current_char(self) -> str:
        """Character under examination, or EOF_SENTINEL when exhausted."""
        return self._ch

    # =========================================================================
    # Public API
    # =========================================================================

    def next_token(self) -> Token:
        """Scan and return the next token.

        Consumes zero or more characters. Returns exactly one token.
        """
        self._skip_whitespace()

        ch = self._ch
        kind = PUNCTUATION.get(ch)
        if kind is not None:
            token = self._make_token(kind, self._pos, self._read_pos)
            self._advance()
            return token

        if ch == EOF_SENTINEL:
            # Stable: repeated calls land here again without advancing.
            return self._make_token(TokenKind.EOF, self._pos, self._pos)

        if ch in LETTERS:
            return self._scan_identifier()

        if ch in DIGITS:
            return self._scan_integer()

        token = self._make_token(TokenKind.ILLEGAL, self._pos, self._read_pos)
        logger.debug("Illegal character %r at %d:%d", ch, token.lineno, token.col)
        self._advance()
        return token

    def tokenize(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, EOF.

        Yields:
            Token objects one at a time

        Complexity: O(n) where n = len(source)
        """
        token = self.next_token()
        while token.kind is not TokenKind.EOF:
            yield token
            token = self.next_token()

    def lex(self) -> list[Token]:
        """Scan the whole source and return every token before EOF."""
        tokens = list(self.tokenize())
        logger.debug(
            "Scanned %d tokens from %d characters%s",
            len(tokens),
            self._source_len,
            f" ({self._source_file})" if self._source_file else "",
        )
        return tokens

    # =========================================================================
    # Scanning
    # =========================================================================

    def _advance(self) -> None:
        """Move the window one character to the right.

        Past the end of the source, the current character becomes
        EOF_SENTINEL and stays there.
        """
        if self._ch == "\n":
            self._lineno += 1
            self._line_start = self._read_pos

        if self._read_pos >= self._source_len:
            self._ch = EOF_SENTINEL
        else:
            self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1

    def _skip_whitespace(self) -> None:
        while self._ch in WHITESPACE:
            self._advance()

    def _scan_identifier(self) -> Token:
        """Scan a maximal run of letters/underscores as IDENT or keyword."""
        start = self._pos
        lineno, col = self._lineno, self._col()
        while self._ch in LETTERS:
            self._advance()
        literal = self._source[start : self._pos]
        return self._make_token(
            lookup_ident(literal), start, self._pos, lineno=lineno, col=col
        )

    def _scan_integer(self) -> Token:
        """Scan a maximal run of decimal digits as INT."""
        start = self._pos
        lineno, col = self._lineno, self._col()
        while self._ch in DIGITS:
            self._advance()
        return self._make_token(TokenKind.INT, start, self._pos, lineno=lineno, col=col)

    # =========================================================================
    # Token construction
    # =========================================================================

    def _col(self) -> int:
        return self._pos - self._line_start + 1

    def _make_token(
        self,
        kind: TokenKind,
        start: int,
        end: int,
        *,
        lineno: int | None = None,
        col: int | None = None,
    ) -> Token:
        """Create a Token for source[start:end].

        Line and column default to the current position, which is right for
        every token that starts where the window currently sits.

        Args:
            kind: The token kind.
            start: Start offset in source.
            end: End offset in source (exclusive, clamped to source length).
            lineno: Line override for tokens built after their run was consumed.
            col: Column override, same as lineno.

        Returns:
            Token with raw coordinates for lazy location creation.
        """
        end = min(end, self._source_len)
        return Token(
            kind=kind,
            literal=self._source[start:end],
            _offset=start,
            _end_offset=end,
            _lineno=lineno if lineno is not None else self._lineno,
            _col=col if col is not None else self._col(),
            _source_file=self._source_file,
        )
