"""Error-path tests.

The lexer never raises; errors come from the illegal-token policy layer
and from deserialization.
"""

import logging

import pytest

from scanlet.config import IllegalPolicy
from scanlet.diagnostics import apply_illegal_policy, find_illegal
from scanlet.errors import IllegalCharacterError, ScanletError, SerializationError
from scanlet.lexer import Lexer
from scanlet.location import SourceLocation
from scanlet.tokens import Token, TokenKind

# =========================================================================
# IllegalCharacterError construction and formatting
# =========================================================================


class TestIllegalCharacterErrorFormatting:
    """Verify IllegalCharacterError produces well-formatted messages."""

    def test_char_only(self) -> None:
        err = IllegalCharacterError("@")
        assert str(err) == "illegal character '@'"
        assert err.char == "@"
        assert err.location is None

    def test_with_location(self) -> None:
        err = IllegalCharacterError("@", SourceLocation(lineno=3, col_offset=7))
        assert str(err) == "3:7 illegal character '@'"

    def test_with_source_file(self) -> None:
        loc = SourceLocation(lineno=1, col_offset=2, source_file="main.mk")
        err = IllegalCharacterError("$", loc)
        assert str(err) == "main.mk:1:2 illegal character '$'"

    def test_hierarchy(self) -> None:
        assert isinstance(IllegalCharacterError("x"), ScanletError)
        assert isinstance(SerializationError("x"), ScanletError)


# =========================================================================
# Illegal-token policies
# =========================================================================


class TestFindIllegal:
    """find_illegal."""

    def test_none(self) -> None:
        assert find_illegal(Lexer("let x = 1;").lex()) == []

    def test_in_source_order(self) -> None:
        found = find_illegal(Lexer("a @ b # c").lex())
        assert [t.literal for t in found] == ["@", "#"]


class TestApplyIllegalPolicy:
    """apply_illegal_policy."""

    def test_keep(self) -> None:
        tokens = Lexer("a@").lex()
        assert apply_illegal_policy(tokens, IllegalPolicy.KEEP) == tokens

    def test_skip(self) -> None:
        tokens = Lexer("a@b").lex()
        assert apply_illegal_policy(tokens, IllegalPolicy.SKIP) == [
            Token(TokenKind.IDENT, "a"),
            Token(TokenKind.IDENT, "b"),
        ]

    def test_skip_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        tokens = Lexer("a@b").lex()
        with caplog.at_level(logging.WARNING, logger="scanlet"):
            apply_illegal_policy(tokens, IllegalPolicy.SKIP)
        assert any("'@'" in r.getMessage() for r in caplog.records)
        assert all(r.name.startswith("scanlet.") for r in caplog.records)

    def test_raise_reports_first(self) -> None:
        tokens = Lexer("ok\n  @ #", source_file="prog.mk").lex()
        with pytest.raises(IllegalCharacterError) as exc_info:
            apply_illegal_policy(tokens, IllegalPolicy.RAISE)
        err = exc_info.value
        assert err.char == "@"
        assert err.location is not None
        assert (err.location.lineno, err.location.col_offset) == (2, 3)
        assert str(err) == "prog.mk:2:3 illegal character '@'"

    def test_raise_without_illegal(self) -> None:
        tokens = Lexer("let x = 1;").lex()
        assert apply_illegal_policy(tokens, IllegalPolicy.RAISE) == tokens

    def test_accepts_iterator(self) -> None:
        result = apply_illegal_policy(Lexer("a@b").tokenize(), IllegalPolicy.SKIP)
        assert [t.literal for t in result] == ["a", "b"]


# =========================================================================
# Lexer never raises
# =========================================================================


class TestLexerGracefulDegradation:
    """Malformed input is reported as data."""

    @pytest.mark.parametrize(
        "source",
        ["@@@", "3.14.15", "let = = fn", "\x00\x01\x02", "日本語", "}{)(", "-1"],
    )
    def test_no_exception(self, source: str) -> None:
        tokens = Lexer(source).lex()
        assert len(tokens) >= 1

    def test_illegal_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="scanlet"):
            Lexer("@").lex()
        messages = [r.getMessage() for r in caplog.records]
        assert any("Illegal character '@'" in m for m in messages)
        assert all(r.levelno == logging.DEBUG for r in caplog.records)
