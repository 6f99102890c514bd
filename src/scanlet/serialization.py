"""Token serialization: JSON round-trip for token sequences.

Converts tokens to/from JSON-compatible dicts. Useful for:
- Handing a token stream to a parser running in another process
- Caching scan results
- Debugging and inspection

All output is deterministic (sorted keys).

Example:
    from scanlet import lex
    from scanlet.serialization import to_json, from_json

    tokens = lex("let x = 1;")
    assert from_json(to_json(tokens)) == tokens

Thread Safety:
    All functions are pure and safe to call from any thread.

"""

import json
from typing import Any

from scanlet.errors import SerializationError
from scanlet.tokens import Token, TokenKind

_POSITION_FIELDS = ("offset", "end_offset", "lineno", "col")


def token_to_dict(token: Token) -> dict[str, Any]:
    """Convert a token to a JSON-compatible dict."""
    return {
        "kind": token.kind.name,
        "literal": token.literal,
        "offset": token.offset,
        "end_offset": token.end_offset,
        "lineno": token.lineno,
        "col": token.col,
    }


def token_from_dict(data: dict[str, Any], source_file: str | None = None) -> Token:
    """Reconstruct a token from a dict produced by token_to_dict.

    Position keys are optional and default to 0 (unknown).

    Raises:
        SerializationError: If kind or literal is missing, kind is unknown,
            literal is not a string, or a position is not an integer.
    """
    try:
        kind_name = data["kind"]
        literal = data["literal"]
    except KeyError as e:
        raise SerializationError(f"Token payload missing field {e.args[0]!r}") from e

    if not isinstance(kind_name, str) or kind_name not in TokenKind.__members__:
        raise SerializationError(f"Unknown token kind: {kind_name!r}")
    if not isinstance(literal, str):
        raise SerializationError(f"Token literal must be a string, got {type(literal).__name__}")

    positions = {name: data.get(name, 0) for name in _POSITION_FIELDS}
    for name, value in positions.items():
        # bool is an int subclass; JSON true/false is not a position
        if type(value) is not int:
            raise SerializationError(
                f"Token field {name!r} must be an integer, got {type(value).__name__}"
            )

    return Token(
        kind=TokenKind[kind_name],
        literal=literal,
        _offset=positions["offset"],
        _end_offset=positions["end_offset"],
        _lineno=positions["lineno"],
        _col=positions["col"],
        _source_file=source_file,
    )


def to_json(tokens: list[Token], *, indent: int | None = None) -> str:
    """Serialize a token sequence to a JSON array."""
    return json.dumps([token_to_dict(t) for t in tokens], indent=indent, sort_keys=True)


def from_json(text: str, source_file: str | None = None) -> list[Token]:
    """Deserialize a JSON array produced by to_json.

    Raises:
        SerializationError: If the payload is not a list of token objects.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise SerializationError(f"Expected a JSON array, got {type(data).__name__}")
    for item in data:
        if not isinstance(item, dict):
            raise SerializationError(f"Expected a token object, got {type(item).__name__}")
    return [token_from_dict(item, source_file) for item in data]
