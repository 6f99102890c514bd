"""Print the token stream for a small program, one token per line."""

from scanlet import lex

SOURCE = """\
let add = fn(x, y) {
    x + y;
};
let three = add(1, 2);
"""

for token in lex(SOURCE, source_file="example.mk"):
    print(f"{token.location!s:16} {token.kind.name:10} {token.literal!r}")
