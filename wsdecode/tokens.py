from __future__ import annotations

from collections.abc import Iterable
from enum import Enum


class Token(str, Enum):
    BLANK = " "
    TAB = "\t"
    TERMINATOR = "\n"


Label = tuple[Token, ...]

_BY_CHAR = {t.value: t for t in Token}

_GLYPHS = {
    Token.BLANK: "S",
    Token.TAB: "T",
    Token.TERMINATOR: "L",
}


def tokenize(src: str) -> list[Token]:
    # Anything that is not space, tab or newline is commentary.
    return [_BY_CHAR[ch] for ch in src if ch in _BY_CHAR]


def token_glyphs(tokens: Iterable[Token]) -> str:
    return "".join(_GLYPHS[t] for t in tokens)
