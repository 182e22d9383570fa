"""Character classes used by the KPL scanners."""

from __future__ import annotations

import string
from enum import Enum, auto


class CharCode(Enum):
    """Lexical class of a single source character."""

    SPACE = auto()
    LETTER = auto()
    DIGIT = auto()
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    SLASH = auto()
    LT = auto()
    GT = auto()
    EXCLAIMATION = auto()
    EQ = auto()
    COMMA = auto()
    PERIOD = auto()
    COLON = auto()
    SEMICOLON = auto()
    SINGLEQUOTE = auto()
    LPAR = auto()
    RPAR = auto()
    UNKNOWN = auto()


def _build_table() -> dict[str, CharCode]:
    table: dict[str, CharCode] = {}
    for ch in "\t\n\v\f\r ":
        table[ch] = CharCode.SPACE
    for ch in string.ascii_letters:
        table[ch] = CharCode.LETTER
    for ch in string.digits:
        table[ch] = CharCode.DIGIT
    table.update(
        {
            "!": CharCode.EXCLAIMATION,
            "'": CharCode.SINGLEQUOTE,
            "(": CharCode.LPAR,
            ")": CharCode.RPAR,
            "*": CharCode.TIMES,
            "+": CharCode.PLUS,
            ",": CharCode.COMMA,
            "-": CharCode.MINUS,
            ".": CharCode.PERIOD,
            "/": CharCode.SLASH,
            ":": CharCode.COLON,
            ";": CharCode.SEMICOLON,
            "<": CharCode.LT,
            "=": CharCode.EQ,
            ">": CharCode.GT,
        }
    )
    return table


_TABLE = _build_table()


def char_code(ch: str) -> CharCode:
    """Return the lexical class of the single character ``ch``."""
    if not isinstance(ch, str):
        raise TypeError(f"expected a str, got {type(ch).__name__}")
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return _TABLE.get(ch, CharCode.UNKNOWN)