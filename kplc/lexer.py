"""Stand-alone KPL lexer with C-style and Pascal-style comments."""

from __future__ import annotations

import os
import sys
from typing import Iterator, Optional, TextIO, Union

from kplc.charcode import CharCode, char_code
from kplc.errors import ErrorCode, error
from kplc.reader import Reader
from kplc.tokens import MAX_IDENT_LEN, Token, TokenType, check_keyword, format_token

_SINGLE_CHAR_TOKENS: dict[CharCode, TokenType] = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.RPAR: TokenType.SB_RPAR,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.PERIOD: TokenType.SB_PERIOD,
    CharCode.EQ: TokenType.SB_EQ,
}

_BRACKET_TOKENS: dict[str, TokenType] = {
    "[": TokenType.SB_LSEL,
    "]": TokenType.SB_RSEL,
}


class Lexer:
    """Tokenizes KPL source read through a :class:`Reader`.

    Comments may be written as ``/* ... */`` or ``(* ... *)``; ``<>`` and
    ``!=`` both mean "not equal"; ``[`` and ``]`` select array elements.
    Keywords are matched without regard to case. Lexical errors raise
    :class:`kplc.errors.CompileError`.
    """

    def __init__(self, reader: Reader) -> None:
        self.reader = reader

    def _current_is(self, code: CharCode) -> bool:
        ch = self.reader.current_char
        return ch is not None and char_code(ch) is code

    def skip_blank(self) -> None:
        """Advance past any whitespace under the cursor."""
        while self._current_is(CharCode.SPACE):
            self.reader.read_char()

    def _skip_comment(self, closer: str) -> None:
        """Skip a comment body; the cursor is on the ``*`` that opened it."""
        reader = self.reader
        reader.read_char()
        while reader.current_char is not None:
            if reader.current_char == "*":
                reader.read_char()
                if reader.current_char == closer:
                    reader.read_char()
                    return
            else:
                reader.read_char()
        error(ErrorCode.ENDOFCOMMENT, reader.line_no, reader.col_no)

    def _read_ident_keyword(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        chars: list[str] = []
        while self._current_is(CharCode.LETTER) or self._current_is(CharCode.DIGIT):
            if len(chars) < MAX_IDENT_LEN:
                chars.append(reader.current_char)
            else:
                error(ErrorCode.IDENTTOOLONG, reader.line_no, reader.col_no)
            reader.read_char()
        text = "".join(chars)
        kind = check_keyword(text)
        if kind is not TokenType.TK_NONE:
            return Token(kind, line_no, col_no)
        return Token(TokenType.TK_IDENT, line_no, col_no, string=text)

    def _read_number(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        digits: list[str] = []
        while self._current_is(CharCode.DIGIT):
            if len(digits) < MAX_IDENT_LEN:
                digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits)
        return Token(TokenType.TK_NUMBER, line_no, col_no, string=text, value=int(text))

    def _read_const_char(self) -> Token:
        reader = self.reader
        line_no, col_no = reader.line_no, reader.col_no
        content = reader.read_char()
        if content is None or content == "\n":
            error(ErrorCode.INVALIDCHARCONSTANT, reader.line_no, reader.col_no)
        reader.read_char()
        if reader.current_char != "'":
            error(ErrorCode.INVALIDCHARCONSTANT, reader.line_no, reader.col_no)
        reader.read_char()
        return Token(TokenType.TK_CHAR, line_no, col_no, string=content)

    def get_token(self) -> Token:
        """Return the next token; ``TK_EOF`` once the input is exhausted."""
        reader = self.reader
        while True:
            ch = reader.current_char
            if ch is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            line_no, col_no = reader.line_no, reader.col_no
            code = char_code(ch)

            if code is CharCode.SPACE:
                self.skip_blank()
                continue
            if code is CharCode.LETTER:
                return self._read_ident_keyword()
            if code is CharCode.DIGIT:
                return self._read_number()
            if code is CharCode.SINGLEQUOTE:
                return self._read_const_char()
            if code in _SINGLE_CHAR_TOKENS:
                reader.read_char()
                return Token(_SINGLE_CHAR_TOKENS[code], line_no, col_no)
            if code is CharCode.SLASH:
                reader.read_char()
                if reader.current_char == "*":
                    self._skip_comment("/")
                    continue
                return Token(TokenType.SB_SLASH, line_no, col_no)
            if code is CharCode.LPAR:
                reader.read_char()
                if reader.current_char == "*":
                    self._skip_comment(")")
                    continue
                return Token(TokenType.SB_LPAR, line_no, col_no)
            if code is CharCode.COLON:
                reader.read_char()
                if reader.current_char == "=":
                    reader.read_char()
                    return Token(TokenType.SB_ASSIGN, line_no, col_no)
                return Token(TokenType.SB_COLON, line_no, col_no)
            if code is CharCode.LT:
                reader.read_char()
                if reader.current_char == "=":
                    reader.read_char()
                    return Token(TokenType.SB_LE, line_no, col_no)
                if reader.current_char == ">":
                    reader.read_char()
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                return Token(TokenType.SB_LT, line_no, col_no)
            if code is CharCode.GT:
                reader.read_char()
                if reader.current_char == "=":
                    reader.read_char()
                    return Token(TokenType.SB_GE, line_no, col_no)
                return Token(TokenType.SB_GT, line_no, col_no)
            if code is CharCode.EXCLAIMATION:
                reader.read_char()
                if reader.current_char == "=":
                    reader.read_char()
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                error(ErrorCode.INVALIDSYMBOL, line_no, col_no)
            if ch in _BRACKET_TOKENS:
                reader.read_char()
                return Token(_BRACKET_TOKENS[ch], line_no, col_no)
            error(ErrorCode.INVALIDSYMBOL, line_no, col_no)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the ``TK_EOF`` token."""
        while True:
            token = self.get_token()
            yield token
            if token.token_type is TokenType.TK_EOF:
                return


def scan(
    file_name: Union[str, "os.PathLike[str]"], out: Optional[TextIO] = None
) -> int:
    """Write every token of ``file_name`` (except end of file) to ``out``.

    Each token is written on its own line as it is read, so output produced
    before a :class:`kplc.errors.CompileError` is kept. Returns the number of
    tokens written. Raises ``OSError`` if the file cannot be read.
    """
    stream = sys.stdout if out is None else out
    lexer = Lexer(Reader.from_file(file_name))
    count = 0
    for token in lexer:
        if token.token_type is TokenType.TK_EOF:
            break
        stream.write(format_token(token) + "\n")
        count += 1
    return count