"""Scanner that turns KPL source text into tokens."""

from __future__ import annotations

from typing import Iterator, NamedTuple

from kplc.charcode import CharCode, char_code
from kplc.errors import ErrorCode, error
from kplc.reader import Reader
from kplc.tokens import MAX_IDENT_LEN, Token, TokenType, check_keyword


class _ErrorSet(NamedTuple):
    end_of_comment: ErrorCode
    ident_too_long: ErrorCode
    invalid_char_constant: ErrorCode
    invalid_symbol: ErrorCode


_PARSER_ERRORS = _ErrorSet(
    ErrorCode.ENDOFCOMMENT,
    ErrorCode.IDENTTOOLONG,
    ErrorCode.INVALIDCHARCONSTANT,
    ErrorCode.INVALIDSYMBOL,
)

_COMPILER_ERRORS = _ErrorSet(
    ErrorCode.END_OF_COMMENT,
    ErrorCode.IDENT_TOO_LONG,
    ErrorCode.INVALID_CONSTANT_CHAR,
    ErrorCode.INVALID_SYMBOL,
)

_SINGLE_CHAR_TOKENS: dict[CharCode, TokenType] = {
    CharCode.PLUS: TokenType.SB_PLUS,
    CharCode.MINUS: TokenType.SB_MINUS,
    CharCode.TIMES: TokenType.SB_TIMES,
    CharCode.SLASH: TokenType.SB_SLASH,
    CharCode.EQ: TokenType.SB_EQ,
    CharCode.COMMA: TokenType.SB_COMMA,
    CharCode.SEMICOLON: TokenType.SB_SEMICOLON,
    CharCode.RPAR: TokenType.SB_RPAR,
}

# First character -> (follower, token when followed, token otherwise)
_PAIR_TOKENS: dict[CharCode, tuple[CharCode, TokenType, TokenType]] = {
    CharCode.LT: (CharCode.EQ, TokenType.SB_LE, TokenType.SB_LT),
    CharCode.GT: (CharCode.EQ, TokenType.SB_GE, TokenType.SB_GT),
    CharCode.COLON: (CharCode.EQ, TokenType.SB_ASSIGN, TokenType.SB_COLON),
    CharCode.PERIOD: (CharCode.RPAR, TokenType.SB_RSEL, TokenType.SB_PERIOD),
}


class Scanner:
    """Produces tokens from a :class:`Reader`.

    With ``uppercase_idents`` set, identifier spellings are folded to upper
    case and errors carry the symbol-table compiler's messages; otherwise
    identifiers keep their spelling and the parser's messages are used.
    Lexical errors raise :class:`kplc.errors.CompileError`.
    """

    def __init__(self, reader: Reader, uppercase_idents: bool = False) -> None:
        self._reader = reader
        self.uppercase_idents = uppercase_idents
        self._errors = _COMPILER_ERRORS if uppercase_idents else _PARSER_ERRORS

    def _current_is(self, code: CharCode) -> bool:
        ch = self._reader.current_char
        return ch is not None and char_code(ch) is code

    def _skip_blank(self) -> None:
        while self._current_is(CharCode.SPACE):
            self._reader.read_char()

    def _skip_comment(self) -> None:
        reader = self._reader
        state = 0
        while reader.current_char is not None and state < 2:
            code = char_code(reader.current_char)
            if code is CharCode.TIMES:
                state = 1
            elif code is CharCode.RPAR:
                state = 2 if state == 1 else 0
            else:
                state = 0
            reader.read_char()
        if state != 2:
            error(self._errors.end_of_comment, reader.line_no, reader.col_no)

    def _read_ident_keyword(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        chars = [reader.current_char]
        reader.read_char()
        while self._current_is(CharCode.LETTER) or self._current_is(CharCode.DIGIT):
            if len(chars) <= MAX_IDENT_LEN:
                chars.append(reader.current_char)
            reader.read_char()
        if len(chars) > MAX_IDENT_LEN:
            error(self._errors.ident_too_long, line_no, col_no)
        text = "".join(chars)
        if self.uppercase_idents:
            text = text.upper()
        kind = check_keyword(text)
        if kind is TokenType.TK_NONE:
            kind = TokenType.TK_IDENT
        return Token(kind, line_no, col_no, string=text)

    def _read_number(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        digits = []
        while self._current_is(CharCode.DIGIT):
            digits.append(reader.current_char)
            reader.read_char()
        text = "".join(digits)
        return Token(TokenType.TK_NUMBER, line_no, col_no, string=text, value=int(text))

    def _read_const_char(self) -> Token:
        reader = self._reader
        line_no, col_no = reader.line_no, reader.col_no
        content = reader.read_char()
        if content is None:
            error(self._errors.invalid_char_constant, line_no, col_no)
        reader.read_char()
        if not self._current_is(CharCode.SINGLEQUOTE):
            error(self._errors.invalid_char_constant, line_no, col_no)
        reader.read_char()
        return Token(TokenType.TK_CHAR, line_no, col_no, string=content)

    def get_token(self) -> Token:
        """Return the next token; ``TK_EOF`` once the input is exhausted."""
        reader = self._reader
        while True:
            ch = reader.current_char
            if ch is None:
                return Token(TokenType.TK_EOF, reader.line_no, reader.col_no)
            code = char_code(ch)
            line_no, col_no = reader.line_no, reader.col_no

            if code is CharCode.SPACE:
                self._skip_blank()
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
            if code in _PAIR_TOKENS:
                follower, paired, single = _PAIR_TOKENS[code]
                reader.read_char()
                if self._current_is(follower):
                    reader.read_char()
                    return Token(paired, line_no, col_no)
                return Token(single, line_no, col_no)
            if code is CharCode.EXCLAIMATION:
                reader.read_char()
                if self._current_is(CharCode.EQ):
                    reader.read_char()
                    return Token(TokenType.SB_NEQ, line_no, col_no)
                error(self._errors.invalid_symbol, line_no, col_no)
            if code is CharCode.LPAR:
                reader.read_char()
                if self._current_is(CharCode.PERIOD):
                    reader.read_char()
                    return Token(TokenType.SB_LSEL, line_no, col_no)
                if self._current_is(CharCode.TIMES):
                    reader.read_char()
                    self._skip_comment()
                    continue
                return Token(TokenType.SB_LPAR, line_no, col_no)
            error(self._errors.invalid_symbol, line_no, col_no)

    def get_valid_token(self) -> Token:
        """Return the next token, passing over any ``TK_NONE`` tokens."""
        token = self.get_token()
        while token.token_type is TokenType.TK_NONE:
            token = self.get_token()
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the ``TK_EOF`` token."""
        while True:
            token = self.get_token()
            yield token
            if token.token_type is TokenType.TK_EOF:
                return