import pytest

from kplc.tokens import (
    KEYWORDS,
    MAX_IDENT_LEN,
    Token,
    TokenType,
    check_keyword,
    format_token,
    token_to_string,
)

KEYWORD_TYPES = [t for t in TokenType if t.name.startswith("KW_")]


@pytest.mark.parametrize("text", ["PROGRAM", "program", "Program", "pRoGrAm"])
def test_check_keyword_is_case_insensitive(text):
    assert check_keyword(text) is TokenType.KW_PROGRAM


@pytest.mark.parametrize("text", ["", "programs", "prog", "x", "BEGIN1"])
def test_check_keyword_non_keywords(text):
    assert check_keyword(text) is TokenType.TK_NONE


@pytest.mark.parametrize("kind", KEYWORD_TYPES)
def test_every_keyword_type_round_trips(kind):
    word = kind.name[len("KW_"):]
    assert check_keyword(word.lower()) is kind
    assert token_to_string(kind) == "keyword " + word


def test_keyword_table_covers_all_keyword_types():
    assert sorted(KEYWORDS.values(), key=lambda t: t.name) == sorted(
        KEYWORD_TYPES, key=lambda t: t.name
    )
    assert len(KEYWORDS) == 20
    assert all(len(word) <= MAX_IDENT_LEN for word in KEYWORDS)


@pytest.mark.parametrize(
    "kind, text",
    [
        (TokenType.TK_NONE, "None"),
        (TokenType.TK_IDENT, "an identification"),
        (TokenType.TK_NUMBER, "a number"),
        (TokenType.TK_CHAR, "a constant char"),
        (TokenType.TK_EOF, "end of file"),
        (TokenType.SB_ASSIGN, "':='"),
        (TokenType.SB_NEQ, "'!='"),
        (TokenType.SB_LSEL, "'(.'"),
        (TokenType.SB_RSEL, "'.)'"),
        (TokenType.SB_SEMICOLON, "';'"),
    ],
)
def test_token_to_string(kind, text):
    assert token_to_string(kind) == text


def test_every_token_type_has_a_description():
    assert all(token_to_string(kind) for kind in TokenType)


def test_format_ident_and_number():
    assert format_token(Token(TokenType.TK_IDENT, 1, 2, string="abc")) == "1-2:TK_IDENT(abc)"
    assert (
        format_token(Token(TokenType.TK_NUMBER, 4, 9, string="123", value=123))
        == "4-9:TK_NUMBER(123)"
    )


def test_format_char_is_quoted():
    assert format_token(Token(TokenType.TK_CHAR, 3, 4, string="a")) == "3-4:TK_CHAR('a')"


@pytest.mark.parametrize(
    "kind",
    [TokenType.SB_PLUS, TokenType.KW_BEGIN, TokenType.TK_EOF, TokenType.TK_NONE],
)
def test_format_plain_kinds_use_name(kind):
    assert format_token(Token(kind, 7, 1)) == f"7-1:{kind.name}"


def test_token_defaults():
    token = Token(TokenType.TK_EOF, 2, 3)
    assert (token.string, token.value) == ("", 0)