import pytest

from kplc.errors import CompileError, ErrorCode
from kplc.reader import Reader
from kplc.scanner import Scanner
from kplc.tokens import TokenType, format_token

T = TokenType


def scan(text, uppercase=False):
    return list(Scanner(Reader(text), uppercase))


def kinds(text, uppercase=False):
    return [tok.token_type for tok in scan(text, uppercase)]


def test_empty_input_gives_eof_only():
    assert kinds("") == [T.TK_EOF]


def test_iteration_ends_with_single_eof():
    tokens = scan("a b c")
    assert [t.token_type for t in tokens].count(T.TK_EOF) == 1
    assert tokens[-1].token_type is T.TK_EOF


def test_keywords_are_case_insensitive():
    assert kinds("begin END While") == [T.KW_BEGIN, T.KW_END, T.KW_WHILE, T.TK_EOF]


def test_identifier_spelling_kept_without_uppercase():
    tok = scan("abc")[0]
    assert tok.token_type is T.TK_IDENT
    assert tok.string == "abc"


def test_identifier_folded_with_uppercase():
    tok = scan("abc", uppercase=True)[0]
    assert tok.token_type is T.TK_IDENT
    assert tok.string == "ABC"


def test_number_value_and_string():
    tok = scan("123")[0]
    assert tok.token_type is T.TK_NUMBER
    assert tok.string == "123"
    assert tok.value == 123


def test_char_constant():
    tok = scan("'a'")[0]
    assert tok.token_type is T.TK_CHAR
    assert tok.string == "a"


def test_operators():
    assert kinds("+ - * / = , ; ) < <= > >= : := . .) (. ( !=") == [
        T.SB_PLUS, T.SB_MINUS, T.SB_TIMES, T.SB_SLASH, T.SB_EQ, T.SB_COMMA,
        T.SB_SEMICOLON, T.SB_RPAR, T.SB_LT, T.SB_LE, T.SB_GT, T.SB_GE,
        T.SB_COLON, T.SB_ASSIGN, T.SB_PERIOD, T.SB_RSEL, T.SB_LSEL, T.SB_LPAR,
        T.SB_NEQ, T.TK_EOF,
    ]


def test_array_selector_around_number():
    assert kinds("a(.1.)") == [T.TK_IDENT, T.SB_LSEL, T.TK_NUMBER, T.SB_RSEL, T.TK_EOF]


def test_comment_is_skipped():
    tokens = scan("(* note *)y")
    assert [t.token_type for t in tokens] == [T.TK_IDENT, T.TK_EOF]
    assert tokens[0].string == "y"


def test_comment_closing_after_paren():
    assert kinds("(*)*)") == [T.TK_EOF]


def test_positions_track_lines_and_columns():
    tokens = scan("a\n  b")
    assert (tokens[0].line_no, tokens[0].col_no) == (1, 1)
    assert (tokens[1].line_no, tokens[1].col_no) == (2, 3)


def test_format_of_scanned_token():
    assert format_token(scan("x")[0]) == "1-1:TK_IDENT(x)"


def test_unterminated_comment_raises():
    with pytest.raises(CompileError) as info:
        scan("(* never closed")
    assert info.value.code is ErrorCode.ENDOFCOMMENT


def test_unterminated_comment_uppercase_mode_code():
    with pytest.raises(CompileError) as info:
        scan("(* never closed", uppercase=True)
    assert info.value.code is ErrorCode.END_OF_COMMENT


def test_max_length_identifier_accepted():
    name = "a" * 15
    assert scan(name)[0].string == name


def test_identifier_too_long():
    with pytest.raises(CompileError) as info:
        scan("a" * 16)
    assert info.value.code is ErrorCode.IDENTTOOLONG
    assert (info.value.line_no, info.value.col_no) == (1, 1)


@pytest.mark.parametrize("text", ["'", "'a", "'ab'"])
def test_invalid_char_constant(text):
    with pytest.raises(CompileError) as info:
        scan(text)
    assert info.value.code is ErrorCode.INVALIDCHARCONSTANT


def test_invalid_char_constant_uppercase_mode():
    with pytest.raises(CompileError) as info:
        scan("'ab'", uppercase=True)
    assert info.value.code is ErrorCode.INVALID_CONSTANT_CHAR


def test_lone_exclamation_is_invalid_symbol():
    with pytest.raises(CompileError) as info:
        scan("!x")
    assert info.value.code is ErrorCode.INVALIDSYMBOL
    assert str(info.value) == "1-1:Invalid symbol!"


def test_unknown_character_is_invalid_symbol():
    with pytest.raises(CompileError) as info:
        scan("#", uppercase=True)
    assert info.value.code is ErrorCode.INVALID_SYMBOL


def test_get_valid_token_returns_real_tokens():
    scanner = Scanner(Reader("  x := 5"))
    assert scanner.get_valid_token().token_type is T.TK_IDENT
    assert scanner.get_valid_token().token_type is T.SB_ASSIGN
    number = scanner.get_valid_token()
    assert number.value == 5
    assert scanner.get_valid_token().token_type is T.TK_EOF


def test_get_token_repeats_eof_at_end():
    scanner = Scanner(Reader("x"))
    scanner.get_token()
    assert scanner.get_token().token_type is T.TK_EOF
    assert scanner.get_token().token_type is T.TK_EOF