"""Error codes, messages and exceptions raised while compiling KPL."""

from __future__ import annotations

from enum import Enum
from typing import NoReturn, Optional

from kplc.tokens import TokenType, token_to_string


class ErrorCode(Enum):
    """Compile error codes; each value is the message shown to the user.

    The run-together names (``ENDOFCOMMENT``) carry the parser's short
    messages, the underscored names (``END_OF_COMMENT``) those of the
    compiler with a symbol table.
    """

    ENDOFCOMMENT = "End of comment expected!"
    IDENTTOOLONG = "Identification too long!"
    INVALIDCHARCONSTANT = "Invalid const char!"
    INVALIDSYMBOL = "Invalid symbol!"
    INVALIDCONSTANT = "Invalid constant!"
    INVALIDTYPE = "Invalid type!"
    INVALIDBASICTYPE = "Invalid basic type!"
    INVALIDPARAM = "Invalid parameter!"
    INVALIDSTATEMENT = "Invalid statement!"
    INVALIDARGUMENTS = "Invalid arguments!"
    INVALIDCOMPARATOR = "Invalid comparator!"
    INVALIDEXPRESSION = "Invalid expression!"
    INVALIDTERM = "Invalid term!"
    INVALIDFACTOR = "Invalid factor!"
    INVALIDCONSTDECL = "Invalid constant declaration!"
    INVALIDTYPEDECL = "Invalid type declaration!"
    INVALIDVARDECL = "Invalid variable declaration!"
    INVALIDSUBDECL = "Invalid subroutine declaration!"

    END_OF_COMMENT = "End of comment expected."
    IDENT_TOO_LONG = "Identifier too long."
    INVALID_CONSTANT_CHAR = "Invalid char constant."
    INVALID_SYMBOL = "Invalid symbol."
    INVALID_IDENT = "An identifier expected."
    INVALID_CONSTANT = "A constant expected."
    INVALID_TYPE = "A type expected."
    INVALID_BASICTYPE = "A basic type expected."
    INVALID_VARIABLE = "A variable expected."
    INVALID_FUNCTION = "A function identifier expected."
    INVALID_PROCEDURE = "A procedure identifier expected."
    INVALID_PARAMETER = "A parameter expected."
    INVALID_STATEMENT = "Invalid statement."
    INVALID_COMPARATOR = "A comparator expected."
    INVALID_EXPRESSION = "Invalid expression."
    INVALID_TERM = "Invalid term."
    INVALID_FACTOR = "Invalid factor."
    INVALID_LVALUE = "Invalid lvalue in assignment."
    INVALID_ARGUMENTS = "Wrong arguments."
    UNDECLARED_IDENT = "Undeclared identifier."
    UNDECLARED_CONSTANT = "Undeclared constant."
    UNDECLARED_INT_CONSTANT = "Undeclared integer constant."
    UNDECLARED_TYPE = "Undeclared type."
    UNDECLARED_VARIABLE = "Undeclared variable."
    UNDECLARED_FUNCTION = "Undeclared function."
    UNDECLARED_PROCEDURE = "Undeclared procedure."
    DUPLICATE_IDENT = "Duplicate identifier."
    TYPE_INCONSISTENCY = "Type inconsistency"
    PARAMETERS_ARGUMENTS_INCONSISTENCY = (
        "The number of arguments and the number of parameters are inconsistent."
    )


def error_message(code: ErrorCode) -> str:
    """Return the user-facing message for ``code``."""
    return code.value


class CompileError(Exception):
    """A compile error at a source position; ``str()`` gives ``line-col:message``."""

    def __init__(
        self,
        code: Optional[ErrorCode],
        line_no: int,
        col_no: int,
        message: Optional[str] = None,
    ) -> None:
        if message is None:
            if code is None:
                raise ValueError("either an error code or a message is required")
            message = error_message(code)
        self.code = code
        self.line_no = line_no
        self.col_no = col_no
        self.message = message
        super().__init__(f"{line_no}-{col_no}:{message}")


class MissingTokenError(CompileError):
    """Raised when the parser expected a particular token."""

    def __init__(self, token_type: TokenType, line_no: int, col_no: int) -> None:
        self.token_type = token_type
        super().__init__(None, line_no, col_no, f"Missing {token_to_string(token_type)}")


def error(code: ErrorCode, line_no: int, col_no: int) -> NoReturn:
    """Raise a :class:`CompileError` for ``code`` at the given position."""
    raise CompileError(code, line_no, col_no)


def missing_token(token_type: TokenType, line_no: int, col_no: int) -> NoReturn:
    """Raise a :class:`MissingTokenError` for ``token_type`` at the given position."""
    raise MissingTokenError(token_type, line_no, col_no)