# kplc

Building blocks for a compiler for KPL, a small Pascal-like teaching language.

## Modules

- `kplc.charcode`: `CharCode` and `char_code(ch)`, which gives the lexical class of one
  character (letters, digits, blanks, the operator characters, or `UNKNOWN`).
- `kplc.reader`: `Reader`, which walks source text one character at a time and keeps
  `current_char` (`None` at the end), `line_no` and `col_no`. `Reader.from_file(path)`
  reads a file.
- `kplc.tokens`: `TokenType`, the `Token` dataclass, `check_keyword` (case-insensitive),
  `token_to_string` (descriptions used in "Missing ..." messages) and `format_token`,
  which renders a token as `line-column:KIND`, e.g. `1-9:TK_IDENT(x)`.
- `kplc.errors`: `ErrorCode` (each member's value is its message), `error_message`,
  and the exceptions `CompileError` and `MissingTokenError`. `str()` of either gives
  `line-column:message`. `error()` and `missing_token()` raise them.
- `kplc.scanner`: `Scanner`, the KPL scanner. It skips `(* ... *)` comments, reads
  `(.` and `.)` as index brackets and `!=` as "not equal". With `uppercase_idents=True`
  identifiers are folded to upper case and errors use the underscored `ErrorCode`
  messages; otherwise spelling is kept and the shorter messages are used.
  `get_valid_token()` passes over `TK_NONE` tokens; iterating yields tokens up to and
  including `TK_EOF`.
- `kplc.lexer`: `Lexer`, a variant that accepts both `/* ... */` and `(* ... *)`
  comments, `<>` as well as `!=`, and `[` / `]` as index brackets; and
  `scan(file_name, out=None)`, which writes each token of a file to `out` (standard
  output by default) and returns how many it wrote.
- `kplc.symtab`: `Type`, `ConstantValue`, `Scope`, `Symbol` and `SymbolTable`, with
  helpers such as `make_int_type`, `make_array_type`, `compare_type` and
  `create_parameter_object`. A new `SymbolTable` holds the predefined `READC`, `READI`,
  `WRITEI`, `WRITEC` and `WRITELN`; `lookup_object` searches the scope chain and then
  these.
- `kplc.debug`: `format_type`, `format_constant_value`, `format_object`,
  `format_object_list` and `format_scope` turn symbol-table contents into indented text.

Lexical errors (an unclosed comment, an identifier longer than 15 characters, a bad
character constant, an unknown symbol) are raised as `CompileError`.

## Installation

```
pip install .
```

## Command line

Print every token of a KPL source file (using `kplc.lexer`), one per line as
`line-column:TOKEN`:

```
kplc-scan program.kpl
```

With no file it prints `scanner: no input file.`, and if the file cannot be read it prints
`Can't read input file!`. A lexical error prints its position and message after the tokens
read so far. In each of these cases the exit status is 1.

## Library use

```python
from kplc.reader import Reader
from kplc.scanner import Scanner
from kplc.tokens import format_token

scanner = Scanner(Reader("PROGRAM demo; BEGIN END."), uppercase_idents=True)
for token in scanner:
    print(format_token(token))
```

Building a symbol table:

```python
from kplc.symtab import SymbolTable, make_int_type
from kplc.debug import format_object

table = SymbolTable()
program = table.create_program_object("DEMO")
table.enter_block(program.scope)
var = table.create_variable_object("X")
var.type = make_int_type()
table.declare_object(var)
print(format_object(program, 0))
```

## What it does not do

There is no parser and no code generator. The package turns source text into tokens and
offers a symbol table and its text dump, but nothing reads a token stream into a program
or fills the symbol table from source; that is left to the caller. The only command is
`kplc-scan`, which lists tokens.

## Tests

```
pip install .[test]
pytest
```