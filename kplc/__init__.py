"""Scanner, lexer, symbol table and diagnostics for the KPL teaching language."""

__version__ = "0.1.0"