"""Command line entry point that prints the tokens of a KPL file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from kplc.errors import CompileError
from kplc.lexer import scan


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Scan the file named by the first argument; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("scanner: no input file.")
        return 1
    try:
        scan(args[0], sys.stdout)
    except OSError:
        print("Can't read input file!")
        return 1
    except CompileError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())