"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os
from typing import Iterator, Optional, Union


class Reader:
    """Reads source text one character at a time.

    ``current_char`` holds the character under the cursor, or ``None`` once
    the input is exhausted. ``line_no`` starts at 1; ``col_no`` is advanced on
    every read and reset to 0 after a newline.
    """

    def __init__(self, text: str) -> None:
        self._chars: Iterator[str] = iter(text)
        self.line_no = 1
        self.col_no = 0
        self.current_char: Optional[str] = None
        self.read_char()

    def read_char(self) -> Optional[str]:
        """Advance to the next character and return it (``None`` at the end)."""
        self.current_char = next(self._chars, None)
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char

    @classmethod
    def from_file(cls, path: Union[str, "os.PathLike[str]"]) -> "Reader":
        """Open ``path`` and return a reader over its contents.

        Raises ``OSError`` if the file cannot be read.
        """
        with open(path, "r", encoding="latin-1") as stream:
            return cls(stream.read())