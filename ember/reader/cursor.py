"""
  Character cursor over one logical unit of input.

- Normally one line (with its trailing newline), fed in by the driver.
- May grow: when a string literal runs past the end of a line the reader
  calls `pull_line`, which appends the next line from the line source.
- End of input is reported as EOF (the empty string), never as an exception.
"""

from __future__ import annotations

from typing import Optional, Tuple

from ember import LineSource

EOF = ""

DELIMITERS = frozenset('()";')


def is_delimiter(ch: str) -> bool:
    return ch == EOF or ch.isspace() or ch in DELIMITERS


class CharCursor:
    def __init__(self, text: str, line_source: Optional[LineSource] = None):
        self.buffer = text
        self.pos = 0
        self.line_source = line_source
        # last position whose line was computed, with that line and its start
        self._mark = 0
        self._mark_line = 0
        self._mark_line_start = 0

    def peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        if i < len(self.buffer):
            return self.buffer[i]
        return EOF

    def get(self) -> str:
        if self.pos < len(self.buffer):
            ch = self.buffer[self.pos]
            self.pos += 1
            return ch
        return EOF

    def unget(self) -> None:
        if self.pos > 0:
            self.pos -= 1

    def advance(self, n: int) -> None:
        self.pos = min(self.pos + n, len(self.buffer))

    def startswith(self, text: str) -> bool:
        return self.buffer.startswith(text, self.pos)

    def at_end(self) -> bool:
        return self.pos >= len(self.buffer)

    def pull_line(self) -> bool:
        """Append the next line from the line source; False if there is none."""
        if self.line_source is None:
            return False
        line = self.line_source()
        if line is None:
            return False
        self.buffer += line.rstrip("\r\n") + "\n"
        return True

    @property
    def offset(self) -> int:
        return self.pos

    @property
    def location(self) -> Tuple[int, int]:
        # (line, column), 0-based, of the next character to be read.
        # Only the text between the previous query and this one is scanned.
        pos = self.pos
        if pos >= self._mark:
            newlines = self.buffer.count("\n", self._mark, pos)
            if newlines:
                self._mark_line += newlines
                self._mark_line_start = self.buffer.rfind("\n", self._mark, pos) + 1
        else:
            self._mark_line -= self.buffer.count("\n", pos, self._mark)
            self._mark_line_start = self.buffer.rfind("\n", 0, pos) + 1
        self._mark = pos
        return self._mark_line, pos - self._mark_line_start

    def __repr__(self):
        return f"CharCursor(pos={self.pos}, buffer={self.buffer!r})"
