"""
  Ember Reader

- Character-level reader over a CharCursor, one datum per `read()` call
- Emits ember.types values:

    - fixnums      -> Fixnum   (signed 64-bit, anything wider is an error)
    - #t / #f      -> the registry's canonical Boolean instances
    - #\\x         -> Character (#\\newline and #\\space are named)
    - "..."        -> String   (a \\" pair is kept as two characters)
    - ()           -> the registry's canonical EmptyList
    - (a b . c)    -> Pair chains, proper or dotted

n.b. Lists are read with an explicit stack of open frames rather than by
recursion, so neither list length nor nesting depth is limited by the
Python recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from ember import LineSource, SExpression
from ember.errors import LexicalError, ReaderError, StructuralError, TruncationError
from ember.reader.cursor import CharCursor, EOF, is_delimiter
from ember.registry import SingletonRegistry
from ember.types.character import Character
from ember.types.fixnum import Fixnum, FIXNUM_MAX, in_fixnum_range
from ember.types.pair import Pair
from ember.types.string import String

logger = logging.getLogger(__name__)

MAX_LITERAL_IN_MESSAGE = 24

NAMED_CHARS: dict[str, str] = {
    "newline": "\n",
    "space": " ",
}


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class _ListFrame:
    """A list whose '(' has been consumed but whose ')' has not."""
    __slots__ = ("items", "dotted", "tail")

    def __init__(self):
        self.items: list[SExpression] = []
        self.dotted = False
        self.tail: Optional[SExpression] = None

    def build(self, empty_list: SExpression) -> SExpression:
        tail = self.tail if self.dotted else empty_list
        return Pair.from_iterable(self.items, tail)


class Reader:
    def __init__(self, cursor: CharCursor, registry: SingletonRegistry):
        self.cursor = cursor
        self.registry = registry

    def _error(self, cls: type[ReaderError], message: str) -> ReaderError:
        line, col = self.cursor.location
        logger.debug("%s at %d:%d: %s", cls.__name__, line + 1, col + 1, message)
        return cls(message, line, col)

    # ------------------------
    # Whitespace and comments
    # ------------------------
    def skip_atmosphere(self) -> None:
        cursor = self.cursor
        while True:
            ch = cursor.peek()
            if ch == EOF:
                return
            if ch.isspace():
                cursor.get()
            elif ch == ";":
                while cursor.peek() not in (EOF, "\n"):
                    cursor.get()
            else:
                return

    def at_end(self) -> bool:
        """True when only whitespace and comments remain."""
        self.skip_atmosphere()
        return self.cursor.peek() == EOF

    # ------------------------
    # Top level
    # ------------------------
    def read(self) -> SExpression:
        cursor = self.cursor
        frames: list[_ListFrame] = []
        while True:
            self.skip_atmosphere()
            frame = frames[-1] if frames else None

            if frame is not None and frame.dotted and frame.tail is not None:
                if cursor.peek() != ")":
                    raise self._error(StructuralError, "Missing ')' after dotted pair")
                cursor.get()
                frames.pop()
                value = frame.build(self.registry.empty_list)
            elif frame is not None and not frame.dotted and cursor.peek() == ")":
                cursor.get()
                frames.pop()
                value = frame.build(self.registry.empty_list)
            elif frame is not None and frame.items and not frame.dotted and cursor.peek() == ".":
                cursor.get()
                if not is_delimiter(cursor.peek()):
                    raise self._error(StructuralError, "Dot not followed by delimiter")
                frame.dotted = True
                continue
            else:
                ch = cursor.get()
                if ch == "(":
                    frames.append(_ListFrame())
                    continue
                if ch == EOF and frames:
                    raise self._error(StructuralError, "Missing ')' before end of input")
                value = self._read_atom(ch)

            if not frames:
                return value
            frame = frames[-1]
            if frame.dotted:
                frame.tail = value
            else:
                frame.items.append(value)

    def read_all(self) -> Iterator[SExpression]:
        while not self.at_end():
            yield self.read()

    # ------------------------
    # Atoms
    # ------------------------
    def _read_atom(self, ch: str) -> SExpression:
        if _is_digit(ch) or (ch == "-" and _is_digit(self.cursor.peek())):
            return self._read_fixnum(ch)
        if ch == "#":
            return self._read_hash()
        if ch == '"':
            return self._read_string()
        if ch == EOF:
            raise self._error(StructuralError, "Unexpected end of input")
        self.cursor.unget()
        raise self._error(StructuralError, f"Bad input! Unexpected {ch!r}")

    def _read_fixnum(self, ch: str) -> Fixnum:
        cursor = self.cursor
        start = cursor.offset - 1
        sign = -1 if ch == "-" else 1
        num = 0 if ch == "-" else ord(ch) - ord("0")
        overflow = False
        while _is_digit(cursor.peek()):
            digit = ord(cursor.get()) - ord("0")
            # once past any fixnum magnitude, only consume the digits
            if not overflow:
                num = num * 10 + digit
                overflow = num > FIXNUM_MAX + 1
        if not is_delimiter(cursor.peek()):
            raise self._error(LexicalError, "Number not followed by delimiter")
        num *= sign
        if overflow or not in_fixnum_range(num):
            literal = cursor.buffer[start:cursor.offset]
            if len(literal) > MAX_LITERAL_IN_MESSAGE:
                literal = literal[: MAX_LITERAL_IN_MESSAGE - 3] + "..."
            raise self._error(LexicalError, f"Fixnum out of range: {literal}")
        return Fixnum(num)

    def _read_hash(self) -> SExpression:
        ch = self.cursor.get()
        if ch == "t":
            return self.registry.true
        if ch == "f":
            return self.registry.false
        if ch == "\\":
            return self._read_character()
        if ch != EOF:
            self.cursor.unget()
        raise self._error(LexicalError, "Unexpected character after '#'!")

    def _read_character(self) -> Character:
        cursor = self.cursor
        ch = cursor.get()
        if ch == EOF:
            raise self._error(LexicalError, "Invalid character!")
        for name, char in NAMED_CHARS.items():
            if ch == name[0] and cursor.startswith(name[1:]):
                cursor.advance(len(name) - 1)
                ch = char
                break
        if not is_delimiter(cursor.peek()):
            raise self._error(LexicalError, "Invalid character!")
        return Character(ch)

    def _read_string(self) -> String:
        cursor = self.cursor
        chars: list[str] = []
        while True:
            ch = cursor.get()
            if ch == EOF:
                raise self._error(TruncationError, "Non-terminated string literal")
            if ch == '"':
                return String("".join(chars))
            if ch == "\\" and cursor.peek() == '"':
                # kept verbatim, backslash included
                chars.append(ch)
                chars.append(cursor.get())
                continue
            chars.append(ch)
            if ch == "\n" and cursor.at_end():
                cursor.pull_line()


def read(cursor: CharCursor, registry: SingletonRegistry) -> SExpression:
    """Read one datum from `cursor`, raising a ReaderError on malformed input."""
    return Reader(cursor, registry).read()


def read_string(
    text: str,
    registry: SingletonRegistry,
    line_source: Optional[LineSource] = None,
) -> SExpression:
    return read(CharCursor(text, line_source), registry)
