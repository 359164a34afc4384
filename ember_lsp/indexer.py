from __future__ import annotations

"""
Indexer for Ember documents.

Reads the document with the real reader, recording where each top-level
datum starts and ends. Reading stops at the first error, which is kept so
the server can report it as a diagnostic.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ember import SExpression
from ember.errors import ReaderError
from ember.reader.cursor import CharCursor
from ember.reader.parser import Reader
from ember.registry import SingletonRegistry
from ember.writer import write

MAX_LABEL_LENGTH = 40


@dataclass
class Datum:
    value: SExpression
    start: Tuple[int, int]  # (line, col), 0-based
    end: Tuple[int, int]  # exclusive

    def contains(self, line: int, col: int) -> bool:
        return self.start <= (line, col) < self.end


@dataclass
class DocumentIndex:
    data: List[Datum] = field(default_factory=list)
    error: Optional[ReaderError] = None


def build_index(text: str, registry: Optional[SingletonRegistry] = None) -> DocumentIndex:
    idx = DocumentIndex()
    cursor = CharCursor(text)
    reader = Reader(cursor, registry if registry is not None else SingletonRegistry())
    try:
        while not reader.at_end():
            start = cursor.location
            value = reader.read()
            idx.data.append(Datum(value, start, cursor.location))
    except ReaderError as err:
        idx.error = err
    return idx


def datum_at(idx: DocumentIndex, line: int, col: int) -> Optional[Datum]:
    for datum in idx.data:
        if datum.contains(line, col):
            return datum
    return None


def describe(value: SExpression) -> str:
    return f"{type(value).__name__}: {write(value)}"


def label(value: SExpression) -> str:
    text = write(value)
    if len(text) > MAX_LABEL_LENGTH:
        return text[: MAX_LABEL_LENGTH - 3] + "..."
    return text
