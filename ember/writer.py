"""
  Ember Writer

Canonical text for every value the reader produces:

    Fixnum     -> decimal, '-' only when negative
    Boolean    -> #t / #f
    Character  -> #\\newline, #\\space or #\\ followed by the character
    String     -> "..." with each newline as the two characters \\n
    EmptyList  -> ()
    Pair       -> (a b c) or (a b . c)

`display` is the human-facing variant: strings and characters come out raw.
"""

from __future__ import annotations

from ember import SExpression
from ember.errors import EmberTypeError
from ember.types.boolean import Boolean
from ember.types.character import Character
from ember.types.empty_list import EmptyList
from ember.types.fixnum import Fixnum
from ember.types.pair import Pair
from ember.types.string import String

CHAR_NAMES: dict[str, str] = {
    "\n": "newline",
    " ": "space",
}


class _Raw(str):
    """Text already rendered, queued between values on the work stack."""


def _write_atom(value: SExpression, readable: bool) -> str:
    if isinstance(value, Boolean):
        return "#t" if value.value else "#f"
    if isinstance(value, Character):
        if not readable:
            return value.value
        return "#\\" + CHAR_NAMES.get(value.value, value.value)
    if isinstance(value, Fixnum):
        return str(value.value)
    if isinstance(value, String):
        if not readable:
            return value.value
        return '"' + value.value.replace("\n", "\\n") + '"'
    if isinstance(value, EmptyList):
        return "()"
    raise EmberTypeError(f"Unknown type! Cannot write {value!r}")


def _render(value: SExpression, readable: bool) -> str:
    out: list[str] = []
    stack: list[object] = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, _Raw):
            out.append(item)
            continue
        if not isinstance(item, Pair):
            out.append(_write_atom(item, readable))
            continue

        # Lay out the whole chain: first, then ' ' + first for every pair
        # rest, then ' . ' + rest if the chain is dotted.
        parts: list[object] = [_Raw("(")]
        node: SExpression = item
        while True:
            parts.append(node.first)
            node = node.rest
            if isinstance(node, Pair):
                parts.append(_Raw(" "))
                continue
            if not isinstance(node, EmptyList):
                parts.append(_Raw(" . "))
                parts.append(node)
            break
        parts.append(_Raw(")"))
        stack.extend(reversed(parts))
    return "".join(out)


def write(value: SExpression) -> str:
    """Return the canonical, re-readable text of `value`."""
    return _render(value, readable=True)


def display(value: SExpression) -> str:
    return _render(value, readable=False)
