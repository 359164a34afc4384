from __future__ import annotations
from typing import TYPE_CHECKING, Iterable, Iterator

if TYPE_CHECKING:
    from ember import SExpression


class Pair:
    """
    A cons cell. Chains of pairs ending in the EmptyList are proper lists;
    any other final `rest` makes the chain a dotted list.
    """
    __slots__ = ("first", "rest")

    def __init__(self, first: SExpression, rest: SExpression):
        if first is None or rest is None:
            raise ValueError("Pair fields must both be values")
        self.first = first
        self.rest = rest

    @classmethod
    def from_iterable(cls, items: Iterable[SExpression], tail: SExpression) -> SExpression:
        """Build (i0 i1 ... . tail) from the right; returns `tail` for no items."""
        result = tail
        for item in reversed(list(items)):
            result = cls(item, result)
        return result

    def __iter__(self) -> Iterator[SExpression]:
        # Yields the elements of the chain, stopping at the first non-pair rest.
        node: SExpression = self
        while isinstance(node, Pair):
            yield node.first
            node = node.rest

    def last_rest(self) -> SExpression:
        node: SExpression = self
        while isinstance(node, Pair):
            node = node.rest
        return node

    def __eq__(self, other) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        # Walk both structures with a work list so long or deep lists
        # do not hit the recursion limit.
        pending = [(self, other)]
        while pending:
            a, b = pending.pop()
            if a is b:
                continue
            if isinstance(a, Pair) and isinstance(b, Pair):
                pending.append((a.rest, b.rest))
                pending.append((a.first, b.first))
            elif isinstance(a, Pair) or isinstance(b, Pair) or a != b:
                return False
        return True

    __hash__ = None

    def __repr__(self):
        return f"Pair({self.first!r}, {self.rest!r})"
