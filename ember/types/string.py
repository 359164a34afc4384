from __future__ import annotations


class String:
    """
    A string datum. The reader collects characters into a buffer and wraps
    the finished text here; the text is not changed afterwards.
    """
    __slots__ = ("value",)

    def __init__(self, value: str):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, String) and self.value == other.value

    def __hash__(self) -> int:
        return hash((String, self.value))

    def __len__(self) -> int:
        return len(self.value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"String({self.value!r})"
