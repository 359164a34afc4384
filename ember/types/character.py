from __future__ import annotations


class Character:
    __slots__ = ("value",)

    def __init__(self, value: str):
        if len(value) != 1:
            raise ValueError(f"Character expects a single character, got {value!r}")
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Character) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Character, self.value))

    def __repr__(self):
        return f"Character({self.value!r})"
