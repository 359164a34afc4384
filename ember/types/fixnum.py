from __future__ import annotations

# Fixnums are signed 64-bit integers; the reader rejects anything wider.
FIXNUM_BITS = 64
FIXNUM_MIN = -(1 << (FIXNUM_BITS - 1))
FIXNUM_MAX = (1 << (FIXNUM_BITS - 1)) - 1


class Fixnum:
    __slots__ = ("value",)

    def __init__(self, value: int):
        self.value = value

    def __eq__(self, other) -> bool:
        return isinstance(other, Fixnum) and self.value == other.value

    def __hash__(self) -> int:
        return hash((Fixnum, self.value))

    def __repr__(self):
        return f"Fixnum({self.value})"


def in_fixnum_range(value: int) -> bool:
    return FIXNUM_MIN <= value <= FIXNUM_MAX
