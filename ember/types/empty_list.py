from __future__ import annotations


class EmptyList:
    """The list terminator. One instance per SingletonRegistry."""
    __slots__ = ()

    def __repr__(self): return "()"
    def __bool__(self): return False
    def __len__(self): return 0
