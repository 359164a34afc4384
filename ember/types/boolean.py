from __future__ import annotations


class Boolean:
    """
    A truth value. Only the two instances owned by a SingletonRegistry
    should ever exist in a session, so equality is identity.
    """
    __slots__ = ("value",)

    def __init__(self, value: bool):
        self.value = value

    def __bool__(self):
        return self.value

    def __repr__(self):
        return "#t" if self.value else "#f"
