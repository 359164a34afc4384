from __future__ import annotations

from ember.types.boolean import Boolean
from ember.types.empty_list import EmptyList


class SingletonRegistry:
    """
    Owns the canonical true, false and empty-list values for a session.

    The three instances are created once, here, and handed out by reference.
    The reader asks the registry for them instead of building new ones, so
    `#t` read twice yields the very same object.
    """
    __slots__ = ("_true", "_false", "_empty_list")

    def __init__(self):
        self._true = Boolean(True)
        self._false = Boolean(False)
        self._empty_list = EmptyList()

    @property
    def true(self) -> Boolean:
        return self._true

    @property
    def false(self) -> Boolean:
        return self._false

    @property
    def empty_list(self) -> EmptyList:
        return self._empty_list

    def boolean(self, flag: bool) -> Boolean:
        return self._true if flag else self._false

    def owns(self, value) -> bool:
        return value is self._true or value is self._false or value is self._empty_list
