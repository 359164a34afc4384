# Core type aliases for Ember's data model.
# Every datum the reader produces is one of the classes in ember.types:
# Fixnum, Boolean, Character, String, EmptyList or Pair.
#
# Naming guidance:
# - SExpression: Use in reader/writer code to denote syntactic data.
# - LispValue:  Use in evaluator/driver code to denote evaluated values.
# Both aliases resolve to the same union. The evaluator is the identity, so
# there is no difference between the two yet.

from typing import Callable, Optional, Union

from ember.types.fixnum import Fixnum
from ember.types.boolean import Boolean
from ember.types.character import Character
from ember.types.string import String
from ember.types.empty_list import EmptyList
from ember.types.pair import Pair

SExpression = Union[Fixnum, Boolean, Character, String, EmptyList, Pair]
LispValue = SExpression

# Supplies the next raw input line, or None once the input is exhausted.
LineSource = Callable[[], Optional[str]]

__all__ = [
    "Fixnum", "Boolean", "Character", "String", "EmptyList", "Pair",
    "SExpression", "LispValue", "LineSource",
]
