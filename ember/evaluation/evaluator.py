from __future__ import annotations

from ember import LispValue, SExpression


def evaluate(expr: SExpression) -> LispValue:
    """
    Evaluate a datum. Every datum currently evaluates to itself.

    Any environment or apply machinery added later must keep this
    signature: the driver calls evaluate(datum) and writes the result.
    """
    return expr
