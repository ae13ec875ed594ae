"""Predicates — named filter expressions used as step arguments.

A predicate is an operator name plus one or more operand values::

    P.gt(5)                 ->  gt(5)
    P.within("a", "b")      ->  within(['a','b'])
    TextP.startingWith("x") ->  startingWith('x')

Operands may themselves be predicates, collections or traversals; the
renderer recurses into them like into any other argument.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, init=False)
class P:
    """A predicate: ``operator`` applied to ordered ``values``."""

    operator: str
    values: tuple[Any, ...] = ()

    def __init__(self, operator: str, values: Any = ()) -> None:
        object.__setattr__(self, "operator", operator)
        if isinstance(values, str):
            values = (values,)
        object.__setattr__(self, "values", tuple(values))

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    @classmethod
    def eq(cls, value: Any) -> P:
        return cls("eq", (value,))

    @classmethod
    def neq(cls, value: Any) -> P:
        return cls("neq", (value,))

    @classmethod
    def lt(cls, value: Any) -> P:
        return cls("lt", (value,))

    @classmethod
    def lte(cls, value: Any) -> P:
        return cls("lte", (value,))

    @classmethod
    def gt(cls, value: Any) -> P:
        return cls("gt", (value,))

    @classmethod
    def gte(cls, value: Any) -> P:
        return cls("gte", (value,))

    # ------------------------------------------------------------------
    # Ranges and membership
    # ------------------------------------------------------------------

    @classmethod
    def inside(cls, first: Any, second: Any) -> P:
        return cls("inside", (first, second))

    @classmethod
    def outside(cls, first: Any, second: Any) -> P:
        return cls("outside", (first, second))

    @classmethod
    def between(cls, first: Any, second: Any) -> P:
        return cls("between", (first, second))

    @classmethod
    def within(cls, *values: Any) -> P:
        return cls("within", values)

    @classmethod
    def without(cls, *values: Any) -> P:
        return cls("without", values)

    # ------------------------------------------------------------------
    # Connectives
    # ------------------------------------------------------------------

    @classmethod
    def not_(cls, predicate: P) -> P:
        return cls("not", (predicate,))

    def and_(self, other: P) -> P:
        """Combine with *other*; both must hold."""
        return P("and", (self, other))

    def or_(self, other: P) -> P:
        """Combine with *other*; either may hold."""
        return P("or", (self, other))

    def __str__(self) -> str:
        if len(self.values) == 1:
            return f"{self.operator}({self.values[0]})"
        return f"{self.operator}({list(self.values)})"


@dataclass(frozen=True, init=False)
class TextP(P):
    """Text predicates over string values."""

    @classmethod
    def containing(cls, value: str) -> TextP:
        return cls("containing", (value,))

    @classmethod
    def notContaining(cls, value: str) -> TextP:
        return cls("notContaining", (value,))

    @classmethod
    def startingWith(cls, value: str) -> TextP:
        return cls("startingWith", (value,))

    @classmethod
    def notStartingWith(cls, value: str) -> TextP:
        return cls("notStartingWith", (value,))

    @classmethod
    def endingWith(cls, value: str) -> TextP:
        return cls("endingWith", (value,))

    @classmethod
    def notEndingWith(cls, value: str) -> TextP:
        return cls("notEndingWith", (value,))

    @classmethod
    def regex(cls, value: str) -> TextP:
        return cls("regex", (value,))

    @classmethod
    def notRegex(cls, value: str) -> TextP:
        return cls("notRegex", (value,))
