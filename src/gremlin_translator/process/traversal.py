"""
Traversal handles and the constants used as step arguments.

The builder here is deliberately thin: it records whatever step is called,
in call order, without checking names or arities::

    g = GraphTraversalSource()
    g.V("3").repeat(__.out("route").simplePath()).times(2)

Names that collide with Python keywords or builtins take a trailing
underscore (``as_``, ``in_``, ``is_``, ``not_``) which is dropped from the
recorded step name.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable

from gremlin_translator.process.bytecode import Bytecode


class GremlinEnum(Enum):
    """Enum whose members render as their bare token (``desc``, ``local``)."""

    def __str__(self) -> str:
        return str(self._value_)


class T(GremlinEnum):
    """Element tokens."""

    id = "id"
    key = "key"
    label = "label"
    value = "value"


class Order(GremlinEnum):
    asc = "asc"
    desc = "desc"
    shuffle = "shuffle"


class Scope(GremlinEnum):
    global_ = "global"
    local = "local"


class Column(GremlinEnum):
    keys = "keys"
    values = "values"


class Direction(GremlinEnum):
    OUT = "OUT"
    IN = "IN"
    BOTH = "BOTH"


class Cardinality(GremlinEnum):
    single = "single"
    list_ = "list"
    set_ = "set"


class Pop(GremlinEnum):
    first = "first"
    last = "last"
    all_ = "all"
    mixed = "mixed"


class Operator(GremlinEnum):
    """Sack/reducing operators.

    Rendered qualified (``Operator.sum``) since the bare tokens clash with
    step names of the same spelling.
    """

    sum = "sum"
    minus = "minus"
    mult = "mult"
    div = "div"
    min = "min"
    max = "max"
    assign = "assign"
    and_ = "and"
    or_ = "or"
    addAll = "addAll"
    sumLong = "sumLong"

    def __str__(self) -> str:
        return f"Operator.{self._value_}"


def step_name(attribute: str) -> str:
    """Map a Python attribute name to the step name it records."""
    if attribute.endswith("_") and not attribute.endswith("__"):
        return attribute[:-1]
    return attribute


def _is_private(attribute: str) -> bool:
    return attribute.startswith("_") or attribute == "bytecode"


class GraphTraversal:
    """A traversal handle: owns the bytecode its step calls append to."""

    def __init__(self, bytecode: Bytecode | None = None) -> None:
        self.bytecode = bytecode if bytecode is not None else Bytecode()

    def __getattr__(self, attribute: str) -> Callable[..., GraphTraversal]:
        if _is_private(attribute):
            raise AttributeError(attribute)
        name = step_name(attribute)

        def add_step(*args: Any) -> GraphTraversal:
            self.bytecode.add_step(name, *args)
            return self

        return add_step

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.bytecode})"


class AnonymousTraversal(GraphTraversal):
    """A traversal not bound to a source; used as a nested step argument."""


class _AnonymousTraversalSpawner:
    """``__.out()`` starts a fresh anonymous traversal with an ``out`` step."""

    def start(self) -> AnonymousTraversal:
        return AnonymousTraversal()

    def __getattr__(self, attribute: str) -> Callable[..., GraphTraversal]:
        if attribute.startswith("_"):
            raise AttributeError(attribute)
        return getattr(AnonymousTraversal(), attribute)


__ = _AnonymousTraversalSpawner()


class GraphTraversalSource:
    """
    The ``g`` of a traversal.

    ``with*`` calls record source instructions and return a new source;
    any other call spawns a ``GraphTraversal`` starting with that step.
    The source itself is never modified.
    """

    def __init__(self, bytecode: Bytecode | None = None) -> None:
        self.bytecode = bytecode if bytecode is not None else Bytecode()

    def __getattr__(self, attribute: str) -> Callable[..., Any]:
        if _is_private(attribute):
            raise AttributeError(attribute)
        name = step_name(attribute)

        if name.startswith("with"):
            def add_source(*args: Any) -> GraphTraversalSource:
                bytecode = Bytecode.from_bytecode(self.bytecode)
                return GraphTraversalSource(bytecode.add_source(name, *args))

            return add_source

        def spawn(*args: Any) -> GraphTraversal:
            bytecode = Bytecode.from_bytecode(self.bytecode)
            return GraphTraversal(bytecode.add_step(name, *args))

        return spawn
