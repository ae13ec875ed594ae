"""Traversal data model: bytecode, predicates, bindings and the step builder."""

from gremlin_translator.process.bytecode import Binding, Bytecode, Instruction
from gremlin_translator.process.predicates import P, TextP
from gremlin_translator.process.traversal import (
    AnonymousTraversal,
    Cardinality,
    Column,
    Direction,
    GraphTraversal,
    GraphTraversalSource,
    Operator,
    Order,
    Pop,
    Scope,
    T,
    __,
)

__all__ = [
    "AnonymousTraversal",
    "Binding",
    "Bytecode",
    "Cardinality",
    "Column",
    "Direction",
    "GraphTraversal",
    "GraphTraversalSource",
    "Instruction",
    "Operator",
    "Order",
    "P",
    "Pop",
    "Scope",
    "T",
    "TextP",
    "__",
]
