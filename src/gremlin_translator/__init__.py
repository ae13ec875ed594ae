"""Gremlin Translator - Render traversal bytecode as Gremlin query text."""

from gremlin_translator.common.exceptions import TranslationError
from gremlin_translator.process.bytecode import Binding, Bytecode, Instruction
from gremlin_translator.process.predicates import P, TextP
from gremlin_translator.process.traversal import GraphTraversalSource, __
from gremlin_translator.renderer.translator import Translator

__version__ = "0.1.0"
__all__ = [
    "Binding",
    "Bytecode",
    "GraphTraversalSource",
    "Instruction",
    "P",
    "TextP",
    "TranslationError",
    "Translator",
    "__",
    "__version__",
]
