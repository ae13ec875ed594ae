"""Translator - Converts traversal bytecode to Gremlin-Groovy query text."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from numbers import Number
from typing import Any

from gremlin_translator.common.exceptions import TranslationError
from gremlin_translator.process.bytecode import Binding, Bytecode, Instruction
from gremlin_translator.process.predicates import P
from gremlin_translator.process.traversal import GraphTraversal
from gremlin_translator.renderer.collection_renderer import CollectionRenderer
from gremlin_translator.renderer.dialect import (
    ARGUMENT_SEPARATOR,
    CALL_CLOSE,
    CALL_OPEN,
    STEP_SEPARATOR,
    quote_string,
    render_scalar,
)
from gremlin_translator.renderer.predicate_renderer import PredicateRenderer
from gremlin_translator.renderer.render_context import RenderContext

DEFAULT_SOURCE = "g"
DEFAULT_MAX_DEPTH = 100

ORDERED_TYPES = (list, tuple, set, frozenset)
# bool is a Number; None renders as null.
SCALAR_TYPES = (Number, Enum, type(None))


class Translator:
    """
    Renders bytecode as the dot-chained call syntax a Gremlin console runs.

    The top-level chain is prefixed with the source identifier
    (``g.V().out()``); traversals nested as arguments render unprefixed
    (``local(out().fold())``). Translation is pure: the bytecode is only
    read, and a failure anywhere aborts the whole call with a
    ``TranslationError``.
    """

    def __init__(
        self,
        source: str = DEFAULT_SOURCE,
        *,
        lenient: bool = True,
        escape_strings: bool = False,
        include_source_instructions: bool = False,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ) -> None:
        """
        Initialize the translator.

        Args:
            source: Identifier prefixed to the top-level chain.
            lenient: Render empty collections and degenerate predicates as
                the empty string instead of ``[]``/``{}``/an error.
            escape_strings: Backslash-escape ``\\`` and ``'`` inside string
                literals. Off by default, so embedded quotes pass through
                verbatim.
            include_source_instructions: Emit source instructions
                (``withSack(0)``...) ahead of the steps of the top-level chain.
            max_depth: Maximum nesting of argument values and sub-traversals,
                or ``None`` for no bound.
        """
        if not source:
            raise ValueError("source identifier must be a non-empty string")
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")

        self.source = source
        self.lenient = lenient
        self.escape_strings = escape_strings
        self.include_source_instructions = include_source_instructions
        self.max_depth = max_depth

        self._collections = CollectionRenderer(self.render_value)
        self._predicates = PredicateRenderer(self.render_value)

    def _create_context(self) -> RenderContext:
        return RenderContext(
            source=self.source,
            lenient=self.lenient,
            escape_strings=self.escape_strings,
            include_source_instructions=self.include_source_instructions,
            max_depth=self.max_depth,
        )

    def translate(self, traversal: Bytecode | GraphTraversal) -> str:
        """
        Translate a bytecode value, or a traversal carrying one, to query text.

        Raises:
            TranslationError: If the input is not translatable or a nested
                value fails to render.
        """
        if isinstance(traversal, Bytecode):
            bytecode = traversal
        elif isinstance(traversal, GraphTraversal):
            bytecode = self._bytecode_of(traversal)
        else:
            raise TranslationError(
                f"cannot translate {type(traversal).__name__}; "
                "expected Bytecode or a traversal"
            )
        return self.render_sequence(bytecode, True, self._create_context())

    # ------------------------------------------------------------------
    # Sequence and instruction emission
    # ------------------------------------------------------------------

    def render_sequence(
        self, bytecode: Bytecode, initial: bool, ctx: RenderContext
    ) -> str:
        """Render the instructions of *bytecode* joined by ``.``.

        Only the initial (top-level) chain carries the source prefix, and
        only it may include source instructions.
        """
        instructions = bytecode.step_instructions
        if initial and ctx.include_source_instructions:
            instructions = bytecode.source_instructions + instructions

        rendered = STEP_SEPARATOR.join(
            self.render_instruction(instruction, ctx)
            for instruction in instructions
        )
        if initial:
            return f"{ctx.source}{STEP_SEPARATOR}{rendered}"
        return rendered

    def render_instruction(self, instruction: Instruction, ctx: RenderContext) -> str:
        """Render ``operator(arg1,arg2,...)``."""
        arguments = ARGUMENT_SEPARATOR.join(
            self.render_value(argument, ctx) for argument in instruction.arguments
        )
        return f"{instruction.operator}{CALL_OPEN}{arguments}{CALL_CLOSE}"

    # ------------------------------------------------------------------
    # Value dispatch
    # ------------------------------------------------------------------

    def render_value(self, value: Any, ctx: RenderContext) -> str:
        """Render one argument value.

        Checked in order: keyed collection, ordered collection, binding,
        sub-traversal, predicate, string, then numbers, enum tokens and
        ``None``. Anything else raises ``TranslationError``.
        """
        with ctx.nested():
            if isinstance(value, Mapping):
                return self._collections.render_keyed(value, ctx)
            elif isinstance(value, ORDERED_TYPES):
                return self._collections.render_ordered(value, ctx)
            elif isinstance(value, Binding):
                return value.key
            elif isinstance(value, Bytecode):
                return self.render_sequence(value, False, ctx)
            elif isinstance(value, GraphTraversal):
                return self.render_sequence(self._bytecode_of(value), False, ctx)
            elif isinstance(value, Instruction):
                return self.render_instruction(value, ctx)
            elif isinstance(value, P):
                return self._predicates.render(value, ctx)
            elif isinstance(value, str):
                return quote_string(value, ctx.escape_strings)
            elif isinstance(value, SCALAR_TYPES):
                return render_scalar(value)
            else:
                raise TranslationError(f"cannot render {type(value).__name__}")

    @staticmethod
    def _bytecode_of(traversal: GraphTraversal) -> Bytecode:
        bytecode = getattr(traversal, "bytecode", None)
        if not isinstance(bytecode, Bytecode):
            raise TranslationError(
                f"{type(traversal).__name__} carries no bytecode"
            )
        return bytecode
