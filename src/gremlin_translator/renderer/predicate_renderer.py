"""Predicate rendering: ``op(value)`` or ``op([v1,v2,...])``."""

from __future__ import annotations

from gremlin_translator.common.exceptions import TranslationError
from gremlin_translator.process.predicates import P
from gremlin_translator.renderer.collection_renderer import ValueRenderFn
from gremlin_translator.renderer.dialect import (
    ARGUMENT_SEPARATOR,
    CALL_CLOSE,
    CALL_OPEN,
    ORDERED_CLOSE,
    ORDERED_OPEN,
)
from gremlin_translator.renderer.render_context import RenderContext


class PredicateRenderer:
    """Renders ``P``/``TextP`` values.

    A predicate without an operator or without operands is treated as
    absent: the empty string in lenient mode, a ``TranslationError`` in
    strict mode.
    """

    def __init__(self, render_value: ValueRenderFn) -> None:
        self._render_value = render_value

    def render(self, predicate: P, ctx: RenderContext) -> str:
        if not predicate.operator or not predicate.values:
            if ctx.lenient:
                return ""
            if not predicate.operator:
                raise TranslationError("predicate has no operator")
            raise TranslationError(
                f"predicate '{predicate.operator}' has no operands"
            )

        if len(predicate.values) == 1:
            operand = self._render_value(predicate.values[0], ctx)
            return f"{predicate.operator}{CALL_OPEN}{operand}{CALL_CLOSE}"

        return (
            f"{predicate.operator}{CALL_OPEN}{ORDERED_OPEN}"
            f"{self._render_operands(predicate, ctx)}"
            f"{ORDERED_CLOSE}{CALL_CLOSE}"
        )

    def _render_operands(self, predicate: P, ctx: RenderContext) -> str:
        # No separator follows an operand that rendered empty.
        last = len(predicate.values) - 1
        parts: list[str] = []
        for index, operand in enumerate(predicate.values):
            rendered = self._render_value(operand, ctx)
            parts.append(rendered)
            if index < last and rendered != "":
                parts.append(ARGUMENT_SEPARATOR)
        return "".join(parts)
