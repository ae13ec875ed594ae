"""Keyed- and ordered-collection rendering.

``{k:v,k:v}`` for mappings and ``[a,b,c]`` for sequences. In lenient mode an
empty collection renders as the empty string rather than ``{}``/``[]``.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from typing import Any

from gremlin_translator.renderer.dialect import (
    ARGUMENT_SEPARATOR,
    KEY_VALUE_SEPARATOR,
    KEYED_CLOSE,
    KEYED_OPEN,
    ORDERED_CLOSE,
    ORDERED_OPEN,
)
from gremlin_translator.renderer.render_context import RenderContext

ValueRenderFn = Callable[[Any, RenderContext], str]


class CollectionRenderer:
    """Renders mappings and sequences, delegating each element back to the
    value renderer so nested traversals, predicates and collections work."""

    def __init__(self, render_value: ValueRenderFn) -> None:
        self._render_value = render_value

    def render_keyed(self, mapping: Mapping[Any, Any], ctx: RenderContext) -> str:
        """Render a mapping in its own iteration order."""
        if not mapping:
            return "" if ctx.lenient else KEYED_OPEN + KEYED_CLOSE

        entries = []
        for key, value in mapping.items():
            rendered_key = self._render_value(key, ctx)
            rendered_value = self._render_value(value, ctx)
            entries.append(f"{rendered_key}{KEY_VALUE_SEPARATOR}{rendered_value}")
        return KEYED_OPEN + ARGUMENT_SEPARATOR.join(entries) + KEYED_CLOSE

    def render_ordered(self, sequence: Collection[Any], ctx: RenderContext) -> str:
        if not sequence:
            return "" if ctx.lenient else ORDERED_OPEN + ORDERED_CLOSE

        items = [self._render_value(item, ctx) for item in sequence]
        return ORDERED_OPEN + ARGUMENT_SEPARATOR.join(items) + ORDERED_CLOSE
