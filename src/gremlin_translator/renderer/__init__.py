"""Bytecode-to-text renderer module."""

from gremlin_translator.renderer.dialect import quote_string, render_scalar
from gremlin_translator.renderer.render_context import RenderContext
from gremlin_translator.renderer.translator import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_SOURCE,
    Translator,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_SOURCE",
    "RenderContext",
    "Translator",
    "quote_string",
    "render_scalar",
]
