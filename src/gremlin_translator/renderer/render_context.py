"""Render context — per-call options and nesting depth for the renderers.

A fresh ``RenderContext`` is created for every ``Translator.translate`` call,
so translations never share mutable state and one ``Translator`` can be used
from several threads at once.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

from gremlin_translator.common.exceptions import TranslationError


class RenderContext:
    """Options and depth counter shared by the sub-renderers of one pass."""

    def __init__(
        self,
        source: str,
        lenient: bool,
        escape_strings: bool,
        include_source_instructions: bool,
        max_depth: int | None,
    ) -> None:
        self.source = source
        self.lenient = lenient
        self.escape_strings = escape_strings
        self.include_source_instructions = include_source_instructions
        self.max_depth = max_depth
        self._depth = 0

    @property
    def depth(self) -> int:
        return self._depth

    @contextmanager
    def nested(self) -> Iterator[None]:
        """Enter one level of value nesting for the duration of the block."""
        self._depth += 1
        try:
            if self.max_depth is not None and self._depth > self.max_depth:
                raise TranslationError(
                    f"maximum nesting depth of {self.max_depth} exceeded"
                )
            yield
        finally:
            self._depth -= 1
