"""Gremlin-Groovy surface syntax constants.

Separators, brackets and literal spellings for the console dialect the
translator emits. These are pure data plus two tiny formatting helpers, so
the renderers never hard-code punctuation.
"""

from __future__ import annotations

from typing import Any

STEP_SEPARATOR = "."
ARGUMENT_SEPARATOR = ","
KEY_VALUE_SEPARATOR = ":"

CALL_OPEN = "("
CALL_CLOSE = ")"
ORDERED_OPEN = "["
ORDERED_CLOSE = "]"
KEYED_OPEN = "{"
KEYED_CLOSE = "}"

STRING_QUOTE = "'"
NULL_LITERAL = "null"

BOOLEAN_LITERALS: dict[bool, str] = {
    True: "true",
    False: "false",
}

# Applied in order, so the escape character itself is handled first.
STRING_ESCAPES: tuple[tuple[str, str], ...] = (
    ("\\", "\\\\"),
    ("'", "\\'"),
)


def quote_string(value: str, escape: bool = False) -> str:
    """Wrap *value* in single quotes.

    Without *escape* the value is interpolated verbatim, so an embedded quote
    yields text the console cannot parse.
    """
    if escape:
        for raw, escaped in STRING_ESCAPES:
            value = value.replace(raw, escaped)
    return f"{STRING_QUOTE}{value}{STRING_QUOTE}"


def render_scalar(value: Any) -> str:
    """Natural, unquoted spelling of a non-string scalar."""
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return BOOLEAN_LITERALS[value]
    return str(value)
