"""GraphSON reader - Loads bytecode from JSON documents.

Two shapes are accepted. GraphSON 3 typed JSON::

    {"@type": "g:Bytecode",
     "@value": {"step": [["V"],
                         ["has", "code", {"@type": "g:P",
                                          "@value": {"predicate": "within",
                                                     "value": ["AUS", "DFW"]}}]]}}

and the same ``source``/``step`` layout in plain, untyped JSON::

    {"step": [["V", "3"], ["out", "route"], ["limit", 5]]}
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

from gremlin_translator.common.exceptions import BytecodeFormatError
from gremlin_translator.common.logging import ILoggable
from gremlin_translator.process.bytecode import Binding, Bytecode, Instruction
from gremlin_translator.process.predicates import P, TextP
from gremlin_translator.process.traversal import (
    Cardinality,
    Column,
    Direction,
    GremlinEnum,
    Operator,
    Order,
    Pop,
    Scope,
    T,
)

TYPE_KEY = "@type"
VALUE_KEY = "@value"

# Predicates whose list ``value`` is spread into separate operands.
MULTI_OPERAND_PREDICATES = frozenset(
    {"within", "without", "between", "inside", "outside", "and", "or"}
)

NUMERIC_TYPES: dict[str, Callable[[Any], Any]] = {
    "g:Int32": int,
    "g:Int64": int,
    "g:Float": float,
    "g:Double": float,
}

ENUM_TYPES: dict[str, type[GremlinEnum]] = {
    "g:T": T,
    "g:Order": Order,
    "g:Scope": Scope,
    "g:Column": Column,
    "g:Direction": Direction,
    "g:Cardinality": Cardinality,
    "g:Pop": Pop,
    "g:Operator": Operator,
}


class GraphSONReader:
    """Reads ``Bytecode`` from GraphSON 3 or plain JSON."""

    def __init__(self, logger: ILoggable | None = None) -> None:
        """
        Initialize the reader.

        Args:
            logger: Optional logger; unknown type tags are reported here.
        """
        self._logger = logger

    def read(self, document: str | dict[str, Any]) -> Bytecode:
        """
        Read a bytecode document.

        Args:
            document: JSON text, or an already-decoded JSON object.

        Returns:
            The decoded bytecode.

        Raises:
            BytecodeFormatError: If the document is not valid bytecode JSON.
        """
        if isinstance(document, str):
            try:
                document = json.loads(document)
            except json.JSONDecodeError as e:
                raise BytecodeFormatError(f"invalid JSON: {e}") from e

        if not isinstance(document, dict):
            raise BytecodeFormatError(
                f"expected a JSON object, got {type(document).__name__}"
            )
        bytecode = self._read_bytecode(document)
        if self._logger:
            self._logger.debug(
                "Read bytecode with %d source and %d step instructions",
                len(bytecode.source_instructions),
                len(bytecode.step_instructions),
            )
        return bytecode

    def _read_bytecode(self, data: dict[str, Any]) -> Bytecode:
        if TYPE_KEY in data:
            if data[TYPE_KEY] != "g:Bytecode":
                raise BytecodeFormatError(
                    f"expected g:Bytecode, got {data[TYPE_KEY]}"
                )
            data = data.get(VALUE_KEY, {})
            if not isinstance(data, dict):
                raise BytecodeFormatError("g:Bytecode @value must be an object")

        unknown = set(data) - {"source", "step"}
        if unknown:
            raise BytecodeFormatError(
                f"unexpected bytecode keys: {', '.join(sorted(unknown))}"
            )

        return Bytecode(
            source_instructions=self._read_instructions(data.get("source", [])),
            step_instructions=self._read_instructions(data.get("step", [])),
        )

    def _read_instructions(self, raw: Any) -> list[Instruction]:
        if not isinstance(raw, list):
            raise BytecodeFormatError("instructions must be a list")

        instructions = []
        for entry in raw:
            if not isinstance(entry, list) or not entry or not isinstance(entry[0], str):
                raise BytecodeFormatError(
                    f"instruction must be [name, args...], got {entry!r}"
                )
            arguments = tuple(self._read_value(arg) for arg in entry[1:])
            instructions.append(Instruction(entry[0], arguments))
        return instructions

    def _read_value(self, raw: Any) -> Any:
        """Decode one JSON value, resolving GraphSON type tags."""
        if isinstance(raw, list):
            return [self._read_value(item) for item in raw]
        if not isinstance(raw, dict):
            return raw
        if TYPE_KEY not in raw:
            return {key: self._read_value(value) for key, value in raw.items()}

        type_tag = raw[TYPE_KEY]
        value = raw.get(VALUE_KEY)

        if type_tag == "g:Bytecode":
            return self._read_bytecode(raw)
        elif type_tag in ("g:P", "g:TextP"):
            return self._read_predicate(type_tag, value)
        elif type_tag == "g:Binding":
            if not isinstance(value, dict) or "key" not in value:
                raise BytecodeFormatError("g:Binding requires a key")
            return Binding(value["key"], self._read_value(value.get("value")))
        elif type_tag == "g:List":
            return [self._read_value(item) for item in self._as_list(type_tag, value)]
        elif type_tag == "g:Set":
            # Kept as an ordered, de-duplicated list so output is stable.
            items = [self._read_value(item) for item in self._as_list(type_tag, value)]
            return list(self._hashable(type_tag, dict.fromkeys, items))
        elif type_tag == "g:Map":
            return self._read_map(value)
        elif type_tag in NUMERIC_TYPES:
            try:
                return NUMERIC_TYPES[type_tag](value)
            except (TypeError, ValueError) as e:
                raise BytecodeFormatError(f"invalid {type_tag} value {value!r}") from e
        elif type_tag in ENUM_TYPES:
            return self._read_enum(type_tag, value)
        else:
            if self._logger:
                self._logger.warning(
                    "Unknown GraphSON type %s, using its raw value", type_tag
                )
            return self._read_value(value)

    def _read_predicate(self, type_tag: str, value: Any) -> P:
        if not isinstance(value, dict) or "predicate" not in value:
            raise BytecodeFormatError(f"{type_tag} requires a predicate name")

        operator = value["predicate"]
        operand = self._read_value(value.get("value"))
        if operator in MULTI_OPERAND_PREDICATES and isinstance(operand, list):
            operands = tuple(operand)
        else:
            operands = (operand,)

        predicate_type = TextP if type_tag == "g:TextP" else P
        return predicate_type(operator, operands)

    def _read_map(self, value: Any) -> dict[Any, Any]:
        items = self._as_list("g:Map", value)
        if len(items) % 2:
            raise BytecodeFormatError("g:Map requires an even number of items")
        keys = [self._read_value(item) for item in items[0::2]]
        values = [self._read_value(item) for item in items[1::2]]
        return self._hashable("g:Map", dict, zip(keys, values))

    @staticmethod
    def _read_enum(type_tag: str, value: Any) -> GremlinEnum:
        enum_type = ENUM_TYPES[type_tag]
        for member in enum_type:
            if member._value_ == value:
                return member
        raise BytecodeFormatError(f"unknown {type_tag} value {value!r}")

    @staticmethod
    def _hashable(type_tag: str, factory: Callable[[Any], Any], items: Any) -> Any:
        try:
            return factory(items)
        except TypeError as e:
            raise BytecodeFormatError(f"{type_tag} contains an unhashable key: {e}") from e

    @staticmethod
    def _as_list(type_tag: str, value: Any) -> list[Any]:
        if not isinstance(value, list):
            raise BytecodeFormatError(f"{type_tag} @value must be a list")
        return value
