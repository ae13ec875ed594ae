"""Bytecode — the language-agnostic instruction form of a traversal."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Instruction:
    """One named operation plus its ordered arguments."""

    operator: str
    arguments: tuple[Any, ...] = ()

    def __str__(self) -> str:
        return f"{self.operator}{list(self.arguments)}"


@dataclass(frozen=True)
class Binding:
    """A named placeholder for a literal value.

    Rendered by its ``key`` only, so the server can cache the script and
    supply ``value`` as a parameter.
    """

    key: str
    value: Any = None

    def __str__(self) -> str:
        return self.key


@dataclass
class Bytecode:
    """
    Ordered source and step instructions of a traversal.

    Source instructions configure the traversal source (``withSack``,
    ``withSideEffect``...). Step instructions are the traversal steps in
    chain order. Only the builder layer appends; everything else reads.
    """

    source_instructions: list[Instruction] = field(default_factory=list)
    step_instructions: list[Instruction] = field(default_factory=list)

    @classmethod
    def from_bytecode(cls, other: Bytecode | None) -> Bytecode:
        """Return a copy of *other* that can be extended independently."""
        if other is None:
            return cls()
        return cls(
            source_instructions=list(other.source_instructions),
            step_instructions=list(other.step_instructions),
        )

    def add_source(self, operator: str, *arguments: Any) -> Bytecode:
        self.source_instructions.append(Instruction(operator, tuple(arguments)))
        return self

    def add_step(self, operator: str, *arguments: Any) -> Bytecode:
        self.step_instructions.append(Instruction(operator, tuple(arguments)))
        return self

    def __str__(self) -> str:
        parts = [str(i) for i in self.source_instructions]
        parts.extend(str(i) for i in self.step_instructions)
        return "[" + ", ".join(parts) + "]"
