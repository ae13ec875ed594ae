"""Common exceptions for the Gremlin translator."""

from typing import Any


class TranslatorException(Exception):
    """Base exception for all translator errors."""

    def __init__(self, message: str, *args: Any) -> None:
        self.message = message
        super().__init__(message, *args)

    def __str__(self) -> str:
        return self.message


class TranslationError(TranslatorException):
    """Exception raised when bytecode cannot be rendered to query text.

    Raised by the innermost renderer that fails and propagated unchanged to
    the caller of ``Translator.translate``; no partial output is returned.
    """

    def __init__(self, message: str) -> None:
        super().__init__(f"Translation error: {message}")


class BytecodeFormatError(TranslatorException):
    """Exception for malformed JSON/GraphSON bytecode documents."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Bytecode format error: {message}")
