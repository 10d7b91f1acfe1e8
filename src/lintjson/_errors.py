"""Exception types raised by the JSON core."""

from typing import TypeAlias

Position: TypeAlias = int


class ParseError(ValueError):
    """
    Handles JSON parsing failures with precise position information.

    Carries the absolute character offset, the 1-based line and the 0-based
    column of the character that could not be consumed, or of the end of
    input when the text ended too early.
    """

    def __init__(
        self, message: str, offset: Position, line: int, column: int
    ) -> None:
        if not isinstance(message, str):
            raise TypeError("message must be a string")
        if not isinstance(offset, int) or offset < 0:
            raise ValueError("offset must be a non-negative integer")
        if not isinstance(line, int) or line < 1:
            raise ValueError("line must be a positive integer")

        self.message = message
        self.offset = offset
        self.line = line
        self.column = column

        super().__init__(f"{message} at {line}:{column}")

    def __reduce__(self) -> tuple[type, tuple[str, int, int, int]]:
        return (
            self.__class__,
            (self.message, self.offset, self.line, self.column),
        )


class TypeMismatchError(TypeError):
    """Raised when a typed accessor is called on a value of another kind."""


class ReadOnlyError(TypeError):
    """Raised when an unmodifiable container view is mutated."""


class NumberRangeError(ValueError):
    """
    Raised when a number's text cannot be represented as the requested type.

    Covers integers outside the target range, fractional or exponent-bearing
    text requested as an integer, and floating point overflow.
    """
