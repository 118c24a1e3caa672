from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    INVALID_ARGUMENT = "invalid_argument"
    DIVISION_BY_ZERO = "division_by_zero"


class AuraError(Exception):
    """Base error carrying a named kind and a human-readable message."""

    kind: ErrorKind

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.value!r}, {self.message!r})"


class InvalidArgumentError(AuraError, ValueError):
    """Wrong type or shape, empty statistics input, malformed weights."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.INVALID_ARGUMENT, message)


class DivisionByZeroError(AuraError, ZeroDivisionError):
    """Vector scaled by a zero divisor."""

    def __init__(self, message: str) -> None:
        super().__init__(ErrorKind.DIVISION_BY_ZERO, message)
