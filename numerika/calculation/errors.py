"""Errors raised while evaluating an expression."""

from enum import Enum


class ErrorKind(Enum):
    """Canonical error kinds reported to the caller."""

    UNKNOWN = "Unknown"
    CANNOT_PARSE_NUMBER = "CannotParseNumber"
    INVALID_OPERATOR_POSITION = "InvalidOperatorPosition"
    OPERATOR_ALREADY_COMPUTED = "ThisOperatorShouldBeAlreadyComputed"


class ExpressionError(Exception):
    """Raised when an expression is invalid or cannot be evaluated."""

    kind = ErrorKind.UNKNOWN

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.kind.value}: {message}" if message else self.kind.value


class CannotParseNumberError(ExpressionError):
    """A numeric literal could not be parsed as a float."""

    kind = ErrorKind.CANNOT_PARSE_NUMBER

    def __init__(self, literal: str):
        super().__init__(f"cannot parse number from {literal!r}")
        self.literal = literal


class InvalidOperatorPositionError(ExpressionError):
    """An operator is missing the operand(s) it needs."""

    kind = ErrorKind.INVALID_OPERATOR_POSITION


class OperatorAlreadyComputedError(ExpressionError):
    """An operator survived past the stage that should have removed it."""

    kind = ErrorKind.OPERATOR_ALREADY_COMPUTED


class UnknownExpressionError(ExpressionError):
    """The reduced expression does not collapse to a single value."""

    kind = ErrorKind.UNKNOWN
