"""Error taxonomy of the expression evaluation engine."""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Classified failure of an evaluation."""

    DIVISION_BY_ZERO = "division_by_zero"
    OVERFLOW = "overflow"
    INVALID_INPUT = "invalid_input"
    UNKNOWN_OPERATOR = "unknown_operator"


class CalculatorError(ValueError):
    """
    Raised when an expression cannot be evaluated.

    The first failure aborts the evaluation: no partial result is produced.

    :param ErrorKind kind: Failure classification
    :param str message: Human-readable description
    :param str token: Offending token, when one is known
    """

    def __init__(self, kind: ErrorKind, message: str, token: Optional[str] = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.token = token

    @classmethod
    def division_by_zero(cls) -> "CalculatorError":
        return cls(ErrorKind.DIVISION_BY_ZERO, "Division by zero")

    @classmethod
    def overflow(cls, detail: str) -> "CalculatorError":
        return cls(ErrorKind.OVERFLOW, f"Integer overflow: {detail}")

    @classmethod
    def invalid_input(cls, message: str) -> "CalculatorError":
        return cls(ErrorKind.INVALID_INPUT, message)

    @classmethod
    def unknown_operator(cls, token: str) -> "CalculatorError":
        return cls(ErrorKind.UNKNOWN_OPERATOR, f"Unknown operator: {token}", token=token)
