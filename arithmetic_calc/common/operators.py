"""Operator table and checked integer arithmetic."""
from enum import Enum
import re
from typing import Callable, Optional, Tuple, Union

from arithmetic_calc.common.errors import CalculatorError


# Width of the host signed integer type
INT_BITS: int = 64

# Optional sign followed by ASCII digits only
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+", re.ASCII)

# Decimal or exponent notation, plus the inf and nan spellings
_REAL_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.ASCII | re.IGNORECASE,
)


def int_bounds(bits: int = INT_BITS) -> Tuple[int, int]:
    """
    Return the inclusive (min, max) range of a signed integer of the given width.

    :param int bits: Integer width in bits

    :return: Tuple of (min, max)
    :rtype: Tuple[int, int]
    """
    return -(1 << (bits - 1)), (1 << (bits - 1)) - 1


def _checked(value: int, bits: int, detail: str) -> int:
    low, high = int_bounds(bits)
    if not low <= value <= high:
        raise CalculatorError.overflow(detail)
    return value


def add(left: int, right: int, bits: int = INT_BITS) -> int:
    """Add two integers, failing with OVERFLOW instead of wrapping."""
    return _checked(left + right, bits, f"{left} + {right}")


def subtract(left: int, right: int, bits: int = INT_BITS) -> int:
    """Subtract two integers, failing with OVERFLOW instead of wrapping."""
    return _checked(left - right, bits, f"{left} - {right}")


def multiply(left: int, right: int, bits: int = INT_BITS) -> int:
    """Multiply two integers, failing with OVERFLOW instead of wrapping."""
    return _checked(left * right, bits, f"{left} * {right}")


def quotient(left: int, right: int, bits: int = INT_BITS) -> int:
    """
    Divide two integers, truncating toward zero.

    Python's ``//`` rounds toward negative infinity, so the magnitude is
    divided first and the sign applied afterwards.

    :param int left: Dividend
    :param int right: Divisor
    :param int bits: Integer width in bits

    :return: Truncated quotient
    :rtype: int
    :raises CalculatorError: DIVISION_BY_ZERO if right is 0, OVERFLOW for MIN / -1
    """
    if right == 0:
        raise CalculatorError.division_by_zero()
    result = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        result = -result
    return _checked(result, bits, f"{left} / {right}")


def remainder(left: int, right: int, bits: int = INT_BITS) -> int:
    """
    Remainder of truncating division: the sign follows the dividend.

    :param int left: Dividend
    :param int right: Divisor
    :param int bits: Integer width in bits

    :return: Remainder
    :rtype: int
    :raises CalculatorError: DIVISION_BY_ZERO if right is 0
    """
    if right == 0:
        raise CalculatorError.division_by_zero()
    result = abs(left) % abs(right)
    return -result if left < 0 else result


# Type alias for checked operator functions
OperatorFn = Callable[[int, int, int], int]


class Operator(str, Enum):
    """
    Fixed set of binary operators.

    Each member carries its precedence level and its checked arithmetic
    function. ``x`` is an alias for multiplication.
    """

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    TIMES = "x"
    DIVIDE = "/"
    REMAINDER = "%"

    @property
    def precedence(self) -> int:
        return _PRECEDENCE[self]

    @property
    def function(self) -> OperatorFn:
        return _FUNCTIONS[self]

    def apply(self, left: int, right: int, bits: int = INT_BITS) -> int:
        """Apply the operator as ``left op right``."""
        return self.function(left, right, bits)

    @classmethod
    def from_token(cls, token: str) -> Optional["Operator"]:
        """Return the operator for a token, or None if the token is not an operator."""
        try:
            return cls(token)
        except ValueError:
            return None


_PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 1,
    Operator.SUBTRACT: 1,
    Operator.MULTIPLY: 2,
    Operator.TIMES: 2,
    Operator.DIVIDE: 2,
    Operator.REMAINDER: 2,
}

_FUNCTIONS: dict[Operator, OperatorFn] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.TIMES: multiply,
    Operator.DIVIDE: quotient,
    Operator.REMAINDER: remainder,
}


def precedence(symbol: Union[str, Operator]) -> int:
    """
    Return the precedence level of an operator symbol.

    Unknown symbols get 0 so that they never hold back a reduction.

    :param symbol: Operator symbol or member

    :return: Precedence level
    :rtype: int
    """
    op = symbol if isinstance(symbol, Operator) else Operator.from_token(symbol)
    return op.precedence if op is not None else 0


def parse_int(token: str, bits: int = INT_BITS) -> Optional[int]:
    """
    Parse an optionally signed decimal integer literal.

    Only ASCII digits are accepted, and literals outside the signed range
    of the given width do not count as integers.

    :param str token: Token string
    :param int bits: Integer width in bits

    :return: Parsed value, or None if the token is not an in-range integer
    :rtype: Optional[int]
    """
    if not _INTEGER_PATTERN.fullmatch(token):
        return None
    value = int(token)
    low, high = int_bounds(bits)
    if not low <= value <= high:
        return None
    return value


def is_real_number(token: str) -> bool:
    """
    Tell whether a token is written as a number in decimal or exponent form.

    The calculator rejects such tokens as invalid input rather than as
    unknown operators when they are not in-range integers.
    Only ASCII literals count: no surrounding whitespace, no ``_`` separators.

    :param str token: Token string

    :return: True if token is written as a real number
    :rtype: bool
    """
    return _REAL_PATTERN.fullmatch(token) is not None
