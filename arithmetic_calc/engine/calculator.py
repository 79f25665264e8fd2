"""Evaluate integer arithmetic expressions given as token sequences."""
from typing import List, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_calc.common.errors import CalculatorError
from arithmetic_calc.common.logger import logger
from arithmetic_calc.common.models import CalculationFailure, CalculationResult
from arithmetic_calc.common.operators import (
    INT_BITS,
    Operator,
    is_real_number,
    parse_int,
    precedence,
)


class Calculator(BaseModel):
    """
    Evaluate infix integer expressions with checked arithmetic.

    Every arithmetic step is range-checked against the configured integer
    width, and nothing is kept between calls.

    Algorithm:
        Two stacks, one of operands and one of pending operators. Before an
        operator is pushed, every pending operator of higher or equal
        precedence is reduced, so that ``2 + 3 * 4`` gives 14 and
        ``8 - 3 - 2`` gives 3. Remaining operators are reduced at the end.
    """

    model_config = ConfigDict(frozen=True)

    int_bits: int = Field(default=INT_BITS, ge=2, le=128, description="Width of the signed integer range")

    @staticmethod
    def has_precedence(first: Union[str, Operator], second: Union[str, Operator]) -> bool:
        """
        Return True if ``first`` binds at least as tightly as ``second``.

        :param first: Operator on top of the stack
        :param second: Incoming operator

        :return: True if ``first`` must be reduced before ``second`` is pushed
        :rtype: bool
        """
        return precedence(first) >= precedence(second)

    def apply_operator(self, op: Union[str, Operator], left: int, right: int) -> int:
        """
        Apply a binary operator as ``left op right`` with checked arithmetic.

        :param op: Operator symbol or member
        :param int left: Left-hand operand (pushed first)
        :param int right: Right-hand operand (pushed last)

        :return: Result of the operation
        :rtype: int
        :raises CalculatorError: DIVISION_BY_ZERO, OVERFLOW or UNKNOWN_OPERATOR
        """
        operator = op if isinstance(op, Operator) else Operator.from_token(op)
        if operator is None:
            raise CalculatorError.unknown_operator(op)
        result = operator.apply(left, right, self.int_bits)
        logger.debug(f"{left} {operator.value} {right} = {result}")
        return result

    def _reduce(self, operands: List[int], operator: Operator) -> None:
        if len(operands) < 2:
            raise CalculatorError.invalid_input(
                f"Insufficient operands for operation {operator.value}."
            )
        right: int = operands.pop()
        left: int = operands.pop()
        operands.append(self.apply_operator(operator, left, right))

    def calculate(self, tokens: Sequence[str]) -> int:
        """
        Evaluate a token sequence.

        :param Sequence[str] tokens: Operands and operators in infix order

        :return: Integer result
        :rtype: int
        :raises CalculatorError: On the first failure encountered
        """
        if len(tokens) == 1:
            value = parse_int(tokens[0], self.int_bits)
            if value is not None:
                return value

        operands: List[int] = []
        operators: List[Operator] = []

        for token in tokens:
            value = parse_int(token, self.int_bits)
            if value is not None:
                operands.append(value)
                continue

            operator = Operator.from_token(token)
            if operator is not None:
                # Reduce pending operators that bind at least as tightly
                while operators and self.has_precedence(operators[-1], operator):
                    self._reduce(operands, operators.pop())
                operators.append(operator)
            elif is_real_number(token):
                raise CalculatorError.invalid_input(f"Invalid input: {token}")
            else:
                raise CalculatorError.unknown_operator(token)

        while operators:
            self._reduce(operands, operators.pop())

        if len(operands) > 1:
            raise CalculatorError.invalid_input(
                f"Too many operands: {len(operands)} values left after evaluation."
            )
        return operands[0] if operands else 0

    def evaluate(self, tokens: Sequence[str]) -> CalculationResult:
        """
        Evaluate a token sequence without raising for evaluation failures.

        :param Sequence[str] tokens: Operands and operators in infix order

        :return: Model carrying either the result or the classified failure
        :rtype: CalculationResult
        """
        try:
            return CalculationResult(tokens=list(tokens), result=self.calculate(tokens))
        except CalculatorError as exc:
            logger.info(f"Evaluation of {' '.join(tokens)!r} failed: {exc}")
            return CalculationResult(tokens=list(tokens), error=CalculationFailure.from_error(exc))
