"""Shape validation of raw command-line tokens."""
from typing import Optional, Sequence

from arithmetic_calc.common.logger import logger
from arithmetic_calc.common.operators import parse_int


USAGE: str = "Usage: calc [number][operator][number]"


class InputValidator:
    """
    Reject structurally invalid token lists before evaluation.

    Only the shape is checked here: a single integer, or an odd number of
    tokens (operand, (operator, operand)*) of at least three. Operator and
    operand content is left to the calculator.
    """

    @staticmethod
    def _is_signed_integer(token: str) -> bool:
        if parse_int(token) is not None:
            return True
        # Sign character immediately followed by digits
        return token[:1] in ("+", "-") and token[1:].isdigit() and parse_int(token[1:]) is not None

    @staticmethod
    def diagnose(tokens: Sequence[str]) -> Optional[str]:
        """
        Return the diagnostic for a rejected token list.

        :param Sequence[str] tokens: Raw tokens

        :return: Diagnostic message, or None if the tokens are well-formed
        :rtype: Optional[str]
        """
        if len(tokens) == 1:
            token = tokens[0]
            if InputValidator._is_signed_integer(token):
                return None
            return f"Invalid input: {token}"
        if len(tokens) < 3 or len(tokens) % 2 == 0:
            return USAGE
        return None

    @staticmethod
    def validate(tokens: Sequence[str]) -> bool:
        """
        Check the token list shape, printing a diagnostic on rejection.

        :param Sequence[str] tokens: Raw tokens

        :return: True if the tokens may be evaluated, else False
        :rtype: bool
        """
        message = InputValidator.diagnose(tokens)
        if message is None:
            return True
        logger.info(f"Rejected {len(tokens)} token(s): {message}")
        print(message)
        return False
