"""
Command-line entrypoint.

Usage::

    calc 2 + 3 x 4

Each process argument is one token. On success the integer result is
printed and the process exits with status 0; on any validation or
evaluation failure a one-line diagnostic is printed and the status is 1.
"""
import sys
from typing import List, Optional

from pydantic import BaseModel, Field, ValidationError

from arithmetic_calc.common.errors import CalculatorError, ErrorKind
from arithmetic_calc.common.logger import logger
from arithmetic_calc.engine.calculator import Calculator
from arithmetic_calc.engine.validator import InputValidator


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    tokens : List[str]
        Operands and operators, one per process argument.
    """

    tokens: List[str] = Field(default_factory=list)


def format_error(exc: Exception) -> str:
    """
    Build the user-facing message for a failed evaluation.

    :param Exception exc: Raised error

    :return: One-line diagnostic
    :rtype: str
    """
    if not isinstance(exc, CalculatorError):
        return "An unknown error occurred."
    if exc.kind is ErrorKind.DIVISION_BY_ZERO:
        return "Error: Cannot divide by zero."
    if exc.kind is ErrorKind.OVERFLOW:
        return "Error: Calculation overflowed."
    if exc.kind is ErrorKind.UNKNOWN_OPERATOR:
        return f"Error: Unknown operator {exc.token}."
    return f"Error: {exc.message}"


class AppRunner(BaseModel):
    """Validate tokens, evaluate them and report the outcome as an exit status."""

    calculator: Calculator = Field(default_factory=Calculator)

    def run(self, args: CliArgs) -> int:
        """
        Run one evaluation and print its outcome.

        :param CliArgs args: Validated CLI arguments

        :return: Process exit status
        :rtype: int
        """
        logger.info(f"🧮 Evaluating {args.tokens}")
        if not InputValidator.validate(args.tokens):
            return 1

        try:
            result = self.calculator.calculate(args.tokens)
        except CalculatorError as exc:
            logger.info(f"🧮❌ Evaluation failed ({exc.kind.value}): {exc.message}")
            print(format_error(exc))
            return 1

        print(result)
        return 0


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Collect and validate command-line arguments.

    Tokens such as ``-5`` or ``-`` are operands and operators, not options,
    so arguments are taken verbatim.

    :param argv: Arguments without the program name, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    raw = sys.argv[1:] if argv is None else argv
    try:
        return CliArgs(tokens=raw)
    except ValidationError as exc:
        print(f"Invalid arguments: {exc.error_count()} error(s)")
        raise SystemExit(1) from exc


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function executed by the ``calc`` console script.
    """
    cli_args = parse_args(argv)
    sys.exit(AppRunner().run(cli_args))


if __name__ == "__main__":
    main()
