"""Test class InputValidator."""
import pytest

from arithmetic_calc.engine.validator import USAGE, InputValidator


@pytest.mark.parametrize("tokens", [
    ["5"],
    ["-5"],
    ["+7"],
    ["0"],
    ["1", "+", "2"],
    ["1", "+", "2", "*", "3"],
    ["3", "&", "2"],  # content is checked by the calculator
])
def test_validate_accepts(tokens, capsys) -> None:
    """Well-shaped token lists are accepted silently."""
    assert InputValidator.validate(tokens) is True
    assert capsys.readouterr().out == ""


@pytest.mark.parametrize("token", ["abc", "2.5", "+", "-", "+-5", "--5", "5a"])
def test_validate_rejects_single_non_integer(token: str, capsys) -> None:
    """A single token must be an optionally signed integer."""
    assert InputValidator.validate([token]) is False
    assert capsys.readouterr().out == f"Invalid input: {token}\n"


@pytest.mark.parametrize("tokens", [
    [],
    ["1", "+"],
    ["1", "+", "2", "-"],
    ["1", "+", "2", "-", "3", "*"],
])
def test_validate_rejects_bad_count(tokens, capsys) -> None:
    """Empty, two-token and even-length lists print the usage hint."""
    assert InputValidator.validate(tokens) is False
    assert capsys.readouterr().out == f"{USAGE}\n"


def test_diagnose_does_not_print(capsys) -> None:
    """diagnose returns the message without printing it."""
    assert InputValidator.diagnose(["1", "+"]) == USAGE
    assert InputValidator.diagnose(["1", "+", "2"]) is None
    assert capsys.readouterr().out == ""


def test_validate_does_not_mutate_input() -> None:
    """The token list is left untouched."""
    tokens = ["1", "+", "2", "-"]
    InputValidator.validate(tokens)
    assert tokens == ["1", "+", "2", "-"]
