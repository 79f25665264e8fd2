"""Test class CalculatorSession."""
from arithmetic_calc.common.errors import ErrorKind
from arithmetic_calc.engine.calculator import Calculator
from arithmetic_calc.engine.session import CalculatorSession


def test_new_session_has_no_result() -> None:
    """A fresh session has no history and no last result."""
    session = CalculatorSession()
    assert session.history == []
    assert session.last_result is None


def test_session_records_history() -> None:
    """Each run is appended to the history in order."""
    session = CalculatorSession()
    session.run(["1", "+", "1"])
    session.run(["5", "/", "0"])
    assert [outcome.ok for outcome in session.history] == [True, False]
    assert session.history[1].error.kind is ErrorKind.DIVISION_BY_ZERO


def test_last_result_skips_failures() -> None:
    """last_result is the value of the latest successful run."""
    session = CalculatorSession()
    session.run(["2", "x", "21"])
    session.run(["3", "&", "2"])
    assert session.last_result == 42


def test_sessions_do_not_share_state() -> None:
    """Two sessions over the same calculator keep separate histories."""
    calculator = Calculator()
    first = CalculatorSession(calculator=calculator)
    second = CalculatorSession(calculator=calculator)
    first.run(["1", "+", "2"])
    assert second.history == []


def test_clear() -> None:
    """clear empties the history."""
    session = CalculatorSession()
    session.run(["7"])
    session.clear()
    assert session.last_result is None
