"""Multi-step calculation session."""
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field

from arithmetic_calc.common.models import CalculationResult
from arithmetic_calc.engine.calculator import Calculator


class CalculatorSession(BaseModel):
    """
    Record successive evaluations and expose the last successful result.

    The calculator itself is stateless; a session is the explicit place
    where results accumulate across calls.
    """

    calculator: Calculator = Field(default_factory=Calculator, description="Stateless evaluator")
    history: List[CalculationResult] = Field(default_factory=list, description="Every evaluation, oldest first")

    def run(self, tokens: Sequence[str]) -> CalculationResult:
        """Evaluate tokens and append the outcome to the history."""
        outcome = self.calculator.evaluate(tokens)
        self.history.append(outcome)
        return outcome

    @property
    def last_result(self) -> Optional[int]:
        """Value of the most recent successful evaluation, if any."""
        for outcome in reversed(self.history):
            if outcome.ok:
                return outcome.result
        return None

    def clear(self) -> None:
        """Forget every recorded evaluation."""
        self.history.clear()
