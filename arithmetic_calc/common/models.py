"""Pydantic models for evaluation results."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from arithmetic_calc.common.errors import CalculatorError, ErrorKind


class CalculationFailure(BaseModel):
    """Classified failure of an evaluation."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind = Field(..., description="Failure classification")
    message: str = Field(..., description="Human-readable description of the failure")
    token: Optional[str] = Field(default=None, description="Offending token, when known")

    @classmethod
    def from_error(cls, exc: CalculatorError) -> "CalculationFailure":
        return cls(kind=exc.kind, message=exc.message, token=exc.token)


class CalculationResult(BaseModel):
    """Outcome of evaluating one token sequence: either a value or a failure."""

    model_config = ConfigDict(frozen=True)

    tokens: List[str] = Field(..., description="Evaluated token sequence")
    result: Optional[int] = Field(default=None, description="Integer result on success")
    error: Optional[CalculationFailure] = Field(default=None, description="Failure on error")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "CalculationResult":
        """Ensure that exactly one of result and error is set."""
        if (self.result is None) == (self.error is None):
            raise ValueError("Exactly one of result or error must be set")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
