"""Pydantic models for parsed expressions and their results."""
from decimal import Decimal
import math

from pydantic import BaseModel, ConfigDict, Field

from terminal_calculator.common.operators import Operator, symbol_of


def format_number(value: float) -> str:
    """
    Render a float for display.

    - Integral values have no fractional part: 7.0 -> "7", 1e20 -> "100000000000000000000"
    - Other values use the shortest round-trip digits in plain decimal: 0.1 -> "0.1", 1e-07 -> "0.0000001"
    - Special values: "inf", "-inf", "NaN"; negative zero is "-0"

    :param float value: Number to render

    :return: Display text
    :rtype: str
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    # repr() gives the shortest round-trip digits; normalize() drops trailing zeros
    return format(Decimal(repr(value)).normalize(), "f")


class Expression(BaseModel):
    """A validated ``left operator right`` triple, ready for evaluation."""

    # Expressions are plain values: immutable and compared field by field
    model_config = ConfigDict(frozen=True)

    left: float = Field(..., description="Left hand operand")
    right: float = Field(..., description="Right hand operand")
    operator: Operator = Field(..., description="Binary operation to apply")

    def to_text(self) -> str:
        """
        Render the expression in canonical form.

        :return: ``"{left} {symbol} {right}"``
        :rtype: str
        """
        return f"{format_number(self.left)} {symbol_of(self.operator)} {format_number(self.right)}"

    def __str__(self) -> str:
        return self.to_text()


class EvaluationResult(BaseModel):
    """An evaluated expression together with its numeric result."""

    model_config = ConfigDict(frozen=True)

    expression: Expression = Field(..., description="Evaluated expression")
    result: float = Field(..., description="Numeric result of the expression")

    def to_text(self) -> str:
        """Render as ``"{expression} = {result}"``."""
        return f"{self.expression.to_text()} = {format_number(self.result)}"

    def __str__(self) -> str:
        return self.to_text()
