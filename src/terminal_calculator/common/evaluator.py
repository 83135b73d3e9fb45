"""Evaluate parsed expressions."""
import math
import operator
from typing import Callable, Dict

from terminal_calculator.common.errors import DivideByZeroError
from terminal_calculator.common.models import Expression
from terminal_calculator.common.operators import Operator

# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value % 2 == 1


def ieee_power(base: float, exponent: float) -> float:
    """
    Raise ``base`` to ``exponent`` with IEEE-754 results instead of exceptions.

    math.pow raises where C's pow() returns a special value:
        - negative base with a non-integer exponent gives nan
        - zero base with a negative exponent gives a signed infinity
        - overflow gives a signed infinity

    :param float base: Base
    :param float exponent: Exponent

    :return: base ** exponent
    :rtype: float
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            # pow(-0.0, -3) is -inf, pow(-0.0, -2) is +inf
            return math.copysign(math.inf, base) if _is_odd_integer(exponent) else math.inf
        return math.nan


OPERATIONS: Dict[Operator, OperatorFn] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
    Operator.POWER: ieee_power,
}


class ExpressionEvaluator:
    """Compute the numeric result of an Expression."""

    @staticmethod
    def evaluate(expr: Expression) -> float:
        """
        Evaluate an expression.

        :param Expression expr: Parsed expression

        :return: Computed result
        :rtype: float
        :raises DivideByZeroError: If the operator is DIVIDE and the right operand is zero
        """
        if expr.operator is Operator.DIVIDE and expr.right == 0.0:
            raise DivideByZeroError()
        return OPERATIONS[expr.operator](expr.left, expr.right)


def evaluate(expr: Expression) -> float:
    """Evaluate an expression; see ExpressionEvaluator.evaluate."""
    return ExpressionEvaluator.evaluate(expr)
