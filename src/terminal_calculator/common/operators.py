"""Arithmetic operators supported by the calculator and their symbols."""
from enum import Enum
from typing import Tuple

from terminal_calculator.common.errors import InvalidOperatorError


class Operator(str, Enum):
    """Closed set of binary operations; each value is the display symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"
    POWER = "^"

    def __str__(self) -> str:
        return self.value


# Symbols in declaration order, used for lookup and for user-facing messages
SUPPORTED_SYMBOLS: Tuple[str, ...] = tuple(op.value for op in Operator)


def parse_operator(token: str) -> Operator:
    """
    Resolve a single-character token to its Operator.

    :param str token: Operator token, expected to be exactly one character

    :return: Matching operator
    :rtype: Operator
    :raises InvalidOperatorError: If the token is not one of ``+ - * / ^``
    """
    if token not in SUPPORTED_SYMBOLS:
        raise InvalidOperatorError(
            f"Invalid operator {token!r}. Supported operators: {' '.join(SUPPORTED_SYMBOLS)}"
        )
    return Operator(token)


def symbol_of(operator: Operator) -> str:
    """Return the display symbol of an operator."""
    return operator.value
