"""Parse a single line of user input into a binary arithmetic Expression."""
from typing import Optional, Tuple

from terminal_calculator.common.errors import (
    InvalidLeftOperandError,
    InvalidRightOperandError,
    MissingOperatorError,
)
from terminal_calculator.common.models import Expression
from terminal_calculator.common.operators import Operator, parse_operator

# Characters that may appear in the left operand token
LEFT_OPERAND_CHARS: frozenset = frozenset("0123456789.")


class ExpressionParser:
    """
    Parse ``lhs operator rhs`` lines without eval() or a general grammar.

    Algorithm:
        1. Drop every whitespace character, interior ones included
        2. Collect leading digits and '.' as the left operand
        3. The first other character is the operator
        4. Everything after the operator is the right operand

    A leading '-' is therefore read as the operator, not as a sign:
    "-5+3" has an empty left operand and is rejected.

    Examples:
        - "3 + 4"  -> Expression(left=3.0, right=4.0, operator=ADD)
        - "2^10"   -> Expression(left=2.0, right=10.0, operator=POWER)
        - "3--4"   -> Expression(left=3.0, right=-4.0, operator=SUBTRACT)
    """

    @staticmethod
    def strip_whitespace(raw: str) -> str:
        """
        Remove all whitespace characters from a line.

        :param str raw: Raw input line

        :return: Line without any whitespace
        :rtype: str
        """
        return "".join(raw.split())

    @staticmethod
    def split_left_operand(text: str) -> Tuple[str, Optional[int]]:
        """
        Split the left operand token off the front of a stripped line.

        :param str text: Whitespace-free input line

        :return: Tuple of (left token, operator position or None if every character was consumed)
        :rtype: Tuple[str, Optional[int]]
        """
        for position, character in enumerate(text):
            if character not in LEFT_OPERAND_CHARS:
                return text[:position], position
        return text, None

    @staticmethod
    def parse_float(token: str) -> float:
        """
        Parse a float literal.

        Python's float() also takes digit separators and non-ASCII digits;
        both are rejected here.

        :param str token: Operand token

        :return: Parsed value
        :rtype: float
        :raises ValueError: If the token is not a valid float literal
        """
        if "_" in token or not token.isascii():
            raise ValueError(f"invalid float literal: {token!r}")
        return float(token)

    @staticmethod
    def parse(raw: str) -> Expression:
        """
        Parse a raw input line into an Expression.

        :param str raw: Line as typed by the user

        :return: Validated expression
        :rtype: Expression
        :raises InvalidLeftOperandError: If the left token is empty or not a float
        :raises MissingOperatorError: If nothing follows the left operand
        :raises InvalidOperatorError: If the operator is not one of ``+ - * / ^``
        :raises InvalidRightOperandError: If the right token is empty or not a float
        """
        text: str = ExpressionParser.strip_whitespace(raw)
        left_token, operator_position = ExpressionParser.split_left_operand(text)

        try:
            left: float = ExpressionParser.parse_float(left_token)
        except ValueError as exc:
            raise InvalidLeftOperandError(str(exc)) from exc

        if operator_position is None:
            raise MissingOperatorError()

        operator: Operator = parse_operator(text[operator_position])

        try:
            right: float = ExpressionParser.parse_float(text[operator_position + 1:])
        except ValueError as exc:
            raise InvalidRightOperandError(str(exc)) from exc

        return Expression(left=left, right=right, operator=operator)


def parse_expression(raw: str) -> Expression:
    """Parse a raw input line; see ExpressionParser.parse."""
    return ExpressionParser.parse(raw)
