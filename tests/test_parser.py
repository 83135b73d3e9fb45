"""Test class ExpressionParser."""
import pytest

from terminal_calculator.common.errors import (
    ExpressionParseError,
    InvalidLeftOperandError,
    InvalidOperatorError,
    InvalidRightOperandError,
    MissingOperatorError,
)
from terminal_calculator.common.models import Expression
from terminal_calculator.common.operators import Operator
from terminal_calculator.common.parser import ExpressionParser, parse_expression


@pytest.mark.parametrize("raw,expected", [
    ("3 + 4", "3+4"),
    ("  3\t+\n4  ", "3+4"),
    ("1 2 . 5 * 2", "12.5*2"),
    ("", ""),
])
def test_strip_whitespace(raw: str, expected: str) -> None:
    """strip_whitespace removes interior as well as surrounding whitespace."""
    assert ExpressionParser.strip_whitespace(raw) == expected


@pytest.mark.parametrize("text,expected", [
    ("3+4", ("3", 1)),
    ("12.5*2", ("12.5", 4)),
    ("-5+3", ("", 0)),
    ("5", ("5", None)),
    ("", ("", None)),
])
def test_split_left_operand(text: str, expected) -> None:
    """split_left_operand stops at the first character that is not a digit or '.'."""
    assert ExpressionParser.split_left_operand(text) == expected


@pytest.mark.parametrize("raw,left,operator,right", [
    ("3+4", 3.0, Operator.ADD, 4.0),
    ("10 - 2", 10.0, Operator.SUBTRACT, 2.0),
    ("3 * 5", 3.0, Operator.MULTIPLY, 5.0),
    ("8 / 2", 8.0, Operator.DIVIDE, 2.0),
    ("2^10", 2.0, Operator.POWER, 10.0),
    ("1.5 * .5", 1.5, Operator.MULTIPLY, 0.5),
    ("3--4", 3.0, Operator.SUBTRACT, -4.0),
    ("2*1e3", 2.0, Operator.MULTIPLY, 1000.0),
])
def test_parse_valid(raw: str, left: float, operator: Operator, right: float) -> None:
    """parse returns the expected Expression for well-formed lines."""
    assert ExpressionParser.parse(raw) == Expression(left=left, right=right, operator=operator)


def test_parse_is_whitespace_insensitive() -> None:
    """Whitespace anywhere in the line does not change the result."""
    assert parse_expression("3+4") == parse_expression(" 3 + 4 ")
    assert parse_expression("3+4") == parse_expression("3 +\t4\n")


def test_parse_expression_alias() -> None:
    """parse_expression is the same operation as ExpressionParser.parse."""
    assert parse_expression("2^10") == ExpressionParser.parse("2^10")


@pytest.mark.parametrize("raw", ["abc+4", "-5+3", "1.2.3+4", ".+4", "", "   "])
def test_parse_invalid_left_operand(raw: str) -> None:
    """An empty or malformed left token raises InvalidLeftOperandError."""
    with pytest.raises(InvalidLeftOperandError):
        ExpressionParser.parse(raw)


def test_leading_minus_is_not_unary() -> None:
    """'-5+3' reads '-' as the operator, leaving an empty left operand."""
    with pytest.raises(InvalidLeftOperandError) as exc_info:
        parse_expression("-5+3")
    assert "could not convert string to float" in exc_info.value.detail


@pytest.mark.parametrize("raw", ["5", "12.5", " 42 "])
def test_parse_missing_operator(raw: str) -> None:
    """A line made of a number only raises MissingOperatorError."""
    with pytest.raises(MissingOperatorError):
        ExpressionParser.parse(raw)


@pytest.mark.parametrize("raw", ["5%2", "3x4", "1e3+2", "4=4", "2(3)"])
def test_parse_invalid_operator(raw: str) -> None:
    """An unsupported operator character raises InvalidOperatorError."""
    with pytest.raises(InvalidOperatorError):
        ExpressionParser.parse(raw)


@pytest.mark.parametrize("raw", ["5+", "5+abc", "5+4+3", "5*2.2.2", "3 / "])
def test_parse_invalid_right_operand(raw: str) -> None:
    """An empty or malformed right token raises InvalidRightOperandError."""
    with pytest.raises(InvalidRightOperandError):
        ExpressionParser.parse(raw)


def test_parse_errors_share_base_class() -> None:
    """Every parse failure can be caught as ExpressionParseError and ValueError."""
    for raw in ["abc+4", "5", "5%2", "5+"]:
        with pytest.raises(ExpressionParseError):
            ExpressionParser.parse(raw)
        with pytest.raises(ValueError):
            ExpressionParser.parse(raw)


def test_error_messages() -> None:
    """Error messages say which part of the line was wrong."""
    with pytest.raises(InvalidLeftOperandError, match="^Failed to parse left hand side: "):
        parse_expression("abc+4")
    with pytest.raises(MissingOperatorError, match="^Failed to parse operation: Missing operator$"):
        parse_expression("5")
    with pytest.raises(InvalidOperatorError, match=r"Supported operators: \+ - \* / \^$"):
        parse_expression("5%2")
    with pytest.raises(InvalidRightOperandError, match="^Failed to parse right hand side: "):
        parse_expression("5+")


@pytest.mark.parametrize("raw", ["1+1_000", "3+٤", "2*١٢", "1_0+1"])
def test_parse_rejects_separators_and_non_ascii_digits(raw: str) -> None:
    """Digit separators and non-ASCII digits are not valid float literals."""
    with pytest.raises((InvalidLeftOperandError, InvalidOperatorError, InvalidRightOperandError)):
        ExpressionParser.parse(raw)


@pytest.mark.parametrize("token", ["1_000", "٤", "١٢"])
def test_parse_float_rejects_separators_and_non_ascii_digits(token: str) -> None:
    """parse_float only takes ASCII literals without separators."""
    with pytest.raises(ValueError, match="invalid float literal"):
        ExpressionParser.parse_float(token)


@pytest.mark.parametrize("token,expected", [("4", 4.0), ("-4", -4.0), (".5", 0.5), ("1e3", 1000.0)])
def test_parse_float_valid(token: str, expected: float) -> None:
    """parse_float accepts ordinary decimal literals."""
    assert ExpressionParser.parse_float(token) == expected


def test_right_operand_separator_is_rejected() -> None:
    """'1+1_000' fails on the right operand."""
    with pytest.raises(InvalidRightOperandError, match="invalid float literal"):
        parse_expression("1+1_000")
