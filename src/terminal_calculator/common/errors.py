"""Exceptions raised while parsing and evaluating calculator expressions."""


class CalculatorError(ValueError):
    """Base class for every recoverable, per-line calculator failure."""


class ExpressionParseError(CalculatorError):
    """Raised when a raw input line cannot be turned into an Expression."""


class InvalidLeftOperandError(ExpressionParseError):
    """Left hand token is absent or not a valid float literal."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse left hand side: {detail}")


class MissingOperatorError(ExpressionParseError):
    """No operator character follows the left operand."""

    def __init__(self) -> None:
        super().__init__("Failed to parse operation: Missing operator")


class InvalidOperatorError(ExpressionParseError):
    """Operator token is not one of the supported symbols."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse operation: {detail}")


class InvalidRightOperandError(ExpressionParseError):
    """Right hand token is absent or not a valid float literal."""

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"Failed to parse right hand side: {detail}")


class EvaluationError(CalculatorError):
    """Raised when a valid Expression cannot be computed."""


class DivideByZeroError(EvaluationError):
    """Right operand of a division is zero."""

    def __init__(self) -> None:
        super().__init__("Divide by zero error")
