"""Error kinds and exceptions for the binary calculator."""

from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Closed set of failure tags; branch on these, never on message text."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_NUMBER = "INVALID_NUMBER"
    INVALID_SHIFT_AMOUNT = "INVALID_SHIFT_AMOUNT"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    NEGATIVE_OPERAND = "NEGATIVE_OPERAND"
    NEGATIVE_RESULT = "NEGATIVE_RESULT"
    OVERFLOW = "OVERFLOW"
    RESULT_OVERFLOW = "RESULT_OVERFLOW"
    INVALID_INPUT = "INVALID_INPUT"


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    kind: ErrorKind

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class InvalidFormatError(CalculatorError):
    """Raised when a binary string is malformed."""

    kind = ErrorKind.INVALID_FORMAT

    def __init__(self, value: Any, reason: str = "invalid binary string") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidNumberError(CalculatorError):
    """Raised when a numeric parameter is NaN, infinite or of the wrong type."""

    kind = ErrorKind.INVALID_NUMBER

    def __init__(self, value: Any, reason: str = "invalid number") -> None:
        super().__init__(reason, value)
        self.reason = reason


class InvalidShiftAmountError(CalculatorError):
    """Raised when a shift amount is negative or not an integer."""

    kind = ErrorKind.INVALID_SHIFT_AMOUNT

    def __init__(self, value: Any) -> None:
        super().__init__("Shift amount must be a non-negative integer", value)


class DivisionByZeroError(CalculatorError):
    """Raised when attempting to divide by zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self, numerator: str) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class NegativeOperandError(CalculatorError):
    """Raised when an operation is undefined for a negative operand."""

    kind = ErrorKind.NEGATIVE_OPERAND

    def __init__(self, operation: str, value: int) -> None:
        super().__init__(f"Negative operand for {operation}", value)
        self.operation = operation


class NegativeResultError(CalculatorError):
    """Raised when a calculation would produce a negative value."""

    kind = ErrorKind.NEGATIVE_RESULT

    def __init__(self, minuend: str, subtrahend: str) -> None:
        super().__init__("Negative results cannot be displayed", (minuend, subtrahend))
        self.minuend = minuend
        self.subtrahend = subtrahend


class BitOverflowError(CalculatorError):
    """Raised when a value does not fit in the 32-bit unsigned range."""

    kind = ErrorKind.OVERFLOW

    def __init__(self, value: Any, max_bits: int = 32) -> None:
        super().__init__(f"Value exceeds the {max_bits}-bit limit", value)
        self.max_bits = max_bits


class ResultOverflowError(CalculatorError):
    """Raised when a computation leaves the finite floating point range."""

    kind = ErrorKind.RESULT_OVERFLOW

    def __init__(self, operation: str, *operands: Any) -> None:
        super().__init__(f"Result of {operation} is not finite", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when a digit or operator token is not accepted."""

    kind = ErrorKind.INVALID_INPUT

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason
