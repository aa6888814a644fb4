"""Input validation functions with strict type checking."""

import math
import re
from typing import TypeVar

from binary_calculator.exceptions import (
    BitOverflowError,
    InvalidFormatError,
    InvalidInputError,
    InvalidNumberError,
    InvalidShiftAmountError,
)

T = TypeVar("T", int, float)

# 32-bit unsigned limits
MAX_BITS = 32
MAX_VALUE = 2**MAX_BITS - 1

BINARY_PATTERN = re.compile(r"^(?:0[bB])?([01]+)$")
DIGITS = frozenset("01")
OPERATORS = ("+", "-", "*", "/")


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidNumberError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidNumberError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidNumberError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidNumberError(value, "Infinity is not allowed")

    return value


def validate_integral(value: float) -> int:
    """Validate a finite number with no fractional part and return it as int."""
    validate_number(value)

    if isinstance(value, float) and not value.is_integer():
        raise InvalidNumberError(value, "Value must be an integer")

    return int(value)


def validate_binary_string(value: str) -> str:
    """
    Validate a binary string and return its bare digits.

    Surrounding whitespace and an optional ``0b``/``0B`` prefix are
    accepted and stripped.

    Args:
        value: The binary string to validate

    Returns:
        The digits without prefix or whitespace

    Raises:
        InvalidFormatError: If value is not a string of 0 and 1 digits
    """
    if not isinstance(value, str):
        raise InvalidFormatError(value, f"Expected string, got {type(value).__name__}")

    match = BINARY_PATTERN.match(value.strip())
    if match is None:
        raise InvalidFormatError(value, "Binary strings may only contain 0 and 1")

    return match.group(1)


def validate_shift_amount(value: float) -> int:
    """
    Validate a shift amount.

    Raises:
        InvalidShiftAmountError: If value is not a non-negative integer
    """
    try:
        amount = validate_integral(value)
    except InvalidNumberError as e:
        raise InvalidShiftAmountError(value) from e

    if amount < 0:
        raise InvalidShiftAmountError(value)

    return amount


def validate_width(value: int, max_bits: int = MAX_BITS) -> int:
    """
    Validate that a non-negative integer fits in ``max_bits`` bits.

    Raises:
        BitOverflowError: If value is larger than 2**max_bits - 1
    """
    if value > 2**max_bits - 1:
        raise BitOverflowError(value, max_bits)

    return value


def validate_digit(digit: str) -> str:
    """Validate a single binary digit token."""
    if not isinstance(digit, str) or digit not in DIGITS:
        raise InvalidInputError(digit, "Only the digits 0 and 1 can be entered")

    return digit


def validate_operator(operator: str) -> str:
    """Validate an arithmetic operator token."""
    if not isinstance(operator, str) or operator not in OPERATORS:
        raise InvalidInputError(operator, "Unknown operator")

    return operator
