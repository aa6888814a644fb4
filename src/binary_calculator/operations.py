"""Arithmetic and bitwise operations on binary strings."""

import math

from binary_calculator.exceptions import (
    DivisionByZeroError,
    NegativeOperandError,
    ResultOverflowError,
)
from binary_calculator.validators import (
    MAX_BITS,
    MAX_VALUE,
    validate_binary_string,
    validate_integral,
    validate_number,
    validate_shift_amount,
)

# Binary exponent at which a float overflows
FLOAT_MAX_EXPONENT = 1024


def decode(binary: str) -> int:
    """
    Convert a binary string to its integer value.

    Examples:
        >>> decode("1010")
        10
        >>> decode("0b1111")
        15

    Raises:
        InvalidFormatError: If binary is empty or contains anything but 0 and 1
    """
    return int(validate_binary_string(binary), 2)


def encode(number: float) -> str:
    """
    Convert an integer to a binary string.

    Negative values are rendered as their 32-bit two's complement bit
    pattern, read as an unsigned magnitude.

    Examples:
        >>> encode(10)
        '1010'
        >>> encode(-1)
        '11111111111111111111111111111111'

    Raises:
        InvalidNumberError: If number is not finite or not integral
    """
    value = validate_integral(number)

    if value < 0:
        value &= MAX_VALUE

    return format(value, "b")


def _operands(a: str, b: str) -> tuple[int, int]:
    return decode(a), decode(b)


def add(a: str, b: str) -> str:
    """
    Add two binary numbers.

    Properties:
        - Commutative: add(a, b) == add(b, a)
        - Identity: add(a, "0") == a
    """
    x, y = _operands(a, b)
    return encode(x + y)


def subtract(a: str, b: str) -> str:
    """
    Subtract b from a.

    A negative difference wraps to its 32-bit two's complement pattern.

    Properties:
        - Identity: subtract(a, "0") == a
        - Self-inverse: subtract(a, a) == "0"
    """
    x, y = _operands(a, b)
    return encode(x - y)


def multiply(a: str, b: str) -> str:
    """
    Multiply two binary numbers.

    Properties:
        - Commutative: multiply(a, b) == multiply(b, a)
        - Zero: multiply(a, "0") == "0"
    """
    x, y = _operands(a, b)
    return encode(x * y)


def divide(a: str, b: str) -> str:
    """
    Integer-divide a by b, discarding the remainder.

    Raises:
        InvalidFormatError: If either operand is malformed
        DivisionByZeroError: If b is zero
    """
    x, y = _operands(a, b)

    if y == 0:
        raise DivisionByZeroError(a)

    return encode(x // y)


def bitwise_and(a: str, b: str) -> str:
    """Bitwise AND of two binary numbers."""
    x, y = _operands(a, b)
    return encode(x & y)


def bitwise_or(a: str, b: str) -> str:
    """Bitwise OR of two binary numbers."""
    x, y = _operands(a, b)
    return encode(x | y)


def bitwise_xor(a: str, b: str) -> str:
    """Bitwise XOR of two binary numbers."""
    x, y = _operands(a, b)
    return encode(x ^ y)


def bitwise_not(a: str) -> str:
    """
    Bitwise complement of a 32-bit word.

    Examples:
        >>> bitwise_not("0")
        '11111111111111111111111111111111'
        >>> bitwise_not("11111111111111111111111111111110")
        '1'
    """
    return encode(~decode(a) & MAX_VALUE)


def shift_left(a: str, shift: int) -> str:
    """
    Shift a left by ``shift`` bits within a 32-bit word.

    Bits moved past bit 31 are discarded.

    Raises:
        InvalidShiftAmountError: If shift is negative or not an integer
    """
    amount = validate_shift_amount(shift)
    value = decode(a)

    if amount >= MAX_BITS:
        return "0"

    return encode((value << amount) & MAX_VALUE)


def shift_right(a: str, shift: int) -> str:
    """
    Logical right shift of a by ``shift`` bits.

    Raises:
        InvalidShiftAmountError: If shift is negative or not an integer
    """
    amount = validate_shift_amount(shift)
    value = decode(a) & MAX_VALUE

    return encode(value >> amount)


def power(a: str, exponent: float) -> str:
    """
    Raise a to ``exponent``, rounding the result down.

    Non-negative integral exponents are computed exactly. Fractional and
    negative exponents go through floating point: ``power("100", 0.5)``
    is ``"10"``.

    Raises:
        InvalidNumberError: If exponent is not finite
        ResultOverflowError: If the result is not finite, including zero
            raised to a negative power
    """
    validate_number(exponent)
    base = decode(a)

    if base == 0 and exponent < 0:
        raise ResultOverflowError("exponentiation", a, exponent)

    if exponent >= 0 and (isinstance(exponent, int) or exponent.is_integer()):
        # results past the float range count as non-finite
        if base > 1 and exponent > FLOAT_MAX_EXPONENT:
            raise ResultOverflowError("exponentiation", a, exponent)
        result = base ** int(exponent)
        if result.bit_length() > FLOAT_MAX_EXPONENT:
            raise ResultOverflowError("exponentiation", a, exponent)
        return encode(result)

    try:
        result = math.pow(base, exponent)
    except OverflowError as e:
        raise ResultOverflowError("exponentiation", a, exponent) from e

    if math.isinf(result):
        raise ResultOverflowError("exponentiation", a, exponent)

    return encode(math.floor(result))


def square_root(a: str) -> str:
    """
    Integer square root of a.

    Properties:
        - result**2 <= decode(a) < (result + 1)**2

    Raises:
        NegativeOperandError: If the decoded value is negative
    """
    value = decode(a)

    # decode never yields a negative value
    if value < 0:
        raise NegativeOperandError("square root", value)

    return encode(math.isqrt(value))
