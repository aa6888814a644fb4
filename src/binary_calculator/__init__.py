"""
Binary calculator: arithmetic on binary-digit strings.

This package provides:
- Conversions between binary strings and integers
- Arithmetic, bitwise, power and square root operations on binary strings
- A stateful two-operand calculator with bounded history
"""

from binary_calculator.core import (
    BinaryCalculator,
    CalculatorSnapshot,
    HistoryEntry,
    Phase,
)
from binary_calculator.exceptions import (
    BitOverflowError,
    CalculatorError,
    DivisionByZeroError,
    ErrorKind,
    InvalidFormatError,
    InvalidInputError,
    InvalidNumberError,
    InvalidShiftAmountError,
    NegativeOperandError,
    NegativeResultError,
    ResultOverflowError,
)
from binary_calculator.operations import (
    add,
    bitwise_and,
    bitwise_not,
    bitwise_or,
    bitwise_xor,
    decode,
    divide,
    encode,
    multiply,
    power,
    shift_left,
    shift_right,
    square_root,
    subtract,
)
from binary_calculator.validators import MAX_BITS, MAX_VALUE

__all__ = [
    "MAX_BITS",
    "MAX_VALUE",
    "BinaryCalculator",
    "BitOverflowError",
    "CalculatorError",
    "CalculatorSnapshot",
    "DivisionByZeroError",
    "ErrorKind",
    "HistoryEntry",
    "InvalidFormatError",
    "InvalidInputError",
    "InvalidNumberError",
    "InvalidShiftAmountError",
    "NegativeOperandError",
    "NegativeResultError",
    "Phase",
    "ResultOverflowError",
    "add",
    "bitwise_and",
    "bitwise_not",
    "bitwise_or",
    "bitwise_xor",
    "decode",
    "divide",
    "encode",
    "multiply",
    "power",
    "shift_left",
    "shift_right",
    "square_root",
    "subtract",
]

__version__ = "0.1.0"
