"""Stateful two-operand calculator driven one key at a time."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from binary_calculator.exceptions import (
    CalculatorError,
    ErrorKind,
    InvalidNumberError,
    NegativeResultError,
)
from binary_calculator.operations import add, decode, divide, multiply, subtract
from binary_calculator.validators import (
    MAX_BITS,
    validate_digit,
    validate_operator,
    validate_width,
)

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

DEFAULT_VALUE = "0"
HISTORY_LIMIT = 100
DEFAULT_HISTORY_VIEW = 10

OPERATIONS: dict[str, Callable[[str, str], str]] = {
    "+": add,
    "-": subtract,
    "*": multiply,
    "/": divide,
}

CALCULATE_KEYS = frozenset({"=", "Enter"})
CLEAR_KEYS = frozenset({"Escape", "C", "c"})
BACKSPACE_KEYS = frozenset({"Backspace"})


class Phase(str, Enum):
    """Controller states."""

    INPUT = "INPUT"
    OPERATOR_PENDING = "OPERATOR_PENDING"
    RESULT = "RESULT"
    ERROR = "ERROR"


@dataclass(frozen=True)
class HistoryEntry:
    """One completed calculation."""

    left: str
    operator: str
    right: str
    result: str

    def __str__(self) -> str:
        return f"{self.left} {self.operator} {self.right} = {self.result}"


@dataclass(frozen=True)
class CalculatorSnapshot:
    """Immutable view of the calculator for rendering."""

    phase: Phase
    current_input: str
    previous_value: str | None
    operator: str | None
    decimal_value: int
    is_fresh_input: bool
    error_kind: ErrorKind | None = None
    error_message: str | None = None
    notice_kind: ErrorKind | None = None
    notice_message: str | None = None

    @property
    def has_error(self) -> bool:
        return self.phase is Phase.ERROR


class BinaryCalculator:
    """
    A two-operand binary calculator modelled as a finite-state machine.

    Digits and operators are fed one at a time. Choosing a second operator
    while an operation is pending runs that operation first, so
    ``1 + 1 + 1 =`` chains left to right.

    Failures never escape: they move the calculator into ``Phase.ERROR``
    and are reported through :meth:`get_state`. Any digit, :meth:`clear`,
    :meth:`reset` or :meth:`backspace` leaves the error state.

    Example:
        >>> calc = BinaryCalculator()
        >>> for key in ("1", "1", "+", "1", "0", "="):
        ...     state = calc.press(key)
        >>> state.current_input
        '101'
        >>> calc.get_history()
        ['11 + 10 = 101']
    """

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        """
        Initialize an empty calculator.

        Args:
            history_limit: Number of completed calculations to keep

        Raises:
            InvalidNumberError: If history_limit is not a positive integer
        """
        if isinstance(history_limit, bool) or not isinstance(history_limit, int):
            raise InvalidNumberError(history_limit, "History limit must be an integer")
        if history_limit <= 0:
            raise InvalidNumberError(history_limit, "History limit must be positive")

        self._history: deque[HistoryEntry] = deque(maxlen=history_limit)
        self.clear()

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def history(self) -> list[HistoryEntry]:
        """Completed calculations, oldest first."""
        return list(self._history)

    def get_state(self) -> CalculatorSnapshot:
        """Return an immutable snapshot of the current state."""
        error = self._error
        notice = self._notice
        return CalculatorSnapshot(
            phase=self._phase,
            current_input=self._current_input,
            previous_value=self._previous_value,
            operator=self._operator,
            decimal_value=decode(self._current_input),
            is_fresh_input=self._is_fresh_input,
            error_kind=error.kind if error else None,
            error_message=str(error) if error else None,
            notice_kind=notice.kind if notice else None,
            notice_message=str(notice) if notice else None,
        )

    def get_history(self, limit: int = DEFAULT_HISTORY_VIEW) -> list[str]:
        """Return up to ``limit`` history records, most recent first."""
        if limit <= 0:
            return []
        return [str(entry) for entry in reversed(self._history)][:limit]

    def input_digit(self, digit: str) -> CalculatorSnapshot:
        """
        Enter one binary digit.

        A digit that would push the input past 32 bits is dropped and
        reported as an ``OVERFLOW`` notice; the phase does not change.
        """
        if self._phase is Phase.ERROR:
            self.clear()
        self._notice = None

        try:
            validate_digit(digit)
        except CalculatorError as e:
            return self._fail(e)

        if self._is_fresh_input:
            self._current_input = ""
            self._is_fresh_input = False
        elif self._current_input == DEFAULT_VALUE:
            self._current_input = ""

        candidate = self._current_input + digit
        try:
            validate_width(decode(candidate), MAX_BITS)
        except CalculatorError as e:
            logger.info("Rejected digit %r: %s", digit, e)
            self._current_input = self._current_input or DEFAULT_VALUE
            self._notice = e
            return self.get_state()

        self._current_input = candidate
        self._phase = Phase.INPUT
        return self.get_state()

    def input_operator(self, operator: str) -> CalculatorSnapshot:
        """Select an arithmetic operator, running any pending operation first."""
        if self._phase is Phase.ERROR:
            return self.get_state()
        self._notice = None

        try:
            validate_operator(operator)
        except CalculatorError as e:
            return self._fail(e)

        if self._operator is not None and not self._is_fresh_input:
            if self.calculate().has_error:
                return self.get_state()

        self._previous_value = self._current_input
        self._operator = operator
        self._is_fresh_input = True
        self._phase = Phase.OPERATOR_PENDING
        logger.debug("Operator %s pending on %s", operator, self._previous_value)
        return self.get_state()

    def calculate(self) -> CalculatorSnapshot:
        """Run the pending operation and record it in the history."""
        if (
            self._phase is Phase.ERROR
            or self._operator is None
            or self._previous_value is None
        ):
            return self.get_state()
        self._notice = None

        left, operator, right = self._previous_value, self._operator, self._current_input
        try:
            result = self._evaluate(left, operator, right)
        except CalculatorError as e:
            return self._fail(e)

        entry = HistoryEntry(left=left, operator=operator, right=right, result=result)
        self._history.append(entry)
        logger.debug("Calculated %s", entry)

        self._current_input = result
        self._operator = None
        self._previous_value = None
        self._is_fresh_input = True
        self._phase = Phase.RESULT
        return self.get_state()

    def backspace(self) -> CalculatorSnapshot:
        """Delete the last entered digit."""
        if self._phase is Phase.ERROR:
            return self.clear()
        self._notice = None

        if self._is_fresh_input or self._current_input == DEFAULT_VALUE:
            return self.get_state()

        self._current_input = self._current_input[:-1] or DEFAULT_VALUE
        return self.get_state()

    def clear(self) -> CalculatorSnapshot:
        """Return to the initial state, keeping the history."""
        self._phase = Phase.INPUT
        self._current_input = DEFAULT_VALUE
        self._previous_value: str | None = None
        self._operator: str | None = None
        self._is_fresh_input = True
        self._error: CalculatorError | None = None
        self._notice: CalculatorError | None = None
        return self.get_state()

    def reset(self) -> CalculatorSnapshot:
        """Return to the initial state and forget the history."""
        self._history.clear()
        return self.clear()

    def press(self, key: str) -> CalculatorSnapshot:
        """
        Dispatch a key token.

        ``0``/``1`` enter digits, ``+ - * /`` select operators, ``=`` or
        ``Enter`` calculates, ``Escape`` or ``C`` clears and ``Backspace``
        deletes. Other keys are ignored.
        """
        if key in ("0", "1"):
            return self.input_digit(key)
        if key in OPERATIONS:
            return self.input_operator(key)
        if key in CALCULATE_KEYS:
            return self.calculate()
        if key in CLEAR_KEYS:
            return self.clear()
        if key in BACKSPACE_KEYS:
            return self.backspace()

        logger.debug("Ignoring key %r", key)
        return self.get_state()

    def _evaluate(self, left: str, operator: str, right: str) -> str:
        if operator == "-" and decode(left) < decode(right):
            raise NegativeResultError(left, right)

        result = OPERATIONS[operator](left, right)
        validate_width(decode(result), MAX_BITS)
        return result

    def _fail(self, error: CalculatorError) -> CalculatorSnapshot:
        logger.info("Calculator error (%s): %s", error.kind.value, error)
        self._error = error
        self._phase = Phase.ERROR
        return self.get_state()

    def __repr__(self) -> str:
        return (
            f"BinaryCalculator(phase={self._phase.value}, "
            f"current_input={self._current_input!r}, history_len={len(self._history)})"
        )
