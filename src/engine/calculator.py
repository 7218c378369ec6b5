"""The calculator engine: one session driven by key events."""
from typing import Optional, Union
from src.config import TRACE_ENABLED
from src.engine.state import (
    State, KeyEvent, Operator, build_initial_state,
    digit_key, operator_key, EQUALS, CLEAR, PLUS_MINUS, PERCENT, DECIMAL
)
from src.engine.registry import reduce
from src.observability.telemetry import log_transition


class Calculator:
    """Owns one Session State and applies key events to it.

    The two displays are read back through ``display_result()`` and
    ``display_expression()`` after each event.
    """

    def __init__(self, trace: Optional[bool] = None):
        self._state: State = build_initial_state()
        self.trace = TRACE_ENABLED if trace is None else trace

    @property
    def state(self) -> State:
        """A copy of the current session state."""
        return {**self._state}

    def press(self, event: KeyEvent) -> State:
        before = self._state
        self._state = reduce(before, event)

        if self.trace:
            log_transition(event, before, self._state)
        return self.state

    def digit(self, d: Union[str, int]) -> State:
        return self.press(digit_key(d))

    def operator(self, op: Union[str, Operator]) -> State:
        return self.press(operator_key(op))

    def equals(self) -> State:
        return self.press(EQUALS)

    def clear(self) -> State:
        return self.press(CLEAR)

    def plus_minus(self) -> State:
        return self.press(PLUS_MINUS)

    def percent(self) -> State:
        return self.press(PERCENT)

    def decimal(self) -> State:
        return self.press(DECIMAL)

    def display_result(self) -> str:
        return self._state["current_value"]

    def display_expression(self) -> str:
        return self._state["expression"]
