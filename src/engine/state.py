from dataclasses import dataclass
from enum import Enum
from typing import TypedDict, Optional, Union


class Operator(str, Enum):
    """The four operator keys, valued by the symbol shown on the keypad."""
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "×"
    DIVIDE = "÷"


class EventKind(str, Enum):
    DIGIT = "digit"
    OPERATOR = "operator"
    EQUALS = "equals"
    CLEAR = "clear"
    PLUS_MINUS = "plus_minus"
    PERCENT = "percent"
    DECIMAL = "decimal"


DIGITS = "0123456789"


class KeypadError(ValueError):
    """Raised for input that does not name a key on the keypad."""


@dataclass(frozen=True)
class KeyEvent:
    """One keypad press. `value` carries the digit or the operator."""
    kind: EventKind
    value: Optional[Union[str, Operator]] = None

    def __post_init__(self):
        if self.kind is EventKind.DIGIT:
            if not (isinstance(self.value, str) and len(self.value) == 1 and self.value in DIGITS):
                raise KeypadError(f"Digit key must be one of 0-9, got {self.value!r}")
        elif self.kind is EventKind.OPERATOR:
            try:
                object.__setattr__(self, "value", Operator(self.value))
            except ValueError:
                raise KeypadError(f"Not an operator key: {self.value!r}") from None
        elif self.value is not None:
            raise KeypadError(f"{self.kind.value} key takes no value")

    @property
    def label(self) -> str:
        """Text printed on the key."""
        if self.value is not None:
            return str(self.value.value if isinstance(self.value, Operator) else self.value)
        return KEY_LABELS[self.kind]


KEY_LABELS = {
    EventKind.EQUALS: "=",
    EventKind.CLEAR: "AC",
    EventKind.PLUS_MINUS: "±",
    EventKind.PERCENT: "%",
    EventKind.DECIMAL: ".",
}


def digit_key(d: Union[str, int]) -> KeyEvent:
    return KeyEvent(EventKind.DIGIT, str(d))


def operator_key(op: Union[str, Operator]) -> KeyEvent:
    return KeyEvent(EventKind.OPERATOR, op)


EQUALS = KeyEvent(EventKind.EQUALS)
CLEAR = KeyEvent(EventKind.CLEAR)
PLUS_MINUS = KeyEvent(EventKind.PLUS_MINUS)
PERCENT = KeyEvent(EventKind.PERCENT)
DECIMAL = KeyEvent(EventKind.DECIMAL)


class State(TypedDict):
    current_value: str
    previous_value: Optional[str]
    pending_operator: Optional[Operator]
    expression: str
    fresh_input: bool


class GraphState(State):
    event: Optional[KeyEvent]


def build_initial_state() -> State:
    state = State(
        current_value="0",
        previous_value=None,
        pending_operator=None,
        expression="",
        fresh_input=True)
    return state


def session_state(state: dict) -> State:
    """Project any mapping carrying the session fields onto a plain State."""
    return State(
        current_value=state["current_value"],
        previous_value=state["previous_value"],
        pending_operator=state["pending_operator"],
        expression=state["expression"],
        fresh_input=state["fresh_input"])
