"""Keypad adapter: turns typed keys and button names into engine events."""
import re
import logging
from typing import Dict, List, Union
from src.engine.state import (
    KeyEvent, KeypadError, Operator, DIGITS, digit_key, operator_key,
    EQUALS, CLEAR, PLUS_MINUS, PERCENT, DECIMAL
)

logger = logging.getLogger(__name__)


# Button grid as laid out on the keypad, row by row
KEYPAD_LAYOUT = [
    ["AC", "±", "%", "÷"],
    ["7", "8", "9", "×"],
    ["4", "5", "6", "-"],
    ["1", "2", "3", "+"],
    ["0", ".", "="],
]

# Symbol and keyboard aliases for the non-digit keys
KEY_ALIASES: Dict[str, KeyEvent] = {
    "+": operator_key(Operator.ADD),
    "-": operator_key(Operator.SUBTRACT),
    "−": operator_key(Operator.SUBTRACT),
    "×": operator_key(Operator.MULTIPLY),
    "*": operator_key(Operator.MULTIPLY),
    "x": operator_key(Operator.MULTIPLY),
    "÷": operator_key(Operator.DIVIDE),
    "/": operator_key(Operator.DIVIDE),
    "=": EQUALS,
    "c": CLEAR,
    "ac": CLEAR,
    "±": PLUS_MINUS,
    "+/-": PLUS_MINUS,
    "%": PERCENT,
    ".": DECIMAL,
}

# Button names and ids used by presentation layers
BUTTON_NAMES: Dict[str, KeyEvent] = {
    "add": operator_key(Operator.ADD),
    "subtract": operator_key(Operator.SUBTRACT),
    "multiply": operator_key(Operator.MULTIPLY),
    "divide": operator_key(Operator.DIVIDE),
    "equals": EQUALS,
    "clear": CLEAR,
    "plusminus": PLUS_MINUS,
    "plus-minus": PLUS_MINUS,
    "percent": PERCENT,
    "decimal": DECIMAL,
}

# Typed numbers such as "25" or "5.25", entered one key at a time
NUMBER_PATTERN = re.compile(r"^[0-9]*\.?[0-9]*$")


def resolve_key(token: str) -> KeyEvent:
    """
    Resolve a single key token to its event.

    Accepts a digit, a symbol alias, a button name (``add``, ``plusMinus``)
    or a button id (``btn-7``, ``btn-equals``).

    Raises:
        KeypadError: if the token names no key
    """
    name = token.strip().lower()
    if name.startswith("btn-"):
        name = name[len("btn-"):]
    if len(name) == 1 and name in DIGITS:
        return digit_key(name)
    if name in KEY_ALIASES:
        return KEY_ALIASES[name]
    if name in BUTTON_NAMES:
        return BUTTON_NAMES[name]
    logger.warning(f"Unknown key: {token!r}")
    raise KeypadError(f"Unknown key: {token!r}")


def parse_keys(text: str) -> List[KeyEvent]:
    """
    Parse a whitespace separated key sequence into events.

    Number tokens expand into one press per character:
        >>> [e.label for e in parse_keys("25 + 1.5 =")]
        ['2', '5', '+', '1', '.', '5', '=']
    """
    events: List[KeyEvent] = []
    for token in text.split():
        if NUMBER_PATTERN.match(token):
            events.extend(resolve_key(ch) for ch in token)
        else:
            events.append(resolve_key(token))
    logger.debug(f"Parsed {len(events)} keys from {text[:50]!r}")
    return events


def enter_number(calculator, number: Union[int, float, str]) -> str:
    """Type a number on the keypad, digit by digit. A leading '-' toggles the sign afterwards."""
    text = str(number)
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    if not text or not NUMBER_PATTERN.match(text):
        raise KeypadError(f"Not a number the keypad can type: {number!r}")
    for ch in text:
        calculator.press(resolve_key(ch))
    if negative:
        calculator.plus_minus()
    return calculator.display_result()


def calculate(calculator, a: Union[int, float, str], op: Union[str, Operator],
              b: Union[int, float, str]) -> str:
    """Enter ``a op b =`` and return the result display."""
    enter_number(calculator, a)
    event = resolve_key(op.value if isinstance(op, Operator) else op)
    if not isinstance(event.value, Operator):
        raise KeypadError(f"Not an operator key: {op!r}")
    calculator.press(event)
    enter_number(calculator, b)
    calculator.equals()
    return calculator.display_result()
