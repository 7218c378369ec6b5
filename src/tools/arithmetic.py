# src/tools/arithmetic.py

import logging
import math
import operator
import re
from decimal import Decimal

from src.engine.state import Operator

# Binary operations behind the four operator keys
_OPERATIONS = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: operator.truediv,
}

# Longest numeric prefix, so "5." and "1e-7." still read as numbers
_NUMERIC_PREFIX = re.compile(
    r"\s*([+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))")


def parse_operand(text: str) -> float:
    """
    Read the leading number of a display string.

    Never raises: text without a numeric prefix reads as NaN.
        >>> parse_operand("5.")
        5.0
        >>> parse_operand("-12.5")
        -12.5
    """
    match = _NUMERIC_PREFIX.match(text)
    if not match:
        return math.nan
    return float(match.group(1))


def format_number(value: float) -> str:
    """
    Render a number as its shortest round-trip numeral.

    Integral values drop the fractional part, positional notation is used
    for magnitudes in [1e-6, 1e21) and exponent notation outside it.
        >>> format_number(16.0)
        '16'
        >>> format_number(0.5)
        '0.5'
        >>> format_number(1e21)
        '1e+21'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:  # also folds -0.0
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # position of the decimal point relative to digits

    if k <= n <= 21:
        body = digits + "0" * (n - k)
    elif 0 < n <= 21:
        body = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + digits
    else:
        e = n - 1
        mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
        body = f"{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
    return sign + body


def apply(op: Operator, a: float, b: float) -> float:
    """Apply a keypad operator. Division by zero yields 0."""
    if op is Operator.DIVIDE and b == 0:
        logging.info(f"Division by zero: {a} ÷ {b}, returning 0")
        return 0.0
    return float(_OPERATIONS[op](a, b))


def compute(op: Operator, left: str, right: str) -> str:
    """Apply `op` to two display strings and return the result as a numeral."""
    return format_number(apply(op, parse_operand(left), parse_operand(right)))
