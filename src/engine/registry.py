from src.engine.nodes import (
    digit_node, decimal_node, plus_minus_node, percent_node,
    operator_node, equals_node, clear_node
)
from src.engine.state import State, EventKind, KeyEvent

transitions = {
    EventKind.DIGIT: digit_node,
    EventKind.DECIMAL: decimal_node,
    EventKind.PLUS_MINUS: plus_minus_node,
    EventKind.PERCENT: percent_node,
    EventKind.OPERATOR: operator_node,
    EventKind.EQUALS: equals_node,
    EventKind.CLEAR: clear_node,
}


def load_transitions():
    """Return the event kind -> transition table."""
    return transitions


def reduce(state: State, event: KeyEvent) -> State:
    """Apply one key event and return the next state."""
    return transitions[event.kind](state, event)
