"""State transitions of the calculator.

Every transition is a pure function ``(state, event) -> state``: it returns
a new State and never mutates its input. No transition raises; key
sequences that make no sense (Equals with nothing pending, a second
decimal point) leave the state unchanged.
"""
import logging
from src.engine.state import State, KeyEvent, build_initial_state
from src.tools.arithmetic import compute, format_number, parse_operand


def digit_node(state: State, event: KeyEvent) -> State:
    """Start a new number or append to the one being typed."""
    if state["fresh_input"] or state["current_value"] == "0":
        return {**state, "current_value": event.value, "fresh_input": False}
    return {**state, "current_value": state["current_value"] + event.value}


def decimal_node(state: State, event: KeyEvent) -> State:
    if "." in state["current_value"]:
        return {**state}
    return {**state, "current_value": state["current_value"] + "."}


def plus_minus_node(state: State, event: KeyEvent) -> State:
    """Toggle the sign. Zero has no negative form."""
    value = state["current_value"]
    if value.startswith("-"):
        value = value[1:]
    elif value != "0":
        value = "-" + value
    return {**state, "current_value": value}


def percent_node(state: State, event: KeyEvent) -> State:
    value = format_number(parse_operand(state["current_value"]) / 100)
    return {**state, "current_value": value}


def operator_node(state: State, event: KeyEvent) -> State:
    """Bind an operator, folding any operation already pending (left to right, no precedence)."""
    op = event.value
    pending = state["pending_operator"]
    if pending is not None and state["previous_value"] is not None:
        result = compute(pending, state["previous_value"], state["current_value"])
        logging.debug(
            f"Folded {state['previous_value']} {pending.value} {state['current_value']} = {result}")
        previous = result
    else:
        previous = state["current_value"]
    return {
        **state,
        "previous_value": previous,
        "pending_operator": op,
        "expression": f"{previous} {op.value}",
        "fresh_input": True,
    }


def equals_node(state: State, event: KeyEvent) -> State:
    pending = state["pending_operator"]
    previous = state["previous_value"]
    if pending is None or previous is None:
        logging.debug("Equals pressed with no pending operation, ignoring")
        return {**state}

    operand = state["current_value"]
    result = compute(pending, previous, operand)
    return {
        **state,
        "current_value": result,
        "previous_value": None,
        "pending_operator": None,
        "expression": f"{previous} {pending.value} {operand} =",
        "fresh_input": True,
    }


def clear_node(state: State, event: KeyEvent) -> State:
    """Reset to the initial session."""
    return build_initial_state()
