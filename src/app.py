"""CLI interface for the calculator."""
import sys
from src.engine.build_graph import build_graph, replay
from src.engine.calculator import Calculator
from src.config import LOG_LEVEL, SHOW_TRACE, PROMPT
from src.keypad.keys import KeypadError, parse_keys
from src.observability.telemetry import format_trace_summary, clear_trace
from src.observability.logging_config import configure_logging

# Configure logging
configure_logging(LOG_LEVEL)


def render(expression: str, result: str) -> str:
    """Draw the two displays, expression above result."""
    width = max(len(expression), len(result), 12)
    return f"{expression:>{width}}\n{result:>{width}}"


def run_keys(keys: str) -> int:
    """Replay one key sequence through the keypad graph and print the displays."""
    try:
        events = parse_keys(keys)
    except KeypadError as e:
        print(f"Error: {e}")
        return 1

    state = replay(events, graph=build_graph())
    print(render(state["expression"], state["current_value"]))
    return 0


def interactive():
    """Apply each typed line of keys to one running calculator."""
    calculator = Calculator()
    print(render(calculator.display_expression(), calculator.display_result()))
    while True:
        try:
            line = input(PROMPT)
        except EOFError:
            break
        if line.strip().lower() == "q":
            break
        try:
            events = parse_keys(line)
        except KeypadError as err:
            print("Error:", err)
            continue
        for event in events:
            calculator.press(event)
        print(render(calculator.display_expression(), calculator.display_result()))


def main():
    clear_trace()  # Clear trace for fresh run

    if len(sys.argv) < 2:
        interactive()
        exit_code = 0
    else:
        exit_code = run_keys(" ".join(sys.argv[1:]))

    if SHOW_TRACE:
        print(format_trace_summary())
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
