"""Tests for the key trace."""
import pytest
from src.engine.build_graph import replay
from src.engine.calculator import Calculator
from src.keypad.keys import parse_keys
from src.observability.telemetry import (
    ComputationRecord,
    KeyPressRecord,
    RecordType,
    clear_trace,
    format_trace_summary,
    get_computations,
    get_key_presses,
    get_trace,
    get_trace_dicts,
)


@pytest.fixture(autouse=True)
def fresh_trace():
    clear_trace()
    yield
    clear_trace()


def press_all(calc, keys):
    for event in parse_keys(keys):
        calc.press(event)


def test_key_presses_are_recorded():
    calc = Calculator(trace=True)
    press_all(calc, "2 5 +")

    presses = get_key_presses()
    assert [p.key for p in presses] == ["2", "5", "+"]
    assert presses[-1].result == "25"
    assert presses[-1].expression == "25 +"


def test_computations_are_recorded_for_folds_and_equals():
    calc = Calculator(trace=True)
    press_all(calc, "5 + 3 × 2 =")

    computations = get_computations()
    assert [(c.left, c.operator, c.right, c.result) for c in computations] == [
        ("5", "+", "3", "8"),
        ("8", "×", "2", "16"),
    ]


def test_ignored_equals_records_no_computation():
    calc = Calculator(trace=True)
    press_all(calc, "= =")
    assert get_computations() == []
    assert len(get_key_presses()) == 2


def test_trace_disabled():
    calc = Calculator(trace=False)
    press_all(calc, "1 + 1 =")
    assert get_trace() == []


def test_replay_records_trace():
    replay(parse_keys("1 + 1 ="), trace=True)
    assert len(get_key_presses()) == 4
    assert get_computations()[0].result == "2"


def test_trace_dicts():
    calc = Calculator(trace=True)
    press_all(calc, "9 ÷ 0 =")

    dicts = get_trace_dicts()
    types = [d["type"] for d in dicts]
    assert types.count(RecordType.KEY_PRESS.value) == 4
    assert types.count(RecordType.COMPUTATION.value) == 1
    computation = next(d for d in dicts if d["type"] == "computation")
    assert computation["result"] == "0"
    assert "timestamp" in computation


def test_record_types():
    calc = Calculator(trace=True)
    press_all(calc, "1 + 2 =")
    records = get_trace()
    assert any(isinstance(r, KeyPressRecord) for r in records)
    assert any(isinstance(r, ComputationRecord) for r in records)


def test_format_trace_summary():
    assert format_trace_summary() == "No trace data"
    calc = Calculator(trace=True)
    press_all(calc, "4 × 2 =")
    summary = format_trace_summary()
    assert "Calculator Key Trace" in summary
    assert "CALC: 4 × 2 = 8" in summary


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
