"""Observability and telemetry for the calculator."""
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Any
from datetime import datetime
from enum import Enum
from src.engine.state import EventKind

logger = logging.getLogger(__name__)


class RecordType(str, Enum):
    """Types of trace records."""
    KEY_PRESS = "key_press"
    COMPUTATION = "computation"


@dataclass
class TraceRecord:
    """Base class for trace records."""
    timestamp: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Convert record to dictionary for serialization."""
        record_type = getattr(self, 'record_type', None)
        return {
            "timestamp": self.timestamp.isoformat(),
            "type": record_type.value if record_type else "unknown",
            **{k: v for k, v in self.__dict__.items() if k not in ("timestamp", "record_type")}
        }


@dataclass
class KeyPressRecord(TraceRecord):
    """Record for one key applied to a calculator, with the displays it left."""
    key: str
    result: str
    expression: str
    record_type: RecordType = field(default=RecordType.KEY_PRESS, init=False)


@dataclass
class ComputationRecord(TraceRecord):
    """Record for a folded binary operation."""
    operator: str
    left: str
    right: str
    result: str
    record_type: RecordType = field(default=RecordType.COMPUTATION, init=False)


# In-memory trace storage
_trace_log: List[TraceRecord] = []


def log_key_press(key: str, result: str, expression: str):
    """Log a key press and the displays after it."""
    record = KeyPressRecord(
        timestamp=datetime.now(),
        key=key,
        result=result,
        expression=expression
    )
    _trace_log.append(record)
    logger.debug(f"Key {key!r} -> result={result!r} expression={expression!r}")


def log_computation(operator: str, left: str, right: str, result: str):
    """Log a binary operation."""
    record = ComputationRecord(
        timestamp=datetime.now(),
        operator=operator,
        left=left,
        right=right,
        result=result
    )
    _trace_log.append(record)
    logger.info(f"Computed {left} {operator} {right} = {result}")


def get_trace() -> List[TraceRecord]:
    """Get the full trace log."""
    return _trace_log.copy()


def get_trace_dicts() -> List[Dict[str, Any]]:
    """Get trace log as list of dictionaries."""
    return [record.to_dict() for record in _trace_log]


def get_key_presses() -> List[KeyPressRecord]:
    return [r for r in _trace_log if isinstance(r, KeyPressRecord)]


def get_computations() -> List[ComputationRecord]:
    return [r for r in _trace_log if isinstance(r, ComputationRecord)]


def clear_trace():
    """Clear the trace log."""
    _trace_log.clear()


def format_trace_summary() -> str:
    """Format a human-readable trace summary."""
    if not _trace_log:
        return "No trace data"

    lines = ["\n=== Calculator Key Trace ==="]
    for record in _trace_log:
        timestamp = record.timestamp.strftime("%H:%M:%S")
        if isinstance(record, KeyPressRecord):
            lines.append(
                f"[{timestamp}] KEY {record.key:>2}: {record.expression!r} | {record.result}")
        elif isinstance(record, ComputationRecord):
            lines.append(
                f"[{timestamp}] CALC: {record.left} {record.operator} {record.right} = {record.result}")

    return "\n".join(lines)


def log_transition(event, before: Dict[str, Any], after: Dict[str, Any]):
    """Record one applied key event, plus the computation it folded, if any."""
    folded = (event.kind in (EventKind.OPERATOR, EventKind.EQUALS)
              and before["pending_operator"] is not None
              and before["previous_value"] is not None)
    if folded:
        result = after["previous_value"] if event.kind is EventKind.OPERATOR else after["current_value"]
        log_computation(before["pending_operator"].value,
                        before["previous_value"], before["current_value"], result)
    log_key_press(event.label, after["current_value"], after["expression"])
