"""Configuration management for the calculator."""
import os
from dotenv import load_dotenv

load_dotenv()


def _get_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

TRACE_ENABLED = _get_bool("TRACE_ENABLED", "true")
SHOW_TRACE = _get_bool("SHOW_TRACE", "false")

PROMPT = os.getenv("PROMPT", "keys> ")
