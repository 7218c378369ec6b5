"""Centralized logging configuration."""
import logging


def configure_logging(level: str = "INFO"):
    """Configure logging with appropriate levels for different modules."""
    log_level = getattr(logging, level.upper())

    # Base configuration
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s [%(levelname)8s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        force=True  # Override any existing configuration
    )

    # LangGraph and its HTTP stack are chatty at INFO
    logging.getLogger("langgraph").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    # Keep our own logs at the requested level
    logging.getLogger("src.engine").setLevel(log_level)
    logging.getLogger("src.keypad").setLevel(log_level)
    logging.getLogger("src.observability").setLevel(log_level)
    # Set root logger to the desired level
    logging.getLogger().setLevel(log_level)
