# numerika/utils/logging/factory.py
"""
Factory functions for creating trace logger instances.
"""

from .base import TraceLogger
from .console import ConsoleTraceLogger
from .std import LoggingTraceLogger, NullTraceLogger

LOGGER_TYPES = ("console", "logging", "null")


def create_logger(
    logger_type: str = "console",
    **kwargs
) -> TraceLogger:
    """
    Factory function to create trace logger instances.

    Args:
        logger_type: Type of logger ("console", "logging", "null")
        **kwargs: Logger-specific parameters

    Returns:
        TraceLogger instance

    Raises:
        ValueError: If logger_type is unknown

    Examples:
        # Console logger showing stage dumps
        logger = create_logger("console", verbosity=2)

        # Forward to stdlib logging
        logger = create_logger("logging", verbosity=5, logger_name="myapp.calc")
    """
    if logger_type == "console":
        return ConsoleTraceLogger(**kwargs)
    elif logger_type == "logging":
        return LoggingTraceLogger(**kwargs)
    elif logger_type == "null":
        return NullTraceLogger(**kwargs)
    else:
        raise ValueError(f"Unknown logger type: {logger_type}. Available: {list(LOGGER_TYPES)}")
