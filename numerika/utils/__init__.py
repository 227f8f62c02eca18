# numerika/utils/__init__.py
"""
General utilities for Numerika.

- logging: pluggable trace backends for pipeline diagnostics
"""

from .logging import (
    TraceLogger, ConsoleTraceLogger, LoggingTraceLogger, NullTraceLogger,
    LOGGER_TYPES, create_logger
)

__all__ = [
    'TraceLogger', 'ConsoleTraceLogger', 'LoggingTraceLogger', 'NullTraceLogger',
    'LOGGER_TYPES', 'create_logger',
]
