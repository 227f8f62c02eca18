# numerika/utils/logging/__init__.py
"""
Trace logging backends for Numerika.
"""

from .base import TraceLogger
from .console import ConsoleTraceLogger
from .std import LoggingTraceLogger, NullTraceLogger
from .factory import LOGGER_TYPES, create_logger

__all__ = [
    'TraceLogger',
    'ConsoleTraceLogger',
    'LoggingTraceLogger',
    'NullTraceLogger',
    'LOGGER_TYPES',
    'create_logger',
]
