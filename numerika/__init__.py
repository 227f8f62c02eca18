"""
Numerika: staged arithmetic expression evaluator.

This module exposes the public API entry points for evaluation, the
token model, the error taxonomy, and the trace logging backends.
"""

# Export the pipeline stages, token model and errors
from .calculation import *  # noqa: F403,F401
from . import calculation

from .config import EvaluationConfig, TraceThresholds
from .utils.logging import (
    TraceLogger,
    ConsoleTraceLogger,
    LoggingTraceLogger,
    NullTraceLogger,
    create_logger,
)

__version__ = "0.1.0"

__all__ = (
    calculation.__all__
    + [
        "EvaluationConfig",
        "TraceThresholds",
        "TraceLogger",
        "ConsoleTraceLogger",
        "LoggingTraceLogger",
        "NullTraceLogger",
        "create_logger",
    ]
)
