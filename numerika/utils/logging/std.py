# numerika/utils/logging/std.py
"""
Trace backends that do not print directly: stdlib logging and a no-op.
"""

import logging
from typing import Optional, Sequence

from numerika.config import TraceThresholds
from .base import TraceLogger, format_tokens


class LoggingTraceLogger(TraceLogger):
    """
    Forward trace records to a stdlib logger at DEBUG level.

    Useful when numerika is embedded in an application that already
    configures logging handlers. Verbosity gating matches
    ConsoleTraceLogger; the logger's own level applies on top.
    """

    def __init__(
        self,
        verbosity: int = 0,
        thresholds: Optional[TraceThresholds] = None,
        logger_name: str = "numerika.trace",
    ):
        self.verbosity = verbosity
        self.thresholds = thresholds or TraceThresholds()
        self.logger = logging.getLogger(logger_name)

    def log_stage(self, stage: str, tokens: Sequence):
        if self.verbosity > self.thresholds.stages:
            self.logger.debug("%s operation: %s", stage, format_tokens(tokens))

    def log_ignored(self, char: str):
        if self.verbosity > self.thresholds.ignored:
            self.logger.debug("Ignore %r", char)

    def log_step(self, message: str):
        if self.verbosity > self.thresholds.steps:
            self.logger.debug(message)


class NullTraceLogger(TraceLogger):
    """Discard every trace record."""

    def __init__(self, **kwargs):
        pass

    def log_stage(self, stage: str, tokens: Sequence):
        pass

    def log_ignored(self, char: str):
        pass

    def log_step(self, message: str):
        pass
