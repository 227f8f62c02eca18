# numerika/utils/logging/console.py
"""
Console trace logging, the front end's default backend.
"""

from typing import Optional, Sequence, TextIO

from numerika.config import TraceThresholds
from .base import TraceLogger, format_tokens


class ConsoleTraceLogger(TraceLogger):
    """
    Print trace records to stdout, or to another stream.

    Features:
    - No external dependencies
    - Immediate output while the pipeline runs
    - Verbosity-gated per record category

    Each category is shown only when ``verbosity`` exceeds its threshold,
    so ``verbosity=0`` prints nothing.
    """

    def __init__(
        self,
        verbosity: int = 0,
        thresholds: Optional[TraceThresholds] = None,
        stream: Optional[TextIO] = None,
    ):
        """
        Initialize console trace logging.

        Args:
            verbosity: Verbosity level (number of -v flags)
            thresholds: Per-category minimum verbosity
            stream: Destination file object; None means the current sys.stdout
        """
        self.verbosity = verbosity
        self.thresholds = thresholds or TraceThresholds()
        self.stream = stream

    def log_stage(self, stage: str, tokens: Sequence):
        if self.verbosity > self.thresholds.stages:
            print(f"{stage} operation: {format_tokens(tokens)}", file=self.stream)

    def log_ignored(self, char: str):
        if self.verbosity > self.thresholds.ignored:
            print(f"Ignore {char!r}", file=self.stream)

    def log_step(self, message: str):
        if self.verbosity > self.thresholds.steps:
            print(message, file=self.stream)
