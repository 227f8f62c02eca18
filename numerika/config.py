"""
Evaluation settings.

Verbosity never changes a result; it only selects which trace records
the configured trace logger shows.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TraceThresholds:
    """Verbosity a record category must exceed to be shown."""

    stages: int = 1
    ignored: int = 1
    steps: int = 4


@dataclass(frozen=True)
class EvaluationConfig:
    """Per-call evaluation settings."""

    verbosity: int = 0
    thresholds: TraceThresholds = field(default_factory=TraceThresholds)
    logger_type: str = "console"

    def __post_init__(self):
        if self.verbosity < 0:
            raise ValueError(f"verbosity must be >= 0, got {self.verbosity}")
