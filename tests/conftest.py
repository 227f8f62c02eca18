"""
Pytest configuration and shared fixtures for numerika tests.
"""

import pytest
from typing import List, Tuple

from numerika.utils.logging import TraceLogger


class RecordingTraceLogger(TraceLogger):
    """Trace backend that keeps every record for later assertions."""

    def __init__(self):
        self.records: List[Tuple[str, object]] = []
        self.finished = False

    def log_stage(self, stage, tokens):
        self.records.append(("stage", (stage, list(tokens))))

    def log_ignored(self, char):
        self.records.append(("ignored", char))

    def log_step(self, message):
        self.records.append(("step", message))

    def finish(self):
        self.finished = True

    def stages(self) -> List[str]:
        return [payload[0] for kind, payload in self.records if kind == "stage"]

    def of_kind(self, kind: str) -> list:
        return [payload for k, payload in self.records if k == kind]


@pytest.fixture
def recording_trace():
    """Fixture providing a trace logger that records instead of printing."""
    return RecordingTraceLogger()

