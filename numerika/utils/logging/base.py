# numerika/utils/logging/base.py
"""
Base trace logger interface for Numerika.
"""

from abc import ABC, abstractmethod
from typing import Sequence


def format_tokens(tokens: Sequence) -> str:
    """Render a token list compactly for trace output."""
    return "[" + ", ".join(repr(token) for token in tokens) + "]"


class TraceLogger(ABC):
    """
    Abstract base class for diagnostic trace backends.

    The pipeline reports to a trace logger at every stage boundary. A
    backend decides whether and where each record is shown; it must never
    influence the computed value.
    """

    @abstractmethod
    def log_stage(self, stage: str, tokens: Sequence):
        """
        Log the token list a stage is about to process.

        Args:
            stage: Stage name ("tokenize", "resolve_unary", ...)
            tokens: Input tokens of that stage
        """
        pass

    @abstractmethod
    def log_ignored(self, char: str):
        """
        Log a character the tokenizer skipped.

        Args:
            char: The ignored character
        """
        pass

    @abstractmethod
    def log_step(self, message: str):
        """
        Log a fine-grained step (start banner, factorial iterations).

        Args:
            message: Preformatted message
        """
        pass

    def finish(self):
        """Flush or release backend resources at the end of an evaluation."""
        pass
