"""
Canonical exception types for toneflow.

WavIOError subclasses OSError so callers that already handle file errors
keep working; the underlying OS error is chained as __cause__.
"""

from __future__ import annotations

from typing import Optional


class ToneflowError(Exception):
    """Base exception for all toneflow errors."""


class WavIOError(ToneflowError, OSError):
    """Opening, writing or closing a WAV destination failed."""

    def __init__(self, message: str, filename: Optional[str] = None):
        super().__init__(message)
        self.filename = filename

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class WriterFinalizedError(ToneflowError):
    """A sample was added to a writer after it was written to disk."""


__all__ = ["ToneflowError", "WavIOError", "WriterFinalizedError"]
