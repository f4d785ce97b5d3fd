"""Exceptions raised by the analysis pipeline.

Each one also derives from the closest builtin so callers that already catch
``ValueError`` / ``FileNotFoundError`` keep working.
"""

from __future__ import annotations

from typing import List, Sequence


class AnalysisError(Exception):
    """Base exception for variability-insights."""


class InvalidConfigError(AnalysisError, ValueError):
    """Raised when an AnalysisConfig is built with bad values."""


class DataNotFoundError(AnalysisError, FileNotFoundError):
    """Raised when the input CSV does not exist."""


class DataReadError(AnalysisError):
    """Raised when the input file exists but cannot be parsed."""


class MissingColumnsError(AnalysisError, ValueError):
    """Raised when a table lacks required columns."""

    def __init__(self, missing: Sequence[str], found: Sequence[str] = ()):
        self.missing: List[str] = list(missing)
        self.found: List[str] = list(found)
        msg = f"Missing required columns: {self.missing}"
        if self.found:
            msg += f". Found: {self.found}"
        super().__init__(msg)


class StatisticsError(AnalysisError):
    """Raised when per-category statistics cannot be computed."""


class RenderError(AnalysisError):
    """Raised when the chart cannot be drawn or written."""
