"""Custom exception types for the occupation normalization pipeline."""

from __future__ import annotations

from pathlib import Path


class OccupationPipelineError(Exception):
    """Base exception for pipeline related issues."""


class SourceNotFoundError(OccupationPipelineError):
    """Raised when a required source file is missing or unreadable."""

    def __init__(self, path: str | Path, reason: str | None = None) -> None:
        self.path = Path(path)
        message = f"Source file not found: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SourceFormatError(OccupationPipelineError):
    """Raised when a source file lacks the columns needed to build records."""


class ParserUnavailableError(OccupationPipelineError):
    """Raised when the optional semantic parser cannot be initialised."""
