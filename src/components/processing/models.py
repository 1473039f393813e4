"""
Processing component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN_STRATEGY = "unknown_strategy"


@dataclass(frozen=True)
class ProcessingValidationError:
    """Processing request error."""

    code: str
    message: str
    field: str | None = None


@dataclass(frozen=True)
class ProcessTextInput:
    """Input for processing text with a named strategy."""

    strategy: str
    text: str


@dataclass(frozen=True)
class ProcessTextOutput:
    """Output from a processing request."""

    text: str | None
    errors: tuple[ProcessingValidationError, ...]
    success: bool
