"""
Value-level errors returned by the pure helpers in src.domain.

Helpers return (result, errors) tuples instead of raising; result is None
whenever errors is non-empty.
"""

from __future__ import annotations

from dataclasses import dataclass

INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class UtilityError:
    """Helper precondition violation."""

    code: str
    message: str
    field: str | None = None


def invalid_input(message: str, field: str | None = None) -> UtilityError:
    return UtilityError(code=INVALID_INPUT, message=message, field=field)
