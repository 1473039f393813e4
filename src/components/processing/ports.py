"""
Processing component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol


class TextProcessorPort(Protocol):
    """
    Text transform capability.

    Implementations must be pure and total: no side effects, no shared
    state, no failure for any input string.
    """

    def process(self, text: str) -> str:
        """Transform text."""
        ...
