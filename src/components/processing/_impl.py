"""
Text processing strategies.

Functional Core - pure transforms behind TextProcessorPort.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ports import TextProcessorPort

# --- Strategies ---


@dataclass(frozen=True)
class UppercaseStrategy:
    """Uppercase conversion."""

    def process(self, text: str) -> str:
        return text.upper()


@dataclass(frozen=True)
class LowercaseStrategy:
    """Lowercase conversion."""

    def process(self, text: str) -> str:
        return text.lower()


# Single instance per strategy name
STRATEGIES: dict[str, TextProcessorPort] = {
    "upper": UppercaseStrategy(),
    "lower": LowercaseStrategy(),
}


def get_strategy(name: str) -> TextProcessorPort | None:
    """Look up a registered strategy by name."""
    return STRATEGIES.get(name)


def process_with(strategy: TextProcessorPort, text: str) -> str:
    """Run any strategy over text."""
    return strategy.process(text)
