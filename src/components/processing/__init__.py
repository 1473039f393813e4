"""
Processing component - Interchangeable text transform strategies.
"""

from ._impl import (
    STRATEGIES,
    LowercaseStrategy,
    UppercaseStrategy,
    get_strategy,
    process_with,
)
from .component import run_process
from .models import (
    UNKNOWN_STRATEGY,
    ProcessingValidationError,
    ProcessTextInput,
    ProcessTextOutput,
)
from .ports import TextProcessorPort

__all__ = [
    # Entry points
    "run_process",
    "process_with",
    # Strategies
    "UppercaseStrategy",
    "LowercaseStrategy",
    "STRATEGIES",
    "get_strategy",
    # Models
    "ProcessTextInput",
    "ProcessTextOutput",
    "ProcessingValidationError",
    "UNKNOWN_STRATEGY",
    # Ports
    "TextProcessorPort",
]
