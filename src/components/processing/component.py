"""
Processing component - Named text transforms.

Shell Layer - resolves a strategy name and reports unknown names as errors.
"""

from __future__ import annotations

import logging

from ._impl import STRATEGIES, get_strategy, process_with
from .models import (
    UNKNOWN_STRATEGY,
    ProcessingValidationError,
    ProcessTextInput,
    ProcessTextOutput,
)

logger = logging.getLogger(__name__)


def run_process(input_data: ProcessTextInput) -> ProcessTextOutput:
    """Process text with the strategy registered under input_data.strategy."""
    strategy = get_strategy(input_data.strategy)

    if strategy is None:
        logger.info("Unknown processing strategy %r", input_data.strategy)
        return ProcessTextOutput(
            text=None,
            errors=(
                ProcessingValidationError(
                    code=UNKNOWN_STRATEGY,
                    message=(
                        f"Unknown strategy '{input_data.strategy}', "
                        f"expected one of: {', '.join(sorted(STRATEGIES))}"
                    ),
                    field="strategy",
                ),
            ),
            success=False,
        )

    return ProcessTextOutput(
        text=process_with(strategy, input_data.text),
        errors=(),
        success=True,
    )
