"""
Numeric helpers - arithmetic and range classification.
"""

from __future__ import annotations

from src.domain.errors import UtilityError, invalid_input

# --- Classification Ranges ---

ZERO = "Zero"
SMALL_POSITIVE = "Small positive"
MEDIUM_POSITIVE = "Medium positive"
LARGE_POSITIVE = "Large positive"
NEGATIVE = "Negative"

SMALL_MAX = 10
MEDIUM_MAX = 100


def calculate_sum(a: int, b: int) -> int:
    return a + b


def safe_divide(a: float, b: float) -> tuple[float | None, list[UtilityError]]:
    """
    Divide a by b.

    Returns:
        Tuple of (quotient, errors). Quotient is None when b is exactly zero.
    """
    if b == 0:
        return None, [invalid_input("Division by zero", field="b")]

    return a / b, []


def classify(n: int) -> str:
    """
    Classify an integer into a closed range.

    0 -> Zero, 1..10 -> Small positive, 11..100 -> Medium positive,
    above 100 -> Large positive, below 0 -> Negative.
    """
    if n < 0:
        return NEGATIVE
    if n == 0:
        return ZERO
    if n <= SMALL_MAX:
        return SMALL_POSITIVE
    if n <= MEDIUM_MAX:
        return MEDIUM_POSITIVE
    return LARGE_POSITIVE
