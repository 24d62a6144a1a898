"""Currency constants and invariants used across the package."""

from __future__ import annotations

import re
from typing import Final

EUR: Final = "EUR"
GBP: Final = "GBP"
USD: Final = "USD"

DEFAULT_TARGET_CURRENCY: Final = EUR

# Number of days before the current date used for historical rates.
DEFAULT_WINDOW_DAYS: Final = 7

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


def normalise_currency(code: str | None) -> str:
    """Return ``code`` upper-cased, rejecting anything but a 3-letter ISO code."""

    cleaned = (code or "").strip().upper()
    if not _CURRENCY_PATTERN.match(cleaned):
        raise ValueError(f"Invalid currency code: {code!r}")
    return cleaned


__all__ = [
    "EUR",
    "GBP",
    "USD",
    "DEFAULT_TARGET_CURRENCY",
    "DEFAULT_WINDOW_DAYS",
    "normalise_currency",
]
