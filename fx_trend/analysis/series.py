"""Linearise date-keyed rate observations into chronological order."""

from __future__ import annotations

from typing import List, Mapping

from fx_trend.ingestion.models import Rates


def order_rates(series: Mapping[str, Mapping[str, float]]) -> List[Rates]:
    """Return the observations of ``series`` sorted by their date keys.

    Keys are compared as plain strings, which is chronological for equal-length
    ``YYYY-MM-DD`` dates. Anything else sorts by raw string comparison.
    """

    return [dict(series[day]) for day in sorted(series)]


__all__ = ["order_rates"]
