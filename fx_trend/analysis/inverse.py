"""Reciprocal rates for a single observation."""

from __future__ import annotations

import math
from typing import Mapping

from fx_trend.ingestion.models import Rates


def invert(rates: Mapping[str, float]) -> Rates:
    """Return ``1 / rate`` for every currency in ``rates``.

    Zero rates map to ``inf``; callers are responsible for data quality.
    """

    return {
        currency: (1 / rate if rate != 0 else math.copysign(math.inf, rate))
        for currency, rate in rates.items()
    }


__all__ = ["invert"]
