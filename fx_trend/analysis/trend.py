"""Least-squares trend estimation and buy/hold signal classification.

Rates are regressed against their position in the ordered sequence
(``t = 0, 1, ..., n - 1``), so gaps between calendar dates carry no weight.
The fitted slope's sign alone decides the :class:`Signal`.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Dict, Iterable, Mapping, Sequence

import pandas as pd

from fx_trend.analysis.series import order_rates
from fx_trend.utils.currency import DEFAULT_TARGET_CURRENCY
from fx_trend.utils.logger import get_logger

LOGGER = get_logger(__name__)


class Signal(str, Enum):
    """Recommendation derived from the direction of the rate trend."""

    CONVERT = "convert"
    NO_CONVERT = "don't convert"
    NEUTRAL = "neutral"


def _rate_frame(
    sequence: Sequence[Mapping[str, float]], currencies: list[str]
) -> pd.DataFrame:
    """Tabulate ``sequence`` with one column per currency, rows in sequence order."""

    frame = pd.DataFrame(list(sequence), index=range(len(sequence)))
    frame = frame.reindex(columns=currencies)
    for currency, missing in frame.isna().sum().items():
        if missing:
            # Absent rates count as 0.0, matching the behaviour of the upstream engine.
            LOGGER.warning(
                "%s missing from %s of %s observations; treating as 0.0",
                currency,
                missing,
                len(frame),
            )
    return frame.fillna(0.0).astype(float)


def slopes(
    sequence: Sequence[Mapping[str, float]], currencies: Iterable[str]
) -> Dict[str, float | None]:
    """Return the OLS slope of each currency's rate against the time index.

    The slope is ``None`` when fewer than two observations exist, because the
    regression is undefined there.
    """

    keys = list(dict.fromkeys(currencies))
    if len(sequence) < 2:
        return {currency: None for currency in keys}

    frame = _rate_frame(sequence, keys)
    timeline = pd.Series(range(len(frame)), index=frame.index, dtype=float)
    variance = timeline.var()
    return {currency: float(frame[currency].cov(timeline) / variance) for currency in keys}


def slope(sequence: Sequence[Mapping[str, float]], currency: str) -> float | None:
    """Return the OLS slope for a single ``currency`` (``None`` if undetermined)."""

    return slopes(sequence, [currency])[currency]


def classify(value: float | None) -> Signal:
    """Map a slope to its :class:`Signal`.

    Rising rates mean waiting pays off, falling rates mean converting now does.
    """

    if value is None or math.isnan(value):
        return Signal.NEUTRAL
    if value > 0:
        return Signal.NO_CONVERT
    if value < 0:
        return Signal.CONVERT
    return Signal.NEUTRAL


def recommend(
    series: Mapping[str, Mapping[str, float]],
    currency: str = DEFAULT_TARGET_CURRENCY,
) -> Signal:
    """Order ``series`` by date and classify the trend of ``currency``."""

    return classify(slope(order_rates(series), currency))


__all__ = ["Signal", "classify", "recommend", "slope", "slopes"]
