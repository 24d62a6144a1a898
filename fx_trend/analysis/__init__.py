"""Trend estimation engine: ordering, regression, classification and inversion."""

from __future__ import annotations

from fx_trend.analysis.inverse import invert
from fx_trend.analysis.series import order_rates
from fx_trend.analysis.trend import Signal, classify, recommend, slope, slopes

__all__ = ["Signal", "classify", "invert", "order_rates", "recommend", "slope", "slopes"]
