"""Abstractions for pluggable rate providers."""

from __future__ import annotations

from typing import Protocol, Sequence

from fx_trend.ingestion.models import HistoricalRates, LatestRate


class RateProvider(Protocol):
    """Contract for retrieving exchange-rate snapshots.

    Concrete implementations quote every rate against ``currency`` as the base
    and restrict the response to ``symbols`` when given.
    """

    def get_latest_rate(
        self, currency: str, symbols: Sequence[str] | None = None
    ) -> LatestRate:
        ...  # pragma: no cover - protocol definition

    def get_historical_rates(
        self,
        currency: str,
        start_date: str,
        end_date: str,
        symbols: Sequence[str] | None = None,
    ) -> HistoricalRates:
        ...  # pragma: no cover - protocol definition


__all__ = ["RateProvider"]
