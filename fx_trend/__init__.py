"""Public interface for the fx_trend package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from typing import Dict, Sequence

from fx_trend.analysis import Signal, classify, invert, order_rates, recommend, slope, slopes
from fx_trend.ingestion.exchangerates import ExchangeRatesClient, ForexClientError
from fx_trend.ingestion.models import ConvertResult, HistoricalRates, LatestRate, Rates
from fx_trend.ingestion.strategy import RateProvider
from fx_trend.utils.currency import (
    DEFAULT_TARGET_CURRENCY,
    DEFAULT_WINDOW_DAYS,
    normalise_currency,
)
from fx_trend.utils.date_range import trailing_window

__all__ = [
    "__version__",
    "ConvertResult",
    "ExchangeRatesClient",
    "ForexClientError",
    "FxTrend",
    "HistoricalRates",
    "LatestRate",
    "RateProvider",
    "Signal",
    "classify",
    "invert",
    "order_rates",
    "recommend",
    "slope",
    "slopes",
]

try:
    __version__ = importlib_metadata.version("fx-trend")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class FxTrend:
    """Package facade combining a rate provider with the trend engine."""

    __slots__ = ("provider", "target", "window_days")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(
        self,
        provider: RateProvider | None = None,
        *,
        target: str = DEFAULT_TARGET_CURRENCY,
        window_days: int = DEFAULT_WINDOW_DAYS,
    ) -> None:
        """Configure where rates come from and how the trend is measured.

        When ``provider`` is omitted an :class:`ExchangeRatesClient` with its
        default endpoint and retry policy is used. ``target`` is the currency
        every quote is expressed in and ``window_days`` the length of the
        trailing window the trend is fitted over.
        """

        if window_days < 0:
            raise ValueError("window_days must not be negative")
        self.provider: RateProvider = provider or ExchangeRatesClient()
        self.target = normalise_currency(target)
        self.window_days = window_days

    def rate(self, currency: str) -> float:
        """Return the latest rate of one ``currency`` unit in the target currency."""

        base = normalise_currency(currency)
        latest = self.provider.get_latest_rate(base, [self.target])
        return self._extract_target_rate(latest)

    def history(
        self,
        currency: str,
        *,
        days: int | None = None,
        today: date | None = None,
        symbols: Sequence[str] | None = None,
    ) -> HistoricalRates:
        """Return the observations for the trailing window ending on ``today``."""

        base = normalise_currency(currency)
        window = trailing_window(self._resolve_days(days), today=today)
        start, end = window.as_iso()
        return self.provider.get_historical_rates(
            base, start, end, list(symbols) if symbols else [self.target]
        )

    def recommend(
        self,
        currency: str,
        *,
        days: int | None = None,
        today: date | None = None,
    ) -> Signal:
        """Classify the recent trend of ``currency`` against the target."""

        historical = self.history(currency, days=days, today=today)
        return recommend(historical.rates, self.target)

    def trend_slopes(
        self,
        currency: str,
        symbols: Sequence[str],
        *,
        days: int | None = None,
        today: date | None = None,
    ) -> Dict[str, float | None]:
        """Return the trend slope of every currency in ``symbols`` quoted in ``currency``."""

        codes = [normalise_currency(symbol) for symbol in symbols]
        historical = self.history(currency, days=days, today=today, symbols=codes)
        return slopes(order_rates(historical.rates), codes)

    def inverse_rates(self, currency: str, symbols: Sequence[str] | None = None) -> Rates:
        """Return the latest rates quoted the other way round (symbol → ``currency``)."""

        base = normalise_currency(currency)
        codes = [normalise_currency(symbol) for symbol in symbols] if symbols else [self.target]
        latest = self.provider.get_latest_rate(base, codes)
        return invert(latest.rates)

    def convert(self, currency: str) -> ConvertResult:
        """Return the latest rate together with the trend recommendation."""

        base = normalise_currency(currency)
        rate = self.rate(base)
        signal = self.recommend(base)
        return ConvertResult(
            from_currency=base,
            to_currency=self.target,
            rate=rate,
            recommendation=signal.value,
        )

    def _resolve_days(self, days: int | None) -> int:
        return self.window_days if days is None else days

    def _extract_target_rate(self, latest: LatestRate | None) -> float:
        if latest is None or self.target not in latest.rates:
            raise ValueError("can't extract currency")
        return latest.rates[self.target]
