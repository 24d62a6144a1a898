"""Data models shared across ingestion, analysis and serving modules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping

# Rates of one unit of the base currency, keyed by target currency code.
Rates = Dict[str, float]

# Observations keyed by ISO ``YYYY-MM-DD`` date. Key order carries no meaning.
RatesList = Dict[str, Rates]


def _coerce_rates(payload: Any) -> Rates:
    if not isinstance(payload, Mapping):
        raise ValueError("rates must be a mapping of currency to rate")
    return {str(currency): float(rate) for currency, rate in payload.items()}


@dataclass(slots=True)
class LatestRate:
    """Single-date snapshot returned by the ``latest`` endpoint."""

    rates: Rates
    base: str
    date: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LatestRate":
        """Build a snapshot from the decoded ``{rates, base, date}`` JSON."""

        try:
            return cls(
                rates=_coerce_rates(payload["rates"]),
                base=str(payload["base"]),
                date=str(payload["date"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed latest rate payload: {exc}") from exc


@dataclass(slots=True)
class HistoricalRates:
    """Date-range observations returned by the ``history`` endpoint."""

    rates: RatesList
    base: str
    start_at: str
    end_at: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "HistoricalRates":
        """Build the series from the decoded ``{rates, base, start_at, end_at}`` JSON."""

        try:
            raw = payload["rates"]
            if not isinstance(raw, Mapping):
                raise ValueError("rates must be a mapping of date to observation")
            return cls(
                rates={str(day): _coerce_rates(rates) for day, rates in raw.items()},
                base=str(payload["base"]),
                start_at=str(payload["start_at"]),
                end_at=str(payload["end_at"]),
            )
        except (KeyError, TypeError) as exc:
            raise ValueError(f"Malformed historical rates payload: {exc}") from exc


@dataclass(slots=True)
class ConvertResult:
    """Latest rate plus the trend recommendation for a currency pair."""

    from_currency: str
    to_currency: str
    rate: float
    recommendation: str

    def as_payload(self) -> Dict[str, Any]:
        """Return the wire representation served by ``/convert``."""

        return {
            "from": self.from_currency,
            "to": self.to_currency,
            "rate": self.rate,
            "recommendation": self.recommendation,
        }


__all__ = ["Rates", "RatesList", "LatestRate", "HistoricalRates", "ConvertResult"]
