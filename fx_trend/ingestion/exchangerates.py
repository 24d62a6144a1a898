"""requests-based client for exchangeratesapi-style JSON rate providers."""

from __future__ import annotations

import time
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar
from urllib.parse import urlencode, urlparse

import requests

from fx_trend.ingestion.models import HistoricalRates, LatestRate
from fx_trend.utils.currency import DEFAULT_TARGET_CURRENCY
from fx_trend.utils.logger import get_logger

LOGGER = get_logger(__name__)

BASE_ENDPOINT = "https://api.exchangeratesapi.io"
LATEST_PATH = "latest"
HISTORICAL_PATH = "history"
BASE_PARAM = "base"
SYMBOLS_PARAM = "symbols"
START_DATE_PARAM = "start_at"
END_DATE_PARAM = "end_at"

T = TypeVar("T")


class ForexClientError(RuntimeError):
    """Raised when a rate provider request cannot be completed.

    The message follows ``"<url>: <operation>: <cause>"`` so log lines point at
    the exact request that failed.
    """

    def __init__(self, url: str, operation: str, cause: object) -> None:
        self.url = url
        self.operation = operation
        self.cause = cause
        super().__init__(f"{url}: {operation}: {cause}")


def build_url(
    path: str, query_params: Mapping[str, str], *, base_url: str = BASE_ENDPOINT
) -> str:
    """Join ``path`` onto ``base_url`` and encode ``query_params`` in key order."""

    parsed = urlparse(base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ValueError(f"base_url must be an absolute URL, got {base_url!r}")
    query = urlencode(sorted(query_params.items()))
    return f"{base_url.rstrip('/')}/{path}?{query}"


def build_latest_rate_url(
    currency: str,
    symbols: Sequence[str] | None = None,
    *,
    base_url: str = BASE_ENDPOINT,
) -> str:
    """Return the ``latest`` URL quoting ``symbols`` against ``currency``."""

    return build_url(
        LATEST_PATH,
        {
            BASE_PARAM: currency,
            SYMBOLS_PARAM: ",".join(symbols or [DEFAULT_TARGET_CURRENCY]),
        },
        base_url=base_url,
    )


def build_historical_rates_url(
    currency: str,
    start_date: str,
    end_date: str,
    symbols: Sequence[str] | None = None,
    *,
    base_url: str = BASE_ENDPOINT,
) -> str:
    """Return the ``history`` URL for the inclusive ``start_date``/``end_date`` window."""

    return build_url(
        HISTORICAL_PATH,
        {
            BASE_PARAM: currency,
            SYMBOLS_PARAM: ",".join(symbols or [DEFAULT_TARGET_CURRENCY]),
            START_DATE_PARAM: start_date,
            END_DATE_PARAM: end_date,
        },
        base_url=base_url,
    )


class ExchangeRatesClient:
    """Fetch latest and historical rates with bounded retries."""

    def __init__(
        self,
        *,
        base_url: str = BASE_ENDPOINT,
        timeout: float = 0.5,
        max_attempts: int = 4,
        retry_wait: float = 0.5,
        retry_max_wait: float = 1.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.base_url = base_url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.retry_wait = retry_wait
        self.retry_max_wait = retry_max_wait
        self.session = session or requests.Session()
        self.session.headers.update({"Content-Type": "application/json"})

    def get_latest_rate(
        self, currency: str, symbols: Sequence[str] | None = None
    ) -> LatestRate:
        """Return the most recent rates of ``symbols`` against ``currency``."""

        url = build_latest_rate_url(currency, symbols, base_url=self.base_url)
        return self._fetch(url, "GetLatestRate", LatestRate.from_payload)

    def get_historical_rates(
        self,
        currency: str,
        start_date: str,
        end_date: str,
        symbols: Sequence[str] | None = None,
    ) -> HistoricalRates:
        """Return daily rates of ``symbols`` against ``currency`` between two dates."""

        url = build_historical_rates_url(
            currency, start_date, end_date, symbols, base_url=self.base_url
        )
        return self._fetch(url, "GetHistoricalRates", HistoricalRates.from_payload)

    def _fetch(self, url: str, operation: str, decode: Callable[[Any], T]) -> T:
        response = self._get_with_retries(url, operation)
        self._raise_for_status(response, url, operation)
        try:
            result = decode(response.json())
        except ValueError as exc:
            raise ForexClientError(url, operation, "unexpected payload") from exc
        LOGGER.info("Fetched %s from %s", operation, url)
        return result

    def _get_with_retries(self, url: str, operation: str) -> requests.Response:
        attempt = 0
        while True:
            attempt += 1
            try:
                return self.session.get(url, timeout=self.timeout)
            except (requests.ConnectionError, requests.Timeout) as exc:
                if attempt >= self.max_attempts:
                    raise ForexClientError(url, operation, exc) from exc
                wait = min(self.retry_wait * attempt, self.retry_max_wait)
                LOGGER.warning(
                    "Attempt %s/%s for %s failed: %s; retrying in %.2fs",
                    attempt,
                    self.max_attempts,
                    url,
                    exc,
                    wait,
                )
                time.sleep(wait)
            except requests.RequestException as exc:
                # Malformed URLs and similar request errors never succeed on retry.
                raise ForexClientError(url, operation, exc) from exc

    @staticmethod
    def _raise_for_status(response: requests.Response, url: str, operation: str) -> None:
        try:
            response.raise_for_status()
        except requests.HTTPError as exc:
            message = f"received non 2XX response: {response.status_code} {response.reason}"
            raise ForexClientError(url, operation, message) from exc

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "ExchangeRatesClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = [
    "BASE_ENDPOINT",
    "ExchangeRatesClient",
    "ForexClientError",
    "build_historical_rates_url",
    "build_latest_rate_url",
    "build_url",
]
