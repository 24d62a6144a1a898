"""Command line helper printing a conversion recommendation as JSON."""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict

from fx_trend import FxTrend
from fx_trend.ingestion.exchangerates import BASE_ENDPOINT, ExchangeRatesClient, ForexClientError
from fx_trend.utils.currency import DEFAULT_TARGET_CURRENCY, DEFAULT_WINDOW_DAYS
from fx_trend.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = ["build_report", "parse_args", "main"]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("currency", help="Currency to convert from (e.g. GBP)")
    parser.add_argument(
        "--target",
        default=DEFAULT_TARGET_CURRENCY,
        help="Currency to convert into",
    )
    parser.add_argument(
        "--days",
        type=int,
        default=DEFAULT_WINDOW_DAYS,
        help="Number of days of history the trend is fitted over",
    )
    parser.add_argument(
        "--slopes",
        default="",
        help="Comma separated currencies to report trend slopes for (e.g. USD,GBP)",
    )
    parser.add_argument("--base-url", dest="base_url", default=BASE_ENDPOINT, help="Rate API root")
    return parser.parse_args(argv)


def build_report(fx: FxTrend, currency: str, slope_symbols: list[str]) -> Dict[str, Any]:
    """Return the ``/convert`` payload, extended with slopes when requested."""

    report: Dict[str, Any] = fx.convert(currency).as_payload()
    if slope_symbols:
        report["slopes"] = fx.trend_slopes(currency, slope_symbols)
    return report


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    symbols = [symbol.strip() for symbol in args.slopes.split(",") if symbol.strip()]
    with ExchangeRatesClient(base_url=args.base_url) as client:
        try:
            fx = FxTrend(client, target=args.target, window_days=args.days)
            report = build_report(fx, args.currency, symbols)
        except (ForexClientError, ValueError) as exc:
            LOGGER.error("Unable to build recommendation for %s: %s", args.currency, exc)
            return 1
    print(json.dumps(report))
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
