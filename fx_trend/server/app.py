"""FastAPI service exposing the ``/convert`` recommendation endpoint."""

from __future__ import annotations

import argparse
from typing import Optional

from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from fx_trend import FxTrend
from fx_trend.ingestion.exchangerates import BASE_ENDPOINT, ExchangeRatesClient
from fx_trend.utils.currency import (
    DEFAULT_TARGET_CURRENCY,
    DEFAULT_WINDOW_DAYS,
    normalise_currency,
)
from fx_trend.utils.logger import get_logger

LOGGER = get_logger(__name__)

__all__ = [
    "CONVERT_ENDPOINT",
    "ERR_CONVERT",
    "ERR_DECODE_PARAMS",
    "ERR_ROUTE_NOT_FOUND",
    "create_app",
    "parse_args",
    "main",
]

CONVERT_ENDPOINT = "/convert"
PARAM_CURRENCY = "currency"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 3030

ERR_DECODE_PARAMS = "invalid query parameter - currency must be provided"
ERR_CONVERT = "error converting currency"
ERR_ROUTE_NOT_FOUND = "route not found"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(advisor: FxTrend | None = None) -> FastAPI:
    """Build the application around ``advisor`` (a default :class:`FxTrend` if omitted)."""

    app = FastAPI(title="fx-trend", description="Currency conversion recommendations")
    app.state.advisor = advisor or FxTrend()

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return _error(404, ERR_ROUTE_NOT_FOUND)
        return _error(exc.status_code, str(exc.detail))

    @app.get(CONVERT_ENDPOINT)
    def convert(
        request: Request,
        currency: Optional[str] = Query(default=None, alias=PARAM_CURRENCY),
    ) -> JSONResponse:
        """Return the latest rate to the target currency and whether to convert now."""

        fx: FxTrend = request.app.state.advisor
        try:
            code = normalise_currency(currency)
        except ValueError:
            return _error(400, ERR_DECODE_PARAMS)
        try:
            result = fx.convert(code)
        except Exception as exc:  # noqa: BLE001 - every provider failure maps to a 500
            LOGGER.error("Failed to convert %s: %s", code, exc)
            return _error(500, ERR_CONVERT)
        return JSONResponse(status_code=200, content=result.as_payload())

    return app


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve currency conversion recommendations")
    parser.add_argument("--host", default=DEFAULT_HOST, help="Interface to bind")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port to listen on")
    parser.add_argument(
        "--target",
        default=DEFAULT_TARGET_CURRENCY,
        help="Currency every quote is expressed in",
    )
    parser.add_argument(
        "--window-days",
        dest="window_days",
        type=int,
        default=DEFAULT_WINDOW_DAYS,
        help="Number of days of history the trend is fitted over",
    )
    parser.add_argument("--base-url", dest="base_url", default=BASE_ENDPOINT, help="Rate API root")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    import uvicorn

    args = parse_args(argv)
    with ExchangeRatesClient(base_url=args.base_url) as client:
        advisor = FxTrend(client, target=args.target, window_days=args.window_days)
        LOGGER.info("Starting fx-trend service on %s:%s", args.host, args.port)
        uvicorn.run(create_app(advisor), host=args.host, port=args.port)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
