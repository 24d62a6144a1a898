from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fx_trend import FxTrend, Signal
from fx_trend.ingestion.exchangerates import ForexClientError
from fx_trend.ingestion.models import ConvertResult
from fx_trend.server.app import (
    ERR_CONVERT,
    ERR_DECODE_PARAMS,
    ERR_ROUTE_NOT_FOUND,
    create_app,
    parse_args,
)


class _StubAdvisor:
    def __init__(self, outcome: object) -> None:
        self.outcome = outcome
        self.calls: list[str] = []

    def convert(self, currency: str) -> ConvertResult:
        self.calls.append(currency)
        if isinstance(self.outcome, Exception):
            raise self.outcome
        return self.outcome  # type: ignore[return-value]


@pytest.fixture()
def happy_advisor() -> _StubAdvisor:
    return _StubAdvisor(
        ConvertResult(
            from_currency="USD",
            to_currency="EUR",
            rate=1.163061177,
            recommendation=Signal.CONVERT.value,
        )
    )


def _client(advisor: object) -> TestClient:
    return TestClient(create_app(advisor))  # type: ignore[arg-type]


def test_convert_happy_path(happy_advisor: _StubAdvisor) -> None:
    response = _client(happy_advisor).get("/convert", params={"currency": "usd"})

    assert response.status_code == 200
    assert response.json() == {
        "from": "USD",
        "to": "EUR",
        "rate": 1.163061177,
        "recommendation": "convert",
    }
    assert happy_advisor.calls == ["USD"]


@pytest.mark.parametrize("query", ["", "?currency=", "?currency=DOLLARS"])
def test_convert_rejects_missing_or_invalid_currency(
    happy_advisor: _StubAdvisor, query: str
) -> None:
    response = _client(happy_advisor).get(f"/convert{query}")

    assert response.status_code == 400
    assert response.json() == {"error": ERR_DECODE_PARAMS}
    assert happy_advisor.calls == []


@pytest.mark.parametrize(
    "error",
    [
        ForexClientError("http://rates", "GetLatestRate", "connection closed"),
        ValueError("can't extract currency"),
        RuntimeError("boom"),
    ],
)
def test_convert_maps_failures_to_500(error: Exception, caplog) -> None:
    response = _client(_StubAdvisor(error)).get("/convert", params={"currency": "GBP"})

    assert response.status_code == 500
    assert response.json() == {"error": ERR_CONVERT}
    assert "Failed to convert GBP" in caplog.text


def test_unknown_route_returns_json_404(happy_advisor: _StubAdvisor) -> None:
    response = _client(happy_advisor).get("/does-not-exist")

    assert response.status_code == 404
    assert response.json() == {"error": ERR_ROUTE_NOT_FOUND}


def test_create_app_defaults_to_fx_trend() -> None:
    app = create_app()

    assert isinstance(app.state.advisor, FxTrend)


def test_parse_args_defaults() -> None:
    args = parse_args([])

    assert (args.host, args.port, args.target, args.window_days) == ("localhost", 3030, "EUR", 7)


def test_main_runs_uvicorn(monkeypatch) -> None:
    import uvicorn

    from fx_trend.server import app as app_module

    captured: dict[str, object] = {}

    def _run(application, host, port):
        captured.update(app=application, host=host, port=port)

    monkeypatch.setattr(uvicorn, "run", _run)

    app_module.main(["--port", "4040", "--target", "GBP", "--window-days", "14"])

    assert captured["host"] == "localhost"
    assert captured["port"] == 4040
    advisor = captured["app"].state.advisor  # type: ignore[attr-defined]
    assert advisor.target == "GBP"
    assert advisor.window_days == 14


def test_main_closes_client_after_serving(monkeypatch) -> None:
    import uvicorn

    from fx_trend.ingestion.exchangerates import ExchangeRatesClient
    from fx_trend.server import app as app_module

    closed: list[bool] = []

    class _RecordingClient(ExchangeRatesClient):
        def close(self) -> None:
            closed.append(True)
            super().close()

    monkeypatch.setattr(app_module, "ExchangeRatesClient", _RecordingClient)
    monkeypatch.setattr(uvicorn, "run", lambda *_args, **_kwargs: None)

    app_module.main([])

    assert closed == [True]
