from __future__ import annotations

import pytest

from fx_trend.ingestion.models import HistoricalRates, LatestRate


def test_latest_rate_from_payload_coerces_numbers() -> None:
    latest = LatestRate.from_payload({"rates": {"EUR": 1}, "base": "GBP", "date": "2019-11-22"})

    assert latest.rates == {"EUR": 1.0}
    assert isinstance(latest.rates["EUR"], float)


def test_historical_rates_from_payload() -> None:
    history = HistoricalRates.from_payload(
        {
            "rates": {"2019-11-22": {"EUR": 1.16}, "2019-11-21": {"EUR": "1.17"}},
            "base": "GBP",
            "start_at": "2019-11-21",
            "end_at": "2019-11-22",
        }
    )

    assert history.rates == {"2019-11-22": {"EUR": 1.16}, "2019-11-21": {"EUR": 1.17}}
    assert (history.start_at, history.end_at) == ("2019-11-21", "2019-11-22")


@pytest.mark.parametrize(
    "payload",
    [
        {"base": "GBP", "date": "2019-11-22"},
        {"rates": ["EUR"], "base": "GBP", "date": "2019-11-22"},
        {"rates": {"EUR": "n/a"}, "base": "GBP", "date": "2019-11-22"},
    ],
)
def test_latest_rate_rejects_malformed_payloads(payload) -> None:
    with pytest.raises(ValueError):
        LatestRate.from_payload(payload)


def test_historical_rates_rejects_non_mapping_rates() -> None:
    with pytest.raises(ValueError):
        HistoricalRates.from_payload(
            {"rates": [], "base": "GBP", "start_at": "2019-11-21", "end_at": "2019-11-22"}
        )
