from __future__ import annotations

import math

import pytest

from fx_trend.analysis.inverse import invert


def test_invert_returns_reciprocals() -> None:
    inverse = invert({"USD": 1.1058, "GBP": 0.8598})

    assert inverse == pytest.approx({"USD": 0.904322662325918, "GBP": 1.1630611770179111}, abs=1e-12)


def test_invert_preserves_keys_and_round_trips() -> None:
    rates = {"USD": 1.1058, "GBP": 0.8598, "JPY": 120.55, "CHF": 1.0}

    twice = invert(invert(rates))

    assert set(twice) == set(rates)
    assert twice == pytest.approx(rates, rel=1e-12)


def test_invert_does_not_reject_zero_or_negative_rates() -> None:
    inverse = invert({"EUR": 0.0, "USD": -2.0})

    assert math.isinf(inverse["EUR"]) and inverse["EUR"] > 0
    assert inverse["USD"] == -0.5


def test_invert_empty_observation() -> None:
    assert invert({}) == {}
