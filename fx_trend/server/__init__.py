"""HTTP service wrapping the :class:`fx_trend.FxTrend` facade."""

from __future__ import annotations

from fx_trend.server.app import create_app

__all__ = ["create_app"]
