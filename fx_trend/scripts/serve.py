"""CLI entry point for running the fx-trend HTTP service."""

from __future__ import annotations

from fx_trend.server.app import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
