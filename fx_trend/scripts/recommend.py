"""CLI entry point for a one-shot conversion recommendation."""

from __future__ import annotations

import sys

from fx_trend.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
