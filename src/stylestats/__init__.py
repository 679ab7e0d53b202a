"""stylestats: per-file stylesheet statistics as CSV."""

from __future__ import annotations

__version__ = "0.1.0"

from stylestats.config import StatsConfig
from stylestats.model.record import StatRecord
from stylestats.pipeline import run, run_report

__all__ = [
    "StatRecord",
    "StatsConfig",
    "run",
    "run_report",
]
