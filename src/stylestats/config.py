from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StatsConfig:
    css_dir: str = "css"
    max_workers: int = 8
    digest_length: int = 50
    encoding: str = "utf-8"
