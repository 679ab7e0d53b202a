"""Batch driver: process every file of a directory into CSV rows."""

from __future__ import annotations

import functools
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from stylestats.config import StatsConfig
from stylestats.lister import list_files
from stylestats.model.record import StatRecord
from stylestats.pipeline.processor import process_file
from stylestats.report import to_csv

logger = logging.getLogger(__name__)


def run(
    directory: str | Path | None = None, config: StatsConfig | None = None
) -> list[StatRecord]:
    """Process all files of ``directory`` concurrently.

    Results are gathered positionally, so the returned list follows the
    listing order rather than completion order.  Unrecoverable errors (bad
    filename, unreadable file) propagate and abort the whole run.
    """
    config = config or StatsConfig()
    directory = Path(directory if directory is not None else config.css_dir)
    files = list_files(directory)
    if not files:
        logger.info("No files found in %s", directory)
        return []

    work = functools.partial(process_file, directory, config=config)
    with ThreadPoolExecutor(max_workers=min(config.max_workers, len(files))) as pool:
        return list(pool.map(work, files))


def run_report(
    directory: str | Path | None = None, config: StatsConfig | None = None
) -> str:
    """Run the pipeline and render its records as CSV text."""
    return to_csv(run(directory, config))
