"""Per-file processing: read, parse, and extract one StatRecord."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from stylestats.config import StatsConfig
from stylestats.errors import InvalidEventIdError
from stylestats.extractor import get_statistics
from stylestats.model.record import StatRecord, error_stat, initial_stat
from stylestats.stylesheet import ParseError, parse_stylesheet

logger = logging.getLogger(__name__)

_EVENT_ID_RE = re.compile(r"^\d+", re.ASCII)


def parse_event_id(filename: str) -> str:
    """Return the leading digit run of ``filename``.

    Raises InvalidEventIdError if the name does not start with a digit.
    """
    match = _EVENT_ID_RE.match(filename)
    if match is None:
        raise InvalidEventIdError(filename)
    return match.group(0)


def process_file(
    directory: str | Path, filename: str, config: StatsConfig | None = None
) -> StatRecord:
    """Build the StatRecord for one file.

    A parse failure is recorded in the returned record.  A bad filename or
    an unreadable file raises.
    """
    config = config or StatsConfig()
    event_id = parse_event_id(filename)
    file_path = Path(directory) / filename
    content = file_path.read_bytes().decode(config.encoding)
    initial = initial_stat(event_id, len(content))
    logger.info("eventId=%s, file=%s: read %d characters", event_id, filename, len(content))

    try:
        stylesheet = parse_stylesheet(content, source_label=str(file_path))
    except ParseError as exc:
        logger.warning(
            "Illegal CSS: %s... %s",
            json.dumps(content[: config.digest_length]),
            exc,
        )
        return error_stat(initial, content, exc, config.digest_length)
    return get_statistics(initial, stylesheet)
