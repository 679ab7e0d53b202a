"""CSV serialization of StatRecords."""

from __future__ import annotations

import csv
import io
from typing import Iterable

from stylestats.model.record import STAT_FIELDS, StatRecord


def to_csv(records: Iterable[StatRecord]) -> str:
    """Render records as CSV text with a header row.

    Columns follow ``STAT_FIELDS``.  An empty input still yields the header.
    """
    buf = io.StringIO()
    writer = csv.DictWriter(buf, fieldnames=STAT_FIELDS, lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow(record.as_row())
    return buf.getvalue()
