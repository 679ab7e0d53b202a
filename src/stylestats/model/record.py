"""StatRecord: the per-file statistics row."""

from __future__ import annotations

import dataclasses
import traceback
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StatRecord:
    """Counts derived from one stylesheet file.

    Field order is the CSV column order.
    """

    eventId: str = ""
    length: int = 0
    emptyStylesheet: int = 0
    backgroundSelectors: int = 0
    colorSelectors: int = 0
    backgroundIsOverriddenWithImage: int = 0
    error: int = 0
    digest: str = ""
    errorStack: str = ""

    def as_row(self) -> dict[str, Any]:
        """Return the record as an ordered column -> value mapping."""
        return dataclasses.asdict(self)


STAT_FIELDS: tuple[str, ...] = tuple(f.name for f in dataclasses.fields(StatRecord))


def initial_stat(event_id: str, length: int) -> StatRecord:
    """Build a fresh baseline record with every counter at zero."""
    return StatRecord(eventId=event_id, length=length)


def error_stat(
    initial: StatRecord, content: str, exc: BaseException, digest_length: int = 50
) -> StatRecord:
    """Derive the record for a file that failed to parse."""
    stack = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return dataclasses.replace(
        initial,
        error=1,
        digest=content[:digest_length],
        errorStack=stack.rstrip("\n"),
    )
