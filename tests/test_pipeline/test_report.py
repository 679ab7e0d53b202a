from __future__ import annotations

import csv
import io

from stylestats.model.record import StatRecord
from stylestats.report import to_csv

HEADER = (
    "eventId,length,emptyStylesheet,backgroundSelectors,colorSelectors,"
    "backgroundIsOverriddenWithImage,error,digest,errorStack"
)


class TestToCsv:
    def test_header_only(self) -> None:
        assert to_csv([]) == HEADER + "\n"

    def test_rows_in_order(self) -> None:
        text = to_csv(
            [
                StatRecord(eventId="2", length=10, colorSelectors=1),
                StatRecord(eventId="1", length=0, emptyStylesheet=1),
            ]
        )
        assert text.splitlines() == [
            HEADER,
            "2,10,0,0,1,0,0,,",
            "1,0,1,0,0,0,0,,",
        ]

    def test_quotes_multiline_fields(self) -> None:
        rec = StatRecord(eventId="3", error=1, digest='a, "b"\nc', errorStack="line1\nline2")
        rows = list(csv.DictReader(io.StringIO(to_csv([rec]))))
        assert len(rows) == 1
        assert rows[0]["digest"] == 'a, "b"\nc'
        assert rows[0]["errorStack"] == "line1\nline2"
        assert rows[0]["error"] == "1"
