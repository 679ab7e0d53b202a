"""Tests for the batch driver."""

from __future__ import annotations

import time

import pytest

from stylestats.config import StatsConfig
from stylestats.errors import InvalidEventIdError
from stylestats.model.record import initial_stat
from stylestats.pipeline import run, run_report
from stylestats.pipeline import runner as runner_mod


@pytest.fixture
def css_dir(tmp_path):
    files = {
        "1.css": ".color-1-background { background: url(a.png); }",
        "2.css": "",
        "3.css": "garbage without braces",
        "4.css": ".color-4x { color: red; }\n.color-4-background { color: blue; }",
    }
    for name, body in files.items():
        (tmp_path / name).write_text(body, encoding="utf-8")
    return tmp_path


class TestRun:
    def test_one_record_per_file(self, css_dir) -> None:
        records = run(css_dir)
        assert [r.eventId for r in records] == ["1", "2", "3", "4"]

    def test_record_contents(self, css_dir) -> None:
        one, two, three, four = run(css_dir)
        assert (one.backgroundSelectors, one.backgroundIsOverriddenWithImage) == (1, 1)
        assert two.emptyStylesheet == 1
        assert three.error == 1
        assert three.digest == "garbage without braces"
        assert (four.colorSelectors, four.backgroundSelectors) == (1, 1)

    def test_single_worker(self, css_dir) -> None:
        assert run(css_dir, StatsConfig(max_workers=1)) == run(css_dir)

    def test_default_directory_from_config(self, css_dir) -> None:
        records = run(config=StatsConfig(css_dir=str(css_dir)))
        assert len(records) == 4

    def test_empty_directory(self, tmp_path) -> None:
        assert run(tmp_path) == []

    def test_order_independent_of_completion(self, tmp_path, monkeypatch) -> None:
        names = [f"{i}.css" for i in range(1, 6)]
        for name in names:
            (tmp_path / name).write_text("", encoding="utf-8")

        def slow_first(directory, filename, config=None):
            # Earlier files finish later.
            time.sleep(0.02 * (6 - int(filename.split(".")[0])))
            return initial_stat(filename.split(".")[0], 0)

        monkeypatch.setattr(runner_mod, "process_file", slow_first)
        records = run(tmp_path, StatsConfig(max_workers=5))
        assert [r.eventId for r in records] == ["1", "2", "3", "4", "5"]

    def test_invalid_filename_aborts(self, css_dir) -> None:
        (css_dir / "readme.md").write_text("x", encoding="utf-8")
        with pytest.raises(InvalidEventIdError):
            run(css_dir)

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            run(tmp_path / "absent")


class TestRunReport:
    def test_csv_rows(self, css_dir) -> None:
        lines = run_report(css_dir).splitlines()
        assert lines[0].startswith("eventId,length,emptyStylesheet,")
        assert lines[1] == "1,47,0,1,0,1,0,,"
        assert lines[2] == "2,0,1,0,0,0,0,,"

    def test_idempotent(self, css_dir) -> None:
        assert run_report(css_dir) == run_report(css_dir)
