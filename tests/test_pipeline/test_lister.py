from __future__ import annotations

import pytest

from stylestats.lister import list_files


class TestListFiles:
    def test_sorted_names(self, tmp_path) -> None:
        for name in ["3.css", "1.css", "20.css", "2.css"]:
            (tmp_path / name).write_text("", encoding="utf-8")
        assert list_files(tmp_path) == ["1.css", "2.css", "20.css", "3.css"]

    def test_no_filtering(self, tmp_path) -> None:
        (tmp_path / "1.css").write_text("", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("", encoding="utf-8")
        assert list_files(tmp_path) == ["1.css", "notes.txt"]

    def test_does_not_recurse(self, tmp_path) -> None:
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "1.css").write_text("", encoding="utf-8")
        assert list_files(tmp_path) == ["sub"]

    def test_empty_directory(self, tmp_path) -> None:
        assert list_files(tmp_path) == []

    def test_missing_directory(self, tmp_path) -> None:
        with pytest.raises(FileNotFoundError):
            list_files(tmp_path / "nope")
