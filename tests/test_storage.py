"""tests/test_storage.py"""
import json
from unittest.mock import MagicMock

from src.storage.draw_store import DrawStore, iter_draw_dates


def draw_doc(draw_date, numbers=(1, 2, 3, 4, 5), **extra):
    return {"game": "powerball", "drawDate": draw_date, "numbers": list(numbers), "powerBall": 9, **extra}


class TestDrawStore:
    def _store(self, tmp_path):
        return DrawStore("powerball", data_dir=tmp_path)

    def test_save_draw_writes_file_and_index(self, tmp_path):
        store = self._store(tmp_path)
        path = store.save_draw(draw_doc("2025-01-06"))

        assert path == tmp_path / "powerball" / "2025-01-06.json"
        assert json.loads(path.read_text())["numbers"] == [1, 2, 3, 4, 5]
        index = store.read_index()
        assert index["game"] == "powerball"
        assert index["draws"] == ["2025-01-06"]
        assert index["total"] == 1
        assert "updatedAt" in index

    def test_index_sorted_descending_without_duplicates(self, tmp_path):
        store = self._store(tmp_path)
        for d in ["2025-01-06", "2025-01-11", "2025-01-08", "2025-01-11"]:
            store.save_draw(draw_doc(d))
        index = store.read_index()
        assert index["draws"] == ["2025-01-11", "2025-01-08", "2025-01-06"]
        assert index["total"] == 3

    def test_load_series_newest_first(self, tmp_path):
        store = self._store(tmp_path)
        for d in ["2025-01-06", "2025-01-11", "2025-01-08"]:
            store.save_draw(draw_doc(d))
        series = store.load_series()
        assert [r.draw_date for r in series] == ["2025-01-11", "2025-01-08", "2025-01-06"]
        assert all(r.special == 9 for r in series)

    def test_load_series_skips_missing_and_empty(self, tmp_path):
        store = self._store(tmp_path)
        store.save_draw(draw_doc("2025-01-06"))
        store.save_draw(draw_doc("2025-01-08", numbers=()))
        store.update_index("2025-01-11")  # indexed, no file
        assert [r.draw_date for r in store.load_series()] == ["2025-01-06"]

    def test_no_index_is_empty(self, tmp_path):
        assert self._store(tmp_path).load_series() == []

    def test_fragment_roundtrip(self, tmp_path):
        store = self._store(tmp_path)
        payload = {"bestPairs": [{"pair": "5-22", "count": 2}]}
        path = store.write_fragment("pairs", payload)
        assert path.read_text().endswith("\n")
        assert store.read_fragment("pairs") == payload

    def test_save_draw_fills_video_code(self, tmp_path):
        store = self._store(tmp_path)
        videos = MagicMock()
        videos.get.return_value = "abc123"
        path = store.save_draw(draw_doc("2025-01-06"), videos=videos)
        assert json.loads(path.read_text())["videoCode"] == "abc123"
        videos.get.assert_called_once_with("2025-01-06")

    def test_save_draw_keeps_existing_video_code(self, tmp_path):
        store = self._store(tmp_path)
        videos = MagicMock()
        path = store.save_draw(draw_doc("2025-01-06", videoCode="keep"), videos=videos)
        assert json.loads(path.read_text())["videoCode"] == "keep"
        videos.get.assert_not_called()


class TestDrawCalendar:
    def test_powerball_days(self):
        # Mon, Wed, Sat
        dates = list(iter_draw_dates("2025-01-01", "2025-01-11", (0, 2, 5)))
        assert dates == ["2025-01-01", "2025-01-04", "2025-01-06", "2025-01-08", "2025-01-11"]

    def test_empty_range(self):
        assert list(iter_draw_dates("2025-01-10", "2025-01-01", (0, 1, 2, 3, 4, 5, 6))) == []

    def test_missing_dates(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)
        store.save_draw({"drawDate": "2025-01-03", "numbers": [1, 2, 3, 4, 5], "megaBall": 4})
        # Mega Millions draws Tue, Fri
        assert store.missing_dates("2024-12-31", "2025-01-10") == ["2024-12-31", "2025-01-07", "2025-01-10"]
