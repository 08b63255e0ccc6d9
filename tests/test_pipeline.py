"""tests/test_pipeline.py"""
import json
from datetime import date, timedelta
from unittest.mock import patch

import pytest

from src.models.draw import DrawRecord
from src.models.statistical.frequency_analyzer import Period
from src.pipeline.stats_generator import FRAGMENTS, EmptySeriesError, StatsEngine, generate_stats
from src.storage.draw_store import DrawStore
from src.utils.config import get_game_config

TODAY = date(2025, 6, 30)

HISTORY = [
    ([5, 14, 22, 33, 41], 3),
    ([3, 11, 19, 28, 37], 7),
    ([7, 14, 24, 35, 43], 3),
    ([2, 9, 22, 30, 41], 12),
    ([8, 17, 25, 36, 44], 25),
    ([5, 12, 22, 50, 61], 1),
    ([1, 14, 29, 45, 70], 3),
]


def seed_store(store: DrawStore, history=HISTORY, special_field="megaBall"):
    for i, (numbers, special) in enumerate(history):
        store.save_draw({
            "game": store.game,
            "drawDate": (TODAY - timedelta(days=3 * i)).isoformat(),
            "numbers": numbers,
            special_field: special,
        })


class TestStatsEngine:
    def setup_method(self):
        self.engine = StatsEngine(get_game_config("megamillions"))

    def test_empty_series_fails_fast(self):
        with pytest.raises(EmptySeriesError):
            self.engine.compute([])

    def test_periods_must_include_hot_period(self):
        config = get_game_config("megamillions")
        with pytest.raises(ValueError, match="10draws"):
            StatsEngine(config, periods=[Period("50draws", "Last 50 Draws", count=50)])

    def test_custom_periods_with_hot_period(self):
        engine = StatsEngine(
            get_game_config("megamillions"),
            periods=[Period("10draws", "Last 10 Draws", count=10)],
        )
        draws = [DrawRecord("2025-06-30", (1, 2, 3, 4, 5), 1)]
        fragments = engine.compute(draws, today=TODAY)
        assert set(fragments["frequency"]) == {"10draws"}
        assert fragments["predictions"]["hotAndReady"] == [1, 2, 3, 4, 5]

    def test_emits_all_fragments(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)
        seed_store(store)
        fragments = self.engine.compute(store.load_series(), today=TODAY)
        assert tuple(fragments) == FRAGMENTS
        assert set(fragments["frequency"]) == {"all", "2yr", "1yr", "6mo", "100draws", "50draws", "10draws", "5draws"}
        assert set(fragments["gaps"]) == {"all", "ranking"}
        assert set(fragments["patterns"]) == {"oddEven", "highLow", "sumDist"}
        assert set(fragments["pairs"]) == {"bestPairs"}
        assert set(fragments["special"]) == {"frequency", "gaps"}
        assert set(fragments["predictions"]) == {"hotAndReady", "overdue"}

    def test_fragments_survive_json(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)
        seed_store(store)
        fragments = self.engine.compute(store.load_series(), today=TODAY)
        restored = json.loads(json.dumps(fragments))
        assert restored["predictions"] == fragments["predictions"]
        assert restored["pairs"] == fragments["pairs"]
        assert restored["gaps"]["all"]["1"] == fragments["gaps"]["all"][1]
        assert isinstance(restored["gaps"]["all"]["1"]["dueScore"], float)


class TestGenerateStats:
    def test_writes_six_fragments(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)
        seed_store(store)

        written = generate_stats("megamillions", store=store, today=TODAY)

        assert set(written) == set(FRAGMENTS)
        for name, path in written.items():
            assert path == tmp_path / "megamillions" / "stats" / f"{name}.json"
            assert path.exists()
        preds = store.read_fragment("predictions")
        assert preds["hotAndReady"][:2] == [14, 22]

    def test_idempotent(self, tmp_path):
        store = DrawStore("powerball", data_dir=tmp_path)
        seed_store(store, special_field="powerBall")

        first = {n: p.read_bytes() for n, p in generate_stats("powerball", store=store, today=TODAY).items()}
        second = {n: p.read_bytes() for n, p in generate_stats("powerball", store=store, today=TODAY).items()}
        assert first == second

    def test_powerball_special_field(self, tmp_path):
        store = DrawStore("powerball", data_dir=tmp_path)
        seed_store(store, special_field="powerBall")
        generate_stats("powerball", store=store, today=TODAY)
        special = store.read_fragment("special")
        assert len(special["frequency"]) == 26
        assert special["frequency"][0] == {"num": 3, "count": 3}

    def test_no_data_skips_without_writing(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)

        with patch("src.pipeline.stats_generator.log") as mock_log:
            written = generate_stats("megamillions", store=store)

        assert written == {}
        assert not store.stats_dir.exists()
        mock_log.warning.assert_called_once()

    def test_index_without_numbers_skips(self, tmp_path):
        store = DrawStore("megamillions", data_dir=tmp_path)
        store.save_draw({"drawDate": "2025-06-27", "numbers": [], "megaBall": None})
        assert generate_stats("megamillions", store=store) == {}


class TestCli:
    def test_runs_single_game(self, tmp_path):
        import importlib.util
        from pathlib import Path

        script = Path(__file__).parent.parent / "scripts" / "generate_stats.py"
        spec = importlib.util.spec_from_file_location("generate_stats", script)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        seed_store(DrawStore("powerball", data_dir=tmp_path), special_field="powerBall")
        assert module.main(["powerball", "--data-dir", str(tmp_path)]) == 0
        assert (tmp_path / "powerball" / "stats" / "gaps.json").exists()
        assert not (tmp_path / "megamillions").exists()

    def test_runs_all_games_with_missing_data(self, tmp_path):
        import importlib.util
        from pathlib import Path

        script = Path(__file__).parent.parent / "scripts" / "generate_stats.py"
        spec = importlib.util.spec_from_file_location("generate_stats", script)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)

        seed_store(DrawStore("megamillions", data_dir=tmp_path))
        assert module.main(["--data-dir", str(tmp_path)]) == 0
        assert (tmp_path / "megamillions" / "stats" / "pairs.json").exists()
        assert not (tmp_path / "powerball" / "stats").exists()
