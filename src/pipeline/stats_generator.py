"""
src/pipeline/stats_generator.py
Run every statistical analyzer over one game's history and write the fragments.

    frequency / gaps / patterns / pairs / special are independent;
    predictions is derived from frequency + gaps.
"""
from __future__ import annotations

from datetime import date
from pathlib import Path
from typing import Any, Sequence

from src.models.draw import DrawRecord
from src.models.statistical.frequency_analyzer import FrequencyAnalyzer, Period
from src.models.statistical.gap_analyzer import GapAnalyzer
from src.models.statistical.pair_analyzer import PairAnalyzer
from src.models.statistical.pattern_analyzer import PatternAnalyzer
from src.models.statistical.prediction_analyzer import PredictionAnalyzer
from src.models.statistical.special_ball_analyzer import SpecialBallAnalyzer
from src.storage.draw_store import DrawStore
from src.utils.config import GameConfig, get_game_config
from src.utils.logger import get_logger

log = get_logger("pipeline.stats")

FRAGMENTS = ("frequency", "gaps", "patterns", "pairs", "special", "predictions")


class EmptySeriesError(ValueError):
    """Raised when the engine is handed no draws to analyze."""


class StatsEngine:
    """All analyzers for one game, configured from its GameConfig."""

    def __init__(self, config: GameConfig, periods: list[Period] | None = None):
        self.config = config
        self.frequency = FrequencyAnalyzer(config, periods=periods)
        self.gaps = GapAnalyzer(config)
        self.patterns = PatternAnalyzer()
        self.pairs = PairAnalyzer(config)
        self.special = SpecialBallAnalyzer(config)
        self.predictions = PredictionAnalyzer()

        period_ids = {p.id for p in self.frequency.periods}
        if self.predictions.hot_period not in period_ids:
            raise ValueError(
                f"Hot period {self.predictions.hot_period!r} missing from frequency periods {sorted(period_ids)}"
            )

    def compute(self, draws: Sequence[DrawRecord], today: date | None = None) -> dict[str, Any]:
        """
        Returns {fragment_name: payload} in FRAGMENTS order.
        `draws` must be newest-first and non-empty.
        """
        if not draws:
            raise EmptySeriesError(f"No draws to analyze for {self.config.game}")

        frequency = self.frequency.process(draws, today=today)
        gaps = self.gaps.process(draws)
        return {
            "frequency": frequency,
            "gaps": gaps,
            "patterns": self.patterns.process(draws),
            "pairs": self.pairs.process(draws),
            "special": self.special.process(draws),
            "predictions": self.predictions.process(frequency, gaps),
        }


def generate_stats(
    game: str,
    store: DrawStore | None = None,
    today: date | None = None,
) -> dict[str, Path]:
    """
    Full flow for one game:
    1. Load the draw series from disk
    2. Run every analyzer
    3. Write one JSON fragment per analyzer family
    Returns {fragment_name: path}; empty when there was nothing to analyze.
    """
    log.info(f"[STATS] Generating stats for {game}")
    config = get_game_config(game)
    store = store or DrawStore(game, config=config)

    draws = store.load_series()
    try:
        fragments = StatsEngine(config).compute(draws, today=today)
    except EmptySeriesError as exc:
        log.warning(f"[SKIP] {exc}")
        return {}

    written = {name: store.write_fragment(name, payload) for name, payload in fragments.items()}
    log.info(f"[DONE] {game}: {len(draws)} draws → {len(written)} fragments in {store.stats_dir}")
    return written
