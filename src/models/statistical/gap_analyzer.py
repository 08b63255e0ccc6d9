"""
src/models/statistical/gap_analyzer.py
Score numbers by their gap (draws since last appearance).
Numbers whose current gap is long relative to their usual cadence are "due".
"""
from __future__ import annotations

from typing import Any, Sequence

from src.models.draw import DrawRecord
from src.utils.config import GameConfig
from src.utils.logger import get_logger

log = get_logger("stats.gaps")

RANKING_SIZE = 15


class GapAnalyzer:
    """Current gap, longest gap, average interval and due score per number."""

    def __init__(self, config: GameConfig, ranking_size: int = RANKING_SIZE):
        self.config = config
        self.lo, self.hi = config.number_range
        self.ranking_size = ranking_size

    def get_gaps(self, draws: Sequence[DrawRecord]) -> dict[int, int]:
        """
        Returns {number: draws_since_last_appearance}.
        `draws` is newest-first, so the gap is the index of the first hit.
        Never seen → len(draws).
        """
        gaps: dict[int, int] = {}
        for num in range(self.lo, self.hi + 1):
            gaps[num] = next(
                (idx for idx, draw in enumerate(draws) if num in draw.numbers),
                len(draws),
            )
        return gaps

    def _scan(self, num: int, draws: Sequence[DrawRecord]) -> tuple[int, int]:
        """Walk oldest → newest; return (longest gap, appearances)."""
        max_gap = 0
        last_idx = -1
        appearances = 0

        for idx in range(len(draws) - 1, -1, -1):
            if num not in draws[idx].numbers:
                continue
            if last_idx != -1:
                max_gap = max(max_gap, last_idx - idx - 1)
            last_idx = idx
            appearances += 1

        if last_idx == -1:
            return len(draws), 0
        # Open gap from the most recent hit up to now.
        return max(max_gap, last_idx), appearances

    def process(self, draws: Sequence[DrawRecord]) -> dict[str, Any]:
        """
        Returns {"all": {num: GapRecord}, "ranking": [...]}.
        ranking holds the top numbers by dueScore, highest first.
        """
        n_draws = len(draws)
        current = self.get_gaps(draws)
        records: dict[int, dict[str, Any]] = {}

        for num in range(self.lo, self.hi + 1):
            max_gap, appearances = self._scan(num, draws)
            avg_interval = n_draws / appearances if appearances > 0 else n_draws
            due_score = (current[num] / avg_interval) * 100 if avg_interval else 0.0
            records[num] = {
                "current": current[num],
                "max": max_gap,
                "history": [],
                "appearances": appearances,
                "avgInterval": round(avg_interval, 2),
                "dueScore": round(due_score, 1),
            }

        ranking = sorted(
            ({"num": num, **rec} for num, rec in records.items()),
            key=lambda row: row["dueScore"],
            reverse=True,
        )
        log.debug(f"{self.config.game}: gaps over {n_draws} draws, most due={ranking[0]['num'] if ranking else None}")

        return {
            "all": records,
            "ranking": ranking[: self.ranking_size],
        }
