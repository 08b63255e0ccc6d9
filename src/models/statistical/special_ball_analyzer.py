"""
src/models/statistical/special_ball_analyzer.py
Frequency and gap analysis for the secondary ball (Mega Ball / Powerball).
"""
from __future__ import annotations

from typing import Any, Sequence

from src.models.draw import DrawRecord
from src.utils.config import GameConfig
from src.utils.logger import get_logger

log = get_logger("stats.special")


class SpecialBallAnalyzer:
    """Same hot/overdue view as the main numbers, over the special-ball range."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.lo, self.hi = config.special_range

    def process(self, draws: Sequence[DrawRecord]) -> dict[str, Any]:
        """
        Returns {"frequency": [{num, count}], "gaps": [{num, gap}]}.
        frequency is sorted by count desc, gaps by gap desc (most overdue first).
        Values outside the special range are ignored.
        """
        counts = {n: 0 for n in range(self.lo, self.hi + 1)}
        for draw in draws:
            if draw.special in counts:
                counts[draw.special] += 1

        gaps = {
            n: next((idx for idx, d in enumerate(draws) if d.special == n), len(draws))
            for n in range(self.lo, self.hi + 1)
        }

        frequency = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
        overdue = sorted(gaps.items(), key=lambda kv: kv[1], reverse=True)
        log.debug(f"{self.config.game}: special ball over {len(draws)} draws")

        return {
            "frequency": [{"num": num, "count": cnt} for num, cnt in frequency],
            "gaps": [{"num": num, "gap": gap} for num, gap in overdue],
        }
