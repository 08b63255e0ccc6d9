"""
src/models/statistical/frequency_analyzer.py
Hot/cold number ranking: how often each main number was drawn per period.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Sequence

from src.models.draw import DrawRecord
from src.utils.config import GameConfig
from src.utils.logger import get_logger

log = get_logger("stats.frequency")


@dataclass(frozen=True)
class Period:
    """A frequency window: the `count` most recent draws, or the last `days` days."""

    id: str
    label: str
    days: float | None = None
    count: int | None = None

    def __post_init__(self):
        if (self.days is None) == (self.count is None):
            raise ValueError(f"Period {self.id!r} needs exactly one of days/count")

    def select(self, draws: Sequence[DrawRecord], today: date) -> list[DrawRecord]:
        if self.count is not None:
            return list(draws[: self.count])
        if math.isinf(self.days):
            return list(draws)
        cutoff = (today - timedelta(days=int(self.days))).isoformat()
        return [d for d in draws if d.draw_date >= cutoff]


PERIODS: list[Period] = [
    Period("all", "Since 2023", days=math.inf),
    Period("2yr", "Recent 2 Years", days=730),
    Period("1yr", "Recent 1 Year", days=365),
    Period("6mo", "Recent 6 Months", days=180),
    Period("100draws", "Last 100 Draws", count=100),
    Period("50draws", "Last 50 Draws", count=50),
    Period("10draws", "Last 10 Draws", count=10),   # hot
    Period("5draws", "Last 5 Draws", count=5),      # trend
]

TOP_N = 10


class FrequencyAnalyzer:
    """Count each main number per period and rank by count."""

    def __init__(self, config: GameConfig, periods: list[Period] | None = None):
        self.config = config
        self.lo, self.hi = config.number_range
        self.periods = periods if periods is not None else PERIODS

    def count(self, draws: Sequence[DrawRecord]) -> dict[int, int]:
        """{number: occurrences}; numbers outside the game's range are ignored."""
        counts = {n: 0 for n in range(self.lo, self.hi + 1)}
        for draw in draws:
            for num in draw.numbers:
                if num in counts:
                    counts[num] += 1
        return counts

    @staticmethod
    def rank(counts: dict[int, int]) -> list[dict[str, int]]:
        """Sort by count descending, ties by number ascending."""
        ordered = sorted(counts.items(), key=lambda kv: (-kv[1], kv[0]))
        return [{"num": num, "count": cnt} for num, cnt in ordered]

    def process(self, draws: Sequence[DrawRecord], today: date | None = None) -> dict[str, Any]:
        """
        Returns {period_id: {label, totalDraws, data, top10, bottom10}}.
        `draws` must be newest-first. `bottom10` lists the rarest number first.
        """
        today = today or date.today()
        result: dict[str, Any] = {}

        for period in self.periods:
            subset = period.select(draws, today)
            ranked = self.rank(self.count(subset))
            result[period.id] = {
                "label": period.label,
                "totalDraws": len(subset),
                "data": ranked,
                "top10": ranked[:TOP_N],
                "bottom10": ranked[-TOP_N:][::-1],
            }
            log.debug(f"{self.config.game} {period.id}: {len(subset)} draws")

        return result
