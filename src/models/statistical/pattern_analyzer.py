"""
src/models/statistical/pattern_analyzer.py
Per-draw odd/even split, high/low split and sum over the most recent draws.
"""
from __future__ import annotations

from collections import Counter
from typing import Any, Sequence

import numpy as np

from src.models.draw import DrawRecord
from src.utils.logger import get_logger

log = get_logger("stats.patterns")

WINDOW = 50
# Shared by both games even though their maxima differ (70 vs 69): 1-35 low, 36+ high.
HIGH_CUTOFF = 35


class PatternAnalyzer:
    """Odd/even, high/low and sum time series for recent draws."""

    def __init__(self, window: int = WINDOW, high_cutoff: int = HIGH_CUTOFF):
        self.window = window
        self.high_cutoff = high_cutoff

    def split(self, numbers: Sequence[int]) -> dict[str, int]:
        odd = sum(1 for n in numbers if n % 2 != 0)
        high = sum(1 for n in numbers if n > self.high_cutoff)
        return {
            "odd": odd,
            "even": len(numbers) - odd,
            "high": high,
            "low": len(numbers) - high,
            "sum": sum(numbers),
        }

    def process(self, draws: Sequence[DrawRecord]) -> dict[str, Any]:
        """
        Returns {"oddEven", "highLow", "sumDist"}, each {label, history, summary}.
        history is newest-first, one entry per draw in the window.
        """
        recent = draws[: self.window]

        odd_even: list[dict[str, Any]] = []
        high_low: list[dict[str, Any]] = []
        sums: list[dict[str, Any]] = []

        for draw in recent:
            s = self.split(draw.numbers)
            odd_even.append({"date": draw.draw_date, "odd": s["odd"], "even": s["even"]})
            high_low.append({"date": draw.draw_date, "high": s["high"], "low": s["low"]})
            sums.append({"date": draw.draw_date, "sum": s["sum"]})

        log.debug(f"patterns over {len(recent)} draws")

        return {
            "oddEven": {
                "label": "Odd/Even",
                "history": odd_even,
                "summary": self._split_summary(odd_even, "odd", "even"),
            },
            "highLow": {
                "label": "High/Low",
                "history": high_low,
                "summary": self._split_summary(high_low, "high", "low"),
            },
            "sumDist": {
                "label": "Sum",
                "history": sums,
                "summary": self._sum_summary(sums),
            },
        }

    @staticmethod
    def _split_summary(history: list[dict[str, Any]], left: str, right: str) -> dict[str, Any]:
        """Most common split, e.g. "3-2" for 3 odd / 2 even."""
        counter = Counter(f"{row[left]}-{row[right]}" for row in history)
        if not counter:
            return {"mostCommon": None, "counts": {}}
        return {
            "mostCommon": counter.most_common(1)[0][0],
            "counts": dict(sorted(counter.items())),
        }

    @staticmethod
    def _sum_summary(history: list[dict[str, Any]]) -> dict[str, Any]:
        if not history:
            return {"mean": None, "std": None, "min": None, "max": None}
        arr = np.array([row["sum"] for row in history], dtype=float)
        return {
            "mean": round(float(arr.mean()), 2),
            "std": round(float(arr.std()), 2),
            "min": int(arr.min()),
            "max": int(arr.max()),
        }
