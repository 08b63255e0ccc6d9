"""
src/models/statistical/prediction_analyzer.py
Candidate picks derived from the frequency and gap fragments. No scan of its own.
"""
from __future__ import annotations

from typing import Any

HOT_PERIOD = "10draws"
N_PICKS = 5


class PredictionAnalyzer:
    """`hot_period` must be one of the FrequencyAnalyzer period ids."""

    def __init__(self, n_picks: int = N_PICKS, hot_period: str = HOT_PERIOD):
        self.n_picks = n_picks
        self.hot_period = hot_period

    def process(self, frequency: dict[str, Any], gaps: dict[str, Any]) -> dict[str, list[int]]:
        """
        hotAndReady: top of the frequency ranking for the hot period.
        overdue: top of the gap ranking by due score.
        """
        hot = [row["num"] for row in frequency[self.hot_period]["top10"][: self.n_picks]]
        due = [row["num"] for row in gaps["ranking"][: self.n_picks]]
        return {
            "hotAndReady": hot,
            "overdue": due,
        }
