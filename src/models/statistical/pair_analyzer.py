"""
src/models/statistical/pair_analyzer.py
Co-occurrence counts for every unordered pair of main numbers.
"""
from __future__ import annotations

from collections import Counter
from itertools import combinations
from typing import Any, Sequence

from src.models.draw import DrawRecord
from src.utils.config import GameConfig
from src.utils.logger import get_logger

log = get_logger("stats.pairs")

TOP_PAIRS = 20


def pair_key(a: int, b: int) -> str:
    lo, hi = sorted((a, b))
    return f"{lo}-{hi}"


class PairAnalyzer:
    """Count how often two numbers are drawn together."""

    def __init__(self, config: GameConfig, top_n: int = TOP_PAIRS):
        self.config = config
        self.top_n = top_n

    def count_pairs(self, draws: Sequence[DrawRecord]) -> Counter:
        """{"low-high": count}, one increment per draw containing both numbers."""
        pairs: Counter = Counter()
        for draw in draws:
            for a, b in combinations(sorted(draw.numbers), 2):
                pairs[pair_key(a, b)] += 1
        return pairs

    def process(self, draws: Sequence[DrawRecord]) -> dict[str, Any]:
        pairs = self.count_pairs(draws)
        # Stable sort keeps first-seen order among equal counts.
        ranked = sorted(pairs.items(), key=lambda kv: kv[1], reverse=True)
        log.debug(f"{self.config.game}: {len(pairs)} distinct pairs over {len(draws)} draws")
        return {
            "bestPairs": [{"pair": key, "count": cnt} for key, cnt in ranked[: self.top_n]],
        }
