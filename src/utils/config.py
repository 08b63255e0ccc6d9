"""
src/utils/config.py
Load env vars and per-game config JSON files.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

load_dotenv()

ROOT = Path(__file__).parent.parent.parent
CONFIG_DIR = ROOT / "config"

# ── Paths ─────────────────────────────────────────────────────────
DATA_DIR: Path = Path(os.getenv("LOTTO_DATA_DIR", "data"))
LOG_DIR: str = os.getenv("LOG_DIR", "logs")

# ── Video feed ────────────────────────────────────────────────────
VIDEO_FEED_TIMEOUT: int = int(os.getenv("VIDEO_FEED_TIMEOUT", "15"))

# ── Games ─────────────────────────────────────────────────────────
GAMES: list[str] = ["megamillions", "powerball"]

GAME_CONFIG_FILES: dict[str, str] = {
    "megamillions": "megamillions.json",
    "powerball":    "powerball.json",
}

WEEKDAYS: dict[str, int] = {
    "Mon": 0, "Tue": 1, "Wed": 2, "Thu": 3, "Fri": 4, "Sat": 5, "Sun": 6,
}


@dataclass(frozen=True)
class GameConfig:
    """Valid number domain and draw calendar for one game."""

    game: str
    min: int
    max: int
    special_min: int
    special_max: int
    pick: int
    label: str = ""
    special_field: str = "special"
    draw_days: tuple[int, ...] = ()
    video_feed: dict[str, str] | None = field(default=None, compare=False)

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"{self.game}: min {self.min} > max {self.max}")
        if self.special_min > self.special_max:
            raise ValueError(
                f"{self.game}: special_min {self.special_min} > special_max {self.special_max}"
            )
        if self.pick <= 0:
            raise ValueError(f"{self.game}: pick must be positive, got {self.pick}")

    @property
    def number_range(self) -> tuple[int, int]:
        return self.min, self.max

    @property
    def special_range(self) -> tuple[int, int]:
        return self.special_min, self.special_max

    @classmethod
    def from_dict(cls, game: str, raw: dict[str, Any]) -> "GameConfig":
        lo, hi = raw["number_range"]
        sp_lo, sp_hi = raw["special_range"]
        return cls(
            game=game,
            min=lo,
            max=hi,
            special_min=sp_lo,
            special_max=sp_hi,
            pick=raw.get("pick_count", 5),
            label=raw.get("label", game),
            special_field=raw.get("special_field", "special"),
            draw_days=tuple(WEEKDAYS[d] for d in raw.get("draw_days", [])),
            video_feed=raw.get("video_feed"),
        )


_game_config_cache: dict[str, GameConfig] = {}


def get_game_config(game: str) -> GameConfig:
    """Load, validate and cache the config for a given game."""
    if game in _game_config_cache:
        return _game_config_cache[game]
    filename = GAME_CONFIG_FILES.get(game)
    if not filename:
        raise ValueError(f"Unknown game: {game}")
    path = CONFIG_DIR / filename
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        config = GameConfig.from_dict(game, json.load(f))
    _game_config_cache[game] = config
    return config


def load_all_game_configs() -> dict[str, GameConfig]:
    """Validate every supported game up front; raises on the first bad config."""
    return {game: get_game_config(game) for game in GAMES}
