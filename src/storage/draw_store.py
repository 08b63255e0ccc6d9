"""
src/storage/draw_store.py
File-backed draw history: one JSON file per draw date plus an index per game.

Layout under the data dir:
    <game>/index.json          {"game", "draws": [dates, newest first], "total", "updatedAt"}
    <game>/<YYYY-MM-DD>.json   one draw document
    <game>/stats/<name>.json   statistics fragments
"""
from __future__ import annotations

import json
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Any, Iterator

from src.crawlers.video_feed import VideoFeedCache
from src.models.draw import DrawRecord, sort_newest_first
from src.utils.config import DATA_DIR, GameConfig, get_game_config
from src.utils.logger import get_logger

log = get_logger("storage")


def iter_draw_dates(start: str, end: str, weekdays: tuple[int, ...]) -> Iterator[str]:
    """Yield ISO dates in [start, end] falling on one of `weekdays` (Mon=0)."""
    current = date.fromisoformat(start)
    last = date.fromisoformat(end)
    while current <= last:
        if current.weekday() in weekdays:
            yield current.isoformat()
        current += timedelta(days=1)


class DrawStore:
    """Read/write one game's draw files, index and stats fragments."""

    def __init__(self, game: str, data_dir: str | Path | None = None, config: GameConfig | None = None):
        self.game = game
        self.config = config or get_game_config(game)
        self.root = Path(data_dir if data_dir is not None else DATA_DIR) / game
        self.index_path = self.root / "index.json"
        self.stats_dir = self.root / "stats"

    # ── Draw files ────────────────────────────────────────────────

    def draw_path(self, draw_date: str) -> Path:
        return self.root / f"{draw_date}.json"

    def has_draw(self, draw_date: str) -> bool:
        return self.draw_path(draw_date).exists()

    def save_draw(self, doc: dict[str, Any], videos: VideoFeedCache | None = None) -> Path:
        """
        Write a draw document and register its date in the index.
        With a video cache, a missing videoCode is filled from the feed.
        """
        draw_date = doc["drawDate"]
        if videos is not None and not doc.get("videoCode"):
            doc = {**doc, "videoCode": videos.get(draw_date)}
        self.root.mkdir(parents=True, exist_ok=True)
        path = self.draw_path(draw_date)
        self._write_json(path, doc)
        self.update_index(draw_date)
        log.debug(f"Saved {self.game} draw {draw_date}")
        return path

    def missing_dates(self, start: str, end: str) -> list[str]:
        """The game's draw-day dates in range that have no file yet."""
        return [d for d in iter_draw_dates(start, end, self.config.draw_days) if not self.has_draw(d)]

    # ── Index ─────────────────────────────────────────────────────

    def read_index(self) -> dict[str, Any] | None:
        if not self.index_path.exists():
            return None
        with open(self.index_path, "r", encoding="utf-8") as f:
            return json.load(f)

    def update_index(self, draw_date: str) -> dict[str, Any]:
        index = self.read_index() or {"game": self.game, "draws": []}
        if draw_date not in index["draws"]:
            index["draws"].append(draw_date)
            index["draws"].sort(reverse=True)
        index["total"] = len(index["draws"])
        index["updatedAt"] = datetime.now(timezone.utc).isoformat()
        self.root.mkdir(parents=True, exist_ok=True)
        self._write_json(self.index_path, index)
        return index

    # ── Series ────────────────────────────────────────────────────

    def load_series(self) -> list[DrawRecord]:
        """
        Load every indexed draw with numbers, newest first.
        No index → empty list (nothing to analyze).
        """
        index = self.read_index()
        if index is None:
            log.warning(f"Index not found for {self.game}: {self.index_path}")
            return []

        records: list[DrawRecord] = []
        for draw_date in index.get("draws", []):
            path = self.draw_path(draw_date)
            if not path.exists():
                log.debug(f"Indexed draw missing on disk: {path}")
                continue
            with open(path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not raw.get("numbers"):
                log.debug(f"Skipping {draw_date}: no numbers")
                continue
            records.append(DrawRecord.from_dict(raw))

        return sort_newest_first(records)

    # ── Stats fragments ───────────────────────────────────────────

    def fragment_path(self, name: str) -> Path:
        return self.stats_dir / f"{name}.json"

    def write_fragment(self, name: str, payload: dict[str, Any]) -> Path:
        self.stats_dir.mkdir(parents=True, exist_ok=True)
        path = self.fragment_path(name)
        self._write_json(path, payload)
        return path

    def read_fragment(self, name: str) -> dict[str, Any]:
        with open(self.fragment_path(name), "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def _write_json(path: Path, payload: Any) -> None:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)
            f.write("\n")
