"""
scripts/backfill_draws.py
Import draw documents from a JSONL export into the per-game draw files.
Only draw days that have no file yet are written; each saved draw gets its
video id from the game's feed when one is configured.

    python scripts/backfill_draws.py powerball draws.jsonl --days 365
"""
from __future__ import annotations

import argparse
import json
import sys
from datetime import date, timedelta
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.crawlers.video_feed import VideoFeedCache
from src.models.draw import SPECIAL_FIELDS, DrawRecord
from src.storage.draw_store import DrawStore
from src.utils.config import GAMES, get_game_config
from src.utils.logger import get_logger

log = get_logger("backfill")


def read_jsonl(path: str | Path) -> dict[str, dict]:
    """{drawDate: raw document}; blank lines and rows without numbers are skipped."""
    docs: dict[str, dict] = {}
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            if not line.strip():
                continue
            raw = json.loads(line)
            if raw.get("drawDate") and raw.get("numbers"):
                docs[raw["drawDate"]] = raw
    return docs


def run_backfill(
    store: DrawStore,
    docs: dict[str, dict],
    from_date: str,
    to_date: str,
    videos: VideoFeedCache | None = None,
    dry_run: bool = False,
) -> dict:
    config = store.config
    missing = store.missing_dates(from_date, to_date)
    log.info(f"[BACKFILL] {config.game}: {from_date} → {to_date} | missing={len(missing)} | dry_run={dry_run}")

    saved = 0
    not_found: list[str] = []
    for draw_date in missing:
        raw = docs.get(draw_date)
        if raw is None:
            not_found.append(draw_date)
            continue

        record = DrawRecord.from_dict({**raw, "game": config.game})
        extras = {k: v for k, v in raw.items() if k not in SPECIAL_FIELDS}
        doc = {**extras, **record.to_dict(config.special_field)}

        if dry_run:
            log.info(f"[DRY RUN] Would save: {doc}")
        else:
            store.save_draw(doc, videos=videos)
        saved += 1

    if not_found:
        log.warning(f"{len(not_found)} draw days have no document in the export (holidays or gaps)")

    log.info(f"[DONE] {config.game}: saved={saved}, not_found={len(not_found)}")
    return {
        "game": config.game,
        "missing": len(missing),
        "saved": saved,
        "not_found": len(not_found),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Backfill draw files from a JSONL export")
    parser.add_argument("game", choices=GAMES)
    parser.add_argument("source", help="JSONL file, one draw document per line")
    parser.add_argument("--days", type=int, default=1095, help="Days back from today (default: 3 years)")
    parser.add_argument("--from-date", default=None, help="Override from_date (YYYY-MM-DD)")
    parser.add_argument("--to-date", default=None, help="Override to_date (YYYY-MM-DD)")
    parser.add_argument("--data-dir", default=None, help="Override LOTTO_DATA_DIR")
    parser.add_argument("--no-video", action="store_true", help="Skip the video feed lookup")
    parser.add_argument("--dry-run", action="store_true", help="Simulate only, no file writes")
    args = parser.parse_args(argv)

    # Yesterday: today's draw may not be complete yet.
    to_dt = date.today() - timedelta(days=1)
    from_dt = to_dt - timedelta(days=args.days)
    from_date = args.from_date or from_dt.isoformat()
    to_date = args.to_date or to_dt.isoformat()

    config = get_game_config(args.game)
    store = DrawStore(args.game, data_dir=args.data_dir, config=config)
    docs = read_jsonl(args.source)

    videos = None if args.no_video else VideoFeedCache.for_game(config)
    try:
        result = run_backfill(store, docs, from_date, to_date, videos=videos, dry_run=args.dry_run)
    finally:
        if videos is not None:
            videos.close()

    print("\n" + "=" * 60)
    print("BACKFILL SUMMARY")
    print("=" * 60)
    print(f"  {result['game']:15s} | missing={result['missing']:4d} | saved={result['saved']:4d} | not_found={result['not_found']:4d}")
    print("=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
