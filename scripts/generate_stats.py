"""
scripts/generate_stats.py
Rebuild the statistics fragments for one game, or for every game.

    python scripts/generate_stats.py              # all games
    python scripts/generate_stats.py powerball
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rich.console import Console
from rich.table import Table

from src.pipeline.stats_generator import generate_stats
from src.storage.draw_store import DrawStore
from src.utils.config import GAMES, load_all_game_configs
from src.utils.logger import get_logger

log = get_logger("generate_stats")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lottery statistics generator")
    parser.add_argument("game", nargs="?", choices=GAMES, default=None, help="Game id (default: all)")
    parser.add_argument("--data-dir", default=None, help="Override LOTTO_DATA_DIR")
    args = parser.parse_args(argv)

    configs = load_all_game_configs()
    targets = [args.game] if args.game else list(configs)

    results: dict[str, dict[str, Path]] = {}
    for game in targets:
        store = DrawStore(game, data_dir=args.data_dir, config=configs[game])
        results[game] = generate_stats(game, store=store)

    table = Table(title="STATS SUMMARY")
    table.add_column("Game")
    table.add_column("Fragments", justify="right")
    table.add_column("Output")
    for game, written in results.items():
        out = str(next(iter(written.values())).parent) if written else "skipped (no data)"
        table.add_row(configs[game].label, str(len(written)), out)
    Console().print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())
