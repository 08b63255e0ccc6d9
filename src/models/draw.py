"""
src/models/draw.py
Normalised draw record shared by the storage layer and every analyzer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

# Persisted documents name the secondary ball per game.
SPECIAL_FIELDS = ("special", "megaBall", "powerBall")


@dataclass(frozen=True)
class DrawRecord:
    """One drawing: date, main numbers and the secondary ("special") ball."""

    draw_date: str
    numbers: tuple[int, ...]
    special: int | None = None
    game: str | None = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "DrawRecord":
        """
        Build from a persisted draw document (camelCase keys).
        The secondary ball is read from whichever of special/megaBall/powerBall is set.
        """
        special = None
        for key in SPECIAL_FIELDS:
            if raw.get(key) is not None:
                special = int(raw[key])
                break
        return cls(
            draw_date=raw["drawDate"],
            numbers=tuple(int(n) for n in raw.get("numbers") or ()),
            special=special,
            game=raw.get("game"),
        )

    def to_dict(self, special_field: str = "special") -> dict[str, Any]:
        doc: dict[str, Any] = {
            "drawDate": self.draw_date,
            "numbers": list(self.numbers),
            special_field: self.special,
        }
        if self.game:
            doc = {"game": self.game, **doc}
        return doc


def sort_newest_first(records: Iterable[DrawRecord]) -> list[DrawRecord]:
    """ISO dates sort lexically, so a reverse string sort puts index 0 = most recent."""
    return sorted(records, key=lambda r: r.draw_date, reverse=True)
