"""Combined stat totals for a character, kart, tires and glider."""

from __future__ import annotations

import random
from dataclasses import dataclass

from kartroulette import data

_BAR_WIDTH = 30
_U8_MAX = 255


def format_number(value: float) -> str:
    """Format a stat value without a trailing '.0'."""
    return format(value, "g")


@dataclass(frozen=True)
class Statstick:
    """A set of stats; the name holds one line per component."""

    name: str = ""
    speed: float = 0.0
    acceleration: float = 0.0
    weight: float = 0.0
    handling: float = 0.0
    traction: float = 0.0

    def _line(self, index: int) -> str | None:
        lines = self.name.splitlines()
        return lines[index] if index < len(lines) else None

    def character(self) -> str | None:
        return self._line(0)

    def kart(self) -> str | None:
        return self._line(1)

    def tire(self) -> str | None:
        return self._line(2)

    def glider(self) -> str | None:
        return self._line(3)

    def __add__(self, other: object) -> Statstick:
        if not isinstance(other, Statstick):
            return NotImplemented
        name = f"{self.name}\n{other.name}" if self.name else other.name
        return Statstick(
            name=name,
            speed=self.speed + other.speed,
            acceleration=self.acceleration + other.acceleration,
            weight=self.weight + other.weight,
            handling=self.handling + other.handling,
            traction=self.traction + other.traction,
        )

    def __str__(self) -> str:
        parts = [f"{self.name}\n\n"]
        for field in data.STAT_FIELDS:
            value = getattr(self, field)
            parts.append(f"{field.capitalize()}: {format_number(value)}\n{generate_bar(value)}\n")
        return "".join(parts)


def _saturating_u8(value: float) -> int:
    if value != value or value <= 0:
        return 0
    return min(int(value), _U8_MAX)


def generate_bar(num: float) -> str:
    """Draw a stat as a 31-character bar of quarter-point stars."""
    pounds = _saturating_u8(num * 4.0)
    cells = []
    for i in range(1, _BAR_WIDTH):
        if i % 5 == 0:
            cells.append("|")
        elif i <= pounds + i // 5:
            cells.append("*")
        else:
            cells.append(" ")
    return "[" + "".join(cells) + "]"


def pick_item_from_csv(csv_text: str, rng: random.Random | None = None) -> Statstick:
    """Pick one random row of a part table."""
    parts = data.parse_parts(csv_text)
    if not parts:
        raise ValueError("part table is empty")
    chooser = rng if rng is not None else random
    return Statstick(**chooser.choice(parts))


def get_combo_from_csv(rng: random.Random | None = None) -> Statstick:
    """Pick a random character, kart, tire and glider and sum their stats."""
    combo = Statstick()
    for table in (data.DRIVER_DATA, data.VEHICLE_DATA, data.TIRE_DATA, data.GLIDER_DATA):
        combo = combo + pick_item_from_csv(table, rng)
    return combo