"""Command-line randomizer for loadouts and courses."""

from __future__ import annotations

import argparse
import random
import sys

from kartroulette import data, items, maps
from kartroulette.items import Statstick

NUM_MAPS = 96
TITLE = "Mario Kart 8 Deluxe Randomizer"
_MISSING = "error"


class MapRotation:
    """Walks through a shuffled course list, reshuffling once it is used up."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng
        self.maps = maps.get_map_list(rng)
        self.count = 0

    def current(self) -> str:
        """The course at the current position."""
        return self.maps[self.count % len(self.maps)]

    def advance(self) -> str:
        """Move to the next course and return it."""
        self.count += 1
        if self.count >= NUM_MAPS:
            self.maps = maps.get_map_list(self._rng)
            self.count = 0
        return self.current()


def _component_names(combo: Statstick) -> dict[str, str]:
    return {
        "character": combo.character() or _MISSING,
        "kart": combo.kart() or _MISSING,
        "tire": combo.tire() or _MISSING,
        "glider": combo.glider() or _MISSING,
    }


def asset_paths(combo: Statstick) -> dict[str, str]:
    """Image paths for a loadout's parts and stat bars."""
    names = _component_names(combo)
    paths = {
        "character": f"assets/characters/{names['character']}.webp",
        "kart": f"assets/karts/{names['kart']}.webp",
        "tire": f"assets/tires/{names['tire']}.webp",
        "glider": f"assets/gliders/{names['glider']}.webp",
    }
    for field in data.STAT_FIELDS:
        value = items.format_number(getattr(combo, field))
        paths[field] = f"assets/statBars/{value}.png"
    return paths


def render_combo(combo: Statstick) -> str:
    """A text view of a loadout: its parts and stat bars."""
    names = _component_names(combo)
    lines = [
        f"Character: {names['character']}",
        f"Kart: {names['kart']}",
        f"Tires: {names['tire']}",
        f"Glider: {names['glider']}",
        "",
    ]
    for field in data.STAT_FIELDS:
        value = getattr(combo, field)
        lines.append(f"{field.capitalize()}: {items.format_number(value)}")
        lines.append(items.generate_bar(value))
    return "\n".join(lines) + "\n"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="kartroulette", description=TITLE)
    parser.add_argument("--maps", type=int, default=1, help="number of courses to draw")
    parser.add_argument("--seed", type=int, default=None, help="seed for reproducible draws")
    args = parser.parse_args(argv)
    if args.maps < 0:
        parser.error("--maps must not be negative")

    rng = random.Random(args.seed)
    out = sys.stdout
    out.write(f"{TITLE}\n\n")
    out.write(render_combo(items.get_combo_from_csv(rng)))
    if args.maps:
        rotation = MapRotation(rng)
        out.write("\n")
        out.write(f"{rotation.current()}\n")
        for _ in range(args.maps - 1):
            out.write(f"{rotation.advance()}\n")
    return 0