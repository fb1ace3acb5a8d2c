"""Shuffled course lists."""

from __future__ import annotations

import random

from kartroulette import data


def get_map_list(rng: random.Random | None = None) -> list[str]:
    """Return every course in a random order."""
    maps = data.parse_names(data.MAPS)
    shuffle_maps(maps, rng)
    return maps


def shuffle_maps(maps: list[str], rng: random.Random | None = None) -> None:
    """Shuffle a course list in place."""
    (rng if rng is not None else random).shuffle(maps)