"""Built-in tables of drivers, vehicle parts and courses."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable

STAT_FIELDS = ("speed", "acceleration", "weight", "handling", "traction")

# Drivers sharing a stat class, listed lightest to heaviest.
_DRIVER_CLASSES = (
    ((2.5, 4, 2, 5, 4.25), ("Baby Peach", "Baby Daisy")),
    ((2.5, 4.25, 2, 4.75, 3.75), ("Baby Rosalina", "Lemmy")),
    ((2.75, 4.25, 2.25, 4.5, 4), ("Baby Mario", "Baby Luigi", "Dry Bones")),
    ((3, 4, 2.5, 4.5, 4.25), ("Koopa Troopa", "Lakitu", "Bowser Jr.")),
    ((3, 4.25, 2.5, 4.25, 3.5), ("Toadette", "Wendy", "Isabelle")),
    ((3.25, 4, 2.75, 4.25, 4), ("Toad", "Shy Guy", "Larry")),
    (
        (3.5, 4, 2.75, 4, 3.75),
        ("Cat Peach", "Inkling Girl", "Villager Girl", "Diddy Kong"),
    ),
    (
        (3.75, 3.75, 3, 3.75, 3.75),
        ("Peach", "Daisy", "Yoshi", "Birdo", "Peachette"),
    ),
    ((3.75, 3.75, 3.25, 3.75, 3.25), ("Tanooki Mario", "Inkling Boy", "Villager Boy")),
    ((4, 3.5, 3.5, 3.5, 3.5), ("Mario", "Ludwig")),
    ((4, 3.5, 3.5, 3.75, 3.25), ("Luigi", "Iggy", "Kamek")),
    ((4.25, 3.25, 3.75, 3.25, 3.75), ("Rosalina", "King Boo", "Link", "Pauline")),
    ((4.25, 3.25, 4.5, 3.25, 3.25), ("Metal Mario", "Pink Gold Peach", "Petey Pirahna")),
    ((4.5, 3.25, 4, 3, 3), ("Donkey Kong", "Waluigi", "Roy", "Wiggler")),
    ((4.75, 3, 4.25, 2.75, 3.25), ("Wario", "Dry Bowser", "Funky Kong")),
    ((4.75, 3, 4.5, 2.5, 3), ("Bowser", "Morton")),
)

_VEHICLES = (
    ("Standard Kart", 0, 0, 0, 0, 0),
    ("Pipe Frame", -0.25, 0.5, -0.25, 0.5, 0.25),
    ("Mach 8", 0, -0.25, 0.25, -0.25, 0.25),
    ("Steel Driver", 0.25, -0.75, 0.5, -0.5, 0),
    ("Cat Cruiser", -0.25, 0.25, 0, 0.25, 0),
    ("Circuit Special", 0.5, -0.75, 0.25, -0.5, -0.5),
    ("Tri-Speeder", 0.25, -0.75, 0.5, -0.5, 0),
    ("Badwagon", 0.5, -1, 0.5, -0.75, 0.5),
    ("Prancer", 0.25, -0.5, -0.25, 0, -0.25),
    ("Biddybuggy", -0.75, 0.75, -0.5, 0.5, 0.25),
    ("Landship", -0.25, 0.5, -0.5, 0.25, 0.75),
    ("Sneeker", 0.25, -0.5, 0, 0, -0.75),
    ("Sports Coupé", 0, -0.25, 0.25, -0.25, 0.25),
    ("Gold Standard", 0.25, -0.5, 0, 0, -0.75),
    ("GLA", 0.5, -1, 0.5, -0.75, 0.5),
    ("W 25 Silver Arrow", -0.25, 0.25, -0.25, 0.25, 0.5),
    ("300 SL Roadster", 0, 0, 0, 0, 0),
    ("Blue Falcon", 0.25, -0.25, -0.5, -0.25, 0),
    ("Tanooki Kart", 0, -0.5, 0.25, 0.25, 1),
    ("B Dasher", 0.5, -0.75, 0.25, -0.5, -0.5),
    ("Streetle", -0.25, 0.5, -0.5, 0.25, 0.75),
    ("P-Wing", 0.5, -0.75, 0.25, -0.5, -0.5),
    ("Koopa Clown", 0, -0.5, 0.25, 0.25, 1),
    ("Standard Bike", -0.25, 0.25, -0.25, 0.25, 0.5),
    ("Comet+", -0.25, 0.25, 0, 0.25, 0),
    ("Sport Bike+", 0.25, -0.5, -0.25, 0, -0.25),
    ("The Duke", 0, 0, 0, 0, 0),
    ("Flame Rider", -0.25, 0.25, -0.25, 0.25, 0.5),
    ("Varmint", -0.25, 0.5, -0.25, 0.5, 0.25),
    ("Mr. Scooty", -0.75, 0.75, -0.5, 0.5, 0.25),
    ("Jet Bike+", 0.25, -0.5, -0.25, 0, -0.25),
    ("Yoshi Bike+", -0.25, 0.25, 0, 0.25, 0),
    ("Master Cycle+", 0.25, -0.5, 0, 0, -0.75),
    ("City Tripper", -0.25, 0.5, -0.25, 0.5, 0.25),
    ("Standard ATV", 0.5, -1, 0.5, -0.75, 0.5),
    ("Wild Wiggler", -0.25, 0.25, -0.25, 0.25, 0.5),
    ("Teddy Buggy", -0.25, 0.25, 0, 0.25, 0),
    ("Bone Rattler", 0.25, -0.75, 0.5, -0.5, 0),
    ("Splat Buggy", 0.25, -0.25, -0.5, -0.25, 0),
    ("Inkstriker", 0, -0.25, 0.25, -0.25, 0.25),
    ("Master Cycle Zero", 0, -0.5, 0.25, 0.25, 1),
)

_TIRES = (
    ("Standard", 0, 0, 0, 0, 0),
    ("Monster", 0.25, -0.5, 0.5, -0.75, 0.5),
    ("Roller", -0.5, 0.5, -0.5, 0.25, -0.25),
    ("Slim", 0.25, -0.5, 0, 0.25, -1),
    ("Slick", 0.5, -0.75, 0.25, -0.25, -1.25),
    ("Metal", 0.5, -1, 0.5, -0.25, -0.75),
    ("Button", -0.25, 0.25, -0.5, 0, -0.5),
    ("Off-Road", 0.25, -0.25, 0.25, -0.5, 0.25),
    ("Sponge", -0.25, 0, -0.25, -0.25, 0.25),
    ("Wood", 0.25, -0.5, 0, 0.25, -1),
    ("Cushion", -0.25, 0, -0.25, -0.25, 0.25),
    ("Blue Standard", 0, 0, 0, 0, 0),
    ("Hot Monster", 0.25, -0.5, 0.5, -0.75, 0.5),
    ("Azure Roller", -0.5, 0.5, -0.5, 0.25, -0.25),
    ("Crimson Slim", 0.25, -0.5, 0, 0.25, -1),
    ("Cyber Slick", 0.5, -0.75, 0.25, -0.25, -1.25),
    ("Retro Off-Road", 0.25, -0.25, 0.25, -0.5, 0.25),
    ("Gold Tires", 0.5, -1, 0.5, -0.25, -0.75),
    ("GLA Tires", 0, 0, 0, 0, 0),
    ("Triforce Tires", 0.25, -0.25, 0.25, -0.5, 0.25),
    ("Leaf Tires", -0.25, 0.25, -0.5, 0, -0.5),
    ("Ancient Tires", 0.25, -0.5, 0.5, -0.75, 0.5),
)

_GLIDERS = (
    ("Super Glider", 0, 0, 0, 0, 0),
    ("Cloud Glider", -0.25, 0.25, -0.25, 0, 0),
    ("Wario Wing", 0, 0, 0.25, 0, -0.25),
    ("Waddle Wing", 0, 0, 0, 0, 0),
    ("Peach Parasol", -0.25, 0.25, 0, 0, -0.25),
    ("Parachute", -0.25, 0.25, -0.25, 0, 0),
    ("Parafoil", -0.25, 0.25, 0, 0, -0.25),
    ("Flower Glider", -0.25, 0.25, -0.25, 0, 0),
    ("Bowser Kite", -0.25, 0.25, 0, 0, -0.25),
    ("Plane Glider", 0, 0, 0.25, 0, -0.25),
    ("MKTV Parafoil", -0.25, 0.25, 0, 0, -0.25),
    ("Gold Glider", 0, 0, 0.25, 0, -0.25),
    ("Hylian Kite", 0, 0, 0, 0, 0),
    ("Paper Glider", -0.25, 0.25, -0.25, 0, 0),
    ("Paraglider", 0, 0, 0.25, 0, -0.25),
)

_COURSES = (
    "Mario Kart Stadium", "Water Park", "Sweet Sweet Canyon", "Thwomp Ruins",
    "Mario Circuit", "Toad Harbor", "Twisted Mansion", "Shy Guy Falls",
    "Sunshine Airport", "Dolphin Shoals", "Electrodome", "Mount Wario",
    "Cloudtop Cruise", "Bone-Dry Dunes", "Bowser's Castle", "Rainbow Road",
    "Yoshi Circuit (GCN)", "Excitebike Arena", "Dragon Driftway", "Mute City",
    "Baby Park (GCN)", "Cheese Land (GBA)", "Wild Woods", "Animal Crossing",
    "Moo Moo Meadows (Wii)", "Mario Circuit (GBA)", "Cheep Cheep Beach (DS)",
    "Toad's Turnpike (N64)", "Dry Dry Desert (GCN)", "Donut Plains 3 (SNES)",
    "Royal Raceway (N64)", "DK Jungle (3DS)", "Wario Stadium (DS)",
    "Sherbet Land (GCN)", "Music Park (3DS)", "Yoshi Valley (N64)",
    "Tick-Tock Clock (DS)", "Piranha Plant Slide (3DS)", "Grumble Volcano (Wii)",
    "Rainbow Road (N64)", "Wario's Gold Mine (Wii)", "Rainbow Road (SNES)",
    "Ice Ice Outpost", "Hyrule Circuit", "Neo Bowser City (3DS)",
    "Ribbon Road (GBA)", "Super Bell Subway", "Big Blue",
    "Paris Promenade (Tour)", "Toad Circuit (3DS)", "Choco Mountain (N64)",
    "Coconut Mall (Wii)", "Tokyo Blur (Tour)", "Shroom Ridge (DS)",
    "Sky Garden (GBA)", "Ninja Hideaway", "New York Minute (Tour)",
    "Mario Circuit 3 (SNES)", "Kalimari Desert (N64)", "Waluigi Pinball (DS)",
    "Sydney Sprint (Tour)", "Snow Land (GBA)", "Mushroom Gorge (Wii)",
    "Sky-High Sundae", "London Loop (Tour)", "Boo Lake (GBA)",
    "Rock Rock Mountain (3DS)", "Maple Treeway (Wii)", "Berlin Byways (Tour)",
    "Peach Gardens (DS)", "Merry Mountain", "Rainbow Road (3DS)",
    "Amsterdam Drift (Tour)", "Riverside Park (GBA)", "DK Summit (Wii)",
    "Yoshi's Island", "Bangkok Rush (Tour)", "Mario Circuit (DS)",
    "Waluigi Stadium (GCN)", "Singapore Speedway (Tour)", "Athens Dash (Tour)",
    "Daisy Cruiser (GCN)", "Moonview Highway (Wii)", "Squeaky Clean Sprint",
    "Los Angeles Laps (Tour)", "Sunset Wilds (GBA)", "Koopa Cape (Wii)",
    "Vancouver Velocity (Tour)", "Rome Avanti (Tour)", "DK Mountain (GCN)",
    "Daisy Circuit (Wii)", "Pirahna Plant Cove", "Madrid Drive (Tour)",
    "Rosalina's Ice World (3DS)", "Bowser Castle 3 (SNES)", "Rainbow Road (Wii)",
)


def _part_table(rows: Iterable[tuple]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(("name", *STAT_FIELDS))
    for name, *stats in rows:
        writer.writerow((name, *(format(value, "g") for value in stats)))
    return buffer.getvalue().rstrip("\n")


def _name_table(names: Iterable[str]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(("name",))
    writer.writerows((name,) for name in names)
    return buffer.getvalue().rstrip("\n")


DRIVER_DATA = _part_table(
    (name, *stats) for stats, names in _DRIVER_CLASSES for name in names
)
VEHICLE_DATA = _part_table(_VEHICLES)
TIRE_DATA = _part_table(_TIRES)
GLIDER_DATA = _part_table(_GLIDERS)
MAPS = _name_table(_COURSES)


def _rows(text: str) -> csv.DictReader:
    return csv.DictReader(io.StringIO(text.strip()))


def parse_parts(text: str) -> list[dict[str, object]]:
    """Parse a part table into dicts with a name and float stats.

    Raises ValueError if a row is missing a column or holds a bad number.
    """
    parts = []
    for row in _rows(text):
        try:
            part: dict[str, object] = {"name": row["name"]}
            for field in STAT_FIELDS:
                part[field] = float(row[field])
        except (KeyError, TypeError) as exc:
            raise ValueError(f"malformed part row: {row!r}") from exc
        parts.append(part)
    return parts


def parse_names(text: str) -> list[str]:
    """Parse a one-column table of names, skipping the header."""
    names = []
    for row in _rows(text):
        name = row.get("name")
        if name is None:
            raise ValueError(f"malformed name row: {row!r}")
        names.append(name)
    return names