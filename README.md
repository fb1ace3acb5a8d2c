# kartroulette

Rolls a random loadout for a kart race: a driver, a kart body, a set of tires
and a glider. It adds up their stats and draws a text bar for each one. It
also deals out a shuffled rotation of all 96 courses. No course comes round
twice until the whole list has been played. Then the list is shuffled again.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
kartroulette
```

This prints a title and then a fresh loadout. The loadout lists the character,
kart, tires and glider, followed by the combined speed, acceleration, weight,
handling and traction, each with a text bar. After that comes one course from
a shuffled rotation.

Options:

- `--maps N` prints the next `N` courses from the rotation instead of one.
  The default is 1. `0` prints no courses, and a negative number is an error.
- `--seed S` seeds the random generator, so the same seed gives the same
  loadout and courses.

```
kartroulette --maps 4 --seed 7
```

## Library use

```python
import random

from kartroulette.items import get_combo_from_csv
from kartroulette.app import MapRotation, asset_paths, render_combo

rng = random.Random(7)
combo = get_combo_from_csv(rng)
print(combo.character(), combo.kart(), combo.tire(), combo.glider())
print(render_combo(combo))
print(asset_paths(combo)["kart"])

rotation = MapRotation(rng)
print(rotation.current())
print(rotation.advance())
```

- `kartroulette.items.Statstick` is a frozen dataclass that holds the stats
  of one part or of a whole loadout. Adding two of them with `+` sums the
  stats and joins the part names with a newline. `character()`, `kart()`,
  `tire()` and `glider()` return the first to fourth name line, or `None`
  if there is no such line. `str()` gives the names followed by every stat
  and its bar.
- `kartroulette.items.generate_bar(num)` draws the 31-character bar for one
  stat value, with one star per quarter point and a `|` divider every five
  cells.
- `kartroulette.items.pick_item_from_csv(csv_text, rng)` picks one random row
  of a part table. `get_combo_from_csv(rng)` picks one driver, vehicle, tire
  and glider and sums them.
- `kartroulette.data` holds the built-in tables (`DRIVER_DATA`,
  `VEHICLE_DATA`, `TIRE_DATA`, `GLIDER_DATA`, `MAPS`) as CSV text.
  `parse_parts(text)` and `parse_names(text)` read tables of that form and
  raise `ValueError` on a malformed row.
- `kartroulette.maps.get_map_list(rng)` returns every course in shuffled
  order. `shuffle_maps(maps, rng)` shuffles a list in place.
- `kartroulette.app.MapRotation` walks through a shuffled course list.
  `current()` returns the course at the current position. `advance()` moves
  on and returns the next course, and reshuffles once all 96 have been dealt.
- `kartroulette.app.asset_paths(combo)` gives the image file paths that go
  with a loadout: one for each part, plus `assets/statBars/<value>.png` for
  each stat. `render_combo(combo)` gives the text view that the command prints.

Every function that rolls dice takes an optional `random.Random`. Pass one
with a fixed seed and you get the same results each time. Leave it out and
the module-level `random` generator is used.

## What it does not do

The package works only in the terminal and has no graphical or web
interface. It does not include any images. `asset_paths` only builds the
file names, and showing those images is left to the caller.