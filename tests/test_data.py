import pytest

from kartroulette.data import (
    DRIVER_DATA,
    GLIDER_DATA,
    MAPS,
    STAT_FIELDS,
    TIRE_DATA,
    VEHICLE_DATA,
    parse_names,
    parse_parts,
)


def test_first_driver_parsed():
    drivers = parse_parts(DRIVER_DATA)
    assert drivers[0] == {
        "name": "Baby Peach",
        "speed": 2.5,
        "acceleration": 4.0,
        "weight": 2.0,
        "handling": 5.0,
        "traction": 4.25,
    }
    assert drivers[-1]["name"] == "Morton"


@pytest.mark.parametrize("table", [DRIVER_DATA, VEHICLE_DATA, TIRE_DATA, GLIDER_DATA])
def test_every_row_has_all_stats(table):
    parts = parse_parts(table)
    assert parts
    for part in parts:
        assert set(part) == {"name", *STAT_FIELDS}
        assert all(isinstance(part[f], float) for f in STAT_FIELDS)


def test_non_ascii_name_survives():
    names = [p["name"] for p in parse_parts(VEHICLE_DATA)]
    assert "Sports Coupé" in names


def test_custom_table():
    text = "\nname,speed,acceleration,weight,handling,traction\nFoo,1,-0.5,0,2,0.25\n"
    assert parse_parts(text) == [
        {"name": "Foo", "speed": 1.0, "acceleration": -0.5, "weight": 0.0,
         "handling": 2.0, "traction": 0.25}
    ]


def test_bad_number_raises():
    text = "name,speed,acceleration,weight,handling,traction\nFoo,x,0,0,0,0"
    with pytest.raises(ValueError):
        parse_parts(text)


def test_missing_column_raises():
    text = "name,speed\nFoo,1"
    with pytest.raises(ValueError):
        parse_parts(text)


def test_parse_names_maps():
    names = parse_names(MAPS)
    assert names[0] == "Mario Kart Stadium"
    assert names[-1] == "Rainbow Road (Wii)"
    assert "name" not in names
    assert len(set(names)) == len(names)


def test_parse_names_custom():
    assert parse_names("\nname\nA\nB\n") == ["A", "B"]