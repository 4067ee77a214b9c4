import pytest

from vtmsheet.attributes import ATTRIBUTE_NAMES, Attributes


def test_names_in_sheet_order():
    assert Attributes().names() == [
        "Strength",
        "Dexterity",
        "Stamina",
        "Charisma",
        "Manipulation",
        "Composure",
        "Intelligence",
        "Wits",
        "Resolve",
    ]


def test_fresh_sheet_writes_zeroes():
    assert Attributes().to_json() == {name: "0" for name in ATTRIBUTE_NAMES}


def test_round_trip():
    data = {name: str(i % 5 + 1) for i, name in enumerate(ATTRIBUTE_NAMES)}
    attrs = Attributes()
    attrs.from_json(data)
    assert attrs.to_json() == data
    again = Attributes()
    again.from_json(attrs.to_json())
    assert again.to_json() == data


def test_health_base_follows_stamina():
    attrs = Attributes()
    baseline = attrs.health_base()
    attrs.from_json({"Stamina": "2"})
    assert attrs.health_base() == baseline + 2
    assert baseline == 3


def test_willpower_base_sums_composure_and_resolve():
    attrs = Attributes()
    attrs.from_json({"Composure": "3", "Resolve": "4"})
    assert attrs.willpower_base() == attrs["Composure"].value + attrs["Resolve"].value
    assert attrs["Composure"].value == 3
    assert attrs["Resolve"].value == 4


def test_zero_and_unreadable_values_leave_track_empty():
    attrs = Attributes()
    attrs.from_json({"Strength": "0", "Wits": "abc", "Charisma": 3})
    assert attrs["Strength"].value == 0
    assert attrs["Wits"].value == 0
    assert attrs["Charisma"].value == 0


def test_unknown_keys_ignored():
    attrs = Attributes()
    attrs.from_json({"Luck": "4"})
    assert attrs.to_json() == {name: "0" for name in ATTRIBUTE_NAMES}


def test_rating_above_track_raises():
    with pytest.raises(IndexError):
        Attributes().from_json({"Strength": "6"})


def test_clear_empties_everything():
    attrs = Attributes()
    attrs.from_json({name: "5" for name in ATTRIBUTE_NAMES})
    attrs.clear()
    assert attrs.to_json() == {name: "0" for name in ATTRIBUTE_NAMES}