import pytest

from vtmsheet.personal import (
    BLOOD_POTENCY_KEY,
    BLOOD_POTENCY_MAX,
    PersonalData,
    blood_potency_stats,
    clan_background,
)


def test_zero_potency_has_no_bane():
    stats = blood_potency_stats(0)
    assert stats.bane_severity == 0
    assert stats.rouse_reroll_level == 0
    assert stats.blood_surge_text.endswith(" die")


@pytest.mark.parametrize("level", range(1, BLOOD_POTENCY_MAX + 1))
def test_bane_severity_matches_blood_surge(level):
    stats = blood_potency_stats(level)
    assert stats.bane_severity == stats.blood_surge
    assert stats.rouse_reroll_level == stats.blood_surge - 1


@pytest.mark.parametrize("level", range(0, BLOOD_POTENCY_MAX + 1))
def test_power_bonus_is_half(level):
    stats = blood_potency_stats(level)
    assert stats.power_bonus * 2 in (level, level - 1)
    assert stats.mend_text.endswith(" superficial damage")


def test_rouse_text_mentions_lower_above_two():
    assert blood_potency_stats(3).rouse_reroll_text.endswith(" and Lower")
    assert not blood_potency_stats(2).rouse_reroll_text.endswith(" and Lower")
    assert blood_potency_stats(2).rouse_reroll_text.startswith("Level ")


@pytest.mark.parametrize("level", [-1, BLOOD_POTENCY_MAX + 1])
def test_out_of_range_potency_raises(level):
    with pytest.raises(ValueError):
        blood_potency_stats(level)


def test_clan_background_found():
    assert clan_background("Brujah antitribu") == (
        "images/background-image/brujah_background_transparent.png"
    )


def test_clan_background_missing():
    assert clan_background("Nobody in particular") is None


def test_round_trip():
    sheet = PersonalData()
    sheet["Name"] = "Lucita"
    sheet["Clan"] = "Lasombra"
    sheet.blood_potency_track.click(2)
    sheet.current_experience = 4
    sheet.total_experience = 12
    data = sheet.to_json()

    restored = PersonalData()
    restored.from_json(data)
    assert restored.to_json() == data
    assert restored.blood_potency == sheet.blood_potency
    assert restored.background is not None and "lasombra" in restored.background


def test_blood_potency_stored_as_string():
    sheet = PersonalData()
    sheet.blood_potency_track.click(1)
    assert sheet.to_json()[BLOOD_POTENCY_KEY] == str(sheet.blood_potency)


def test_clear_resets_everything():
    sheet = PersonalData()
    sheet["Sire"] = "Someone"
    sheet.blood_potency_track.click(4)
    sheet.total_experience = 7
    sheet.clear()
    assert sheet.to_json() == PersonalData().to_json()


def test_unknown_field_raises():
    with pytest.raises(KeyError):
        PersonalData()["Nickname"] = "x"


def test_non_string_values_are_ignored():
    sheet = PersonalData()
    sheet.from_json({"Name": 5, BLOOD_POTENCY_KEY: 3})
    assert sheet["Name"] == ""
    assert sheet.blood_potency == 0