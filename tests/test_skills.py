import pytest

from vtmsheet.skills import MENTAL_SKILLS, PHYSICAL_SKILLS, SOCIAL_SKILLS, Skills


def test_names_keep_given_order():
    assert Skills(PHYSICAL_SKILLS).names() == list(PHYSICAL_SKILLS)
    assert PHYSICAL_SKILLS[0] == "Athletics"
    assert "Animal Ken" in SOCIAL_SKILLS


def test_fresh_group_writes_empty_details():
    assert Skills(MENTAL_SKILLS).to_json() == {
        name: {"dots": "0", "specializations": ""} for name in MENTAL_SKILLS
    }


def test_round_trip():
    data = {
        name: {"dots": str(i % 5 + 1), "specializations": f"spec {i}"}
        for i, name in enumerate(SOCIAL_SKILLS)
    }
    skills = Skills(SOCIAL_SKILLS)
    skills.from_json(data)
    assert skills.to_json() == data
    again = Skills(SOCIAL_SKILLS)
    again.from_json(skills.to_json())
    assert again.to_json() == data


def test_dots_set_track():
    skills = Skills(PHYSICAL_SKILLS)
    skills.from_json({"Brawl": {"dots": "3"}})
    assert skills["Brawl"].dots == 3
    assert skills["Brawl"].specialization == ""


def test_non_string_values_ignored():
    skills = Skills(PHYSICAL_SKILLS)
    skills.from_json({"Melee": {"dots": 4, "specializations": ["Knives"]}})
    assert skills["Melee"].dots == 0
    assert skills["Melee"].specialization == ""


def test_non_object_entry_ignored():
    skills = Skills(PHYSICAL_SKILLS)
    skills.from_json({"Drive": "3"})
    assert skills["Drive"].dots == 0


def test_unknown_skill_ignored():
    skills = Skills(PHYSICAL_SKILLS)
    skills.from_json({"Juggling": {"dots": "2", "specializations": "Clubs"}})
    assert skills.to_json() == Skills(PHYSICAL_SKILLS).to_json()


def test_rating_out_of_range_raises():
    with pytest.raises(IndexError):
        Skills(PHYSICAL_SKILLS).from_json({"Stealth": {"dots": "6"}})
    with pytest.raises(IndexError):
        Skills(PHYSICAL_SKILLS).from_json({"Stealth": {"dots": "-1"}})


def test_clear_resets_dots_and_specializations():
    skills = Skills(MENTAL_SKILLS)
    skills.from_json({"Occult": {"dots": "5", "specializations": "Ghosts"}})
    skills.clear()
    assert skills["Occult"].dots == 0
    assert skills["Occult"].specialization == ""