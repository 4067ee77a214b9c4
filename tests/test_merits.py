from vtmsheet.merits import MeritsAndFlaws


def _filled() -> MeritsAndFlaws:
    sheet = MeritsAndFlaws()
    sheet.merits[0].name = "Linguistics"
    sheet.merits[0].track.click(1)
    sheet.merits[0].content = "Speaks French"
    second = sheet.merits.add()
    second.name = "Resources"
    second.track.click(2)
    sheet.flaws[0].name = "Enemy"
    sheet.flaws[0].track.click(0)
    sheet.flaws[0].content = "An old rival"
    return sheet


def test_to_json_layout():
    data = _filled().to_json()
    assert data["Merits"]["Linguistics"] == {"dots": "2", "content": "Speaks French"}
    assert data["Merits"]["Resources"] == {"dots": "3", "content": ""}
    assert data["Flaws"] == {"Enemy": {"dots": "1", "content": "An old rival"}}


def test_round_trip():
    original = _filled()
    restored = MeritsAndFlaws()
    restored.from_json(original.to_json())
    assert restored.to_json() == original.to_json()
    assert len(restored.merits) == 2
    assert len(restored.flaws) == 1


def test_repeated_names_share_one_counter():
    sheet = MeritsAndFlaws()
    sheet.merits[0].name = "Ally"
    sheet.merits.add().name = "Ally"
    sheet.flaws[0].name = "Debt"
    sheet.flaws.add().name = "Debt"
    data = sheet.to_json()
    assert set(data["Merits"]) == {"Ally", "Ally1"}
    assert set(data["Flaws"]) == {"Debt", "Debt2"}


def test_from_json_ignores_non_object_sections():
    sheet = MeritsAndFlaws()
    sheet.from_json({"Merits": "nope", "Flaws": ["x"]})
    assert sheet.to_json() == {
        "Merits": {"": {"dots": "0", "content": ""}},
        "Flaws": {"": {"dots": "0", "content": ""}},
    }


def test_clear_leaves_one_blank_entry_each():
    sheet = _filled()
    sheet.clear()
    assert len(sheet.merits) == 1
    assert len(sheet.flaws) == 1
    assert sheet.merits[0].dots == 0
    assert sheet.flaws[0].name == ""
    assert sheet.flaws[0].content == ""