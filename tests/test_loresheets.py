import pytest

from vtmsheet.loresheets import Entry, EntryList


def test_new_list_holds_one_empty_entry():
    entries = EntryList()
    assert len(entries) == 1
    assert entries.to_json() == {"": {"dots": "0", "content": ""}}


def test_add_appends_entries():
    entries = EntryList()
    added = entries.add()
    assert len(entries) == 2
    assert entries[1] is added


def test_remove_last_keeps_one_entry():
    entries = EntryList()
    entries.add()
    entries.remove_last()
    entries.remove_last()
    assert len(entries) == 1


def test_entry_dots_follow_track():
    entry = Entry(name="Cainite Heresy")
    entry.track.click(2)
    assert entry.dots == 3


def test_duplicate_names_get_running_numbers():
    entries = EntryList()
    for _ in range(2):
        entries.add()
    for entry in entries:
        entry.name = "Lore"
    data = entries.to_json()
    assert set(data) == {"Lore", "Lore1", "Lore2"}


def test_round_trip_preserves_entries():
    original = EntryList()
    original[0].name = "Alpha"
    original[0].track.click(1)
    original[0].content = "first"
    second = original.add()
    second.name = "Beta"
    second.track.click(4)
    second.content = "second"

    restored = EntryList()
    restored.from_json(original.to_json())
    assert restored.to_json() == original.to_json()
    assert len(restored) == 2


def test_from_json_uses_sorted_key_order():
    entries = EntryList()
    entries.from_json(
        {
            "Zeta": {"dots": "1", "content": "z"},
            "Alpha": {"dots": "2", "content": "a"},
        }
    )
    assert [entry.name for entry in entries] == ["Alpha", "Zeta"]
    assert entries[0].dots == 2
    assert entries[1].content == "z"


def test_from_json_ignores_non_string_values():
    entries = EntryList()
    entries.from_json({"Name": {"dots": 3, "content": 7}})
    assert entries[0].name == "Name"
    assert entries[0].dots == 0
    assert entries[0].content == ""


def test_from_json_zero_dots_leaves_track_empty():
    entries = EntryList()
    entries.from_json({"Name": {"dots": "0"}})
    assert entries[0].dots == 0


def test_from_json_rejects_too_many_dots():
    entries = EntryList()
    with pytest.raises(IndexError):
        entries.from_json({"Name": {"dots": "9"}})


def test_clear_resets_to_single_empty_entry():
    entries = EntryList()
    entries.from_json(
        {
            "A": {"dots": "2", "content": "x"},
            "B": {"dots": "3", "content": "y"},
            "C": {"dots": "1", "content": "z"},
        }
    )
    entries.clear()
    assert len(entries) == 1
    assert entries.to_json() == EntryList().to_json()