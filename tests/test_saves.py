import pytest

from vtmsheet.saves import DEFAULT_SAVE_NAME, SaveStore, save_file_name


def test_blank_name_uses_default():
    assert save_file_name("") == "save.sav"
    assert save_file_name("   ") == DEFAULT_SAVE_NAME


def test_name_is_simplified():
    assert save_file_name("  my   char ") == "my char .sav"


def test_plain_name_gets_suffix():
    name = save_file_name("Vlad")
    assert name.endswith(".sav")
    assert name.startswith("Vlad")


def test_round_trip(tmp_path):
    store = SaveStore(tmp_path)
    data = {"Attributes": {"Strength": "2"}, "Indicators": {"hunger": "1"}}
    file_name = store.save(data, "Vlad")
    assert store.load(file_name) == data


def test_load_appends_suffix(tmp_path):
    store = SaveStore(tmp_path)
    data = {"Personal Data": {"Name": "Vlad"}}
    store.save(data, "Vlad")
    assert store.load("Vlad") == data


def test_names_lists_only_saves(tmp_path):
    store = SaveStore(tmp_path)
    store.save({}, "zeta")
    store.save({}, "alpha")
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    names = store.names()
    assert names == sorted(names)
    assert all(".sav" in name for name in names)
    assert len(names) == 2


def test_overwrite_keeps_one_entry(tmp_path):
    store = SaveStore(tmp_path)
    store.save({"a": "1"}, "same")
    store.save({"a": "2"}, "same")
    assert store.names() == [save_file_name("same")]
    assert store.load("same") == {"a": "2"}


def test_delete_removes_files(tmp_path):
    store = SaveStore(tmp_path)
    keep = store.save({}, "keep")
    drop = store.save({}, "drop")
    store.delete([drop, "missing.sav"])
    assert store.names() == [keep]


def test_invalid_content_loads_empty(tmp_path):
    store = SaveStore(tmp_path)
    (tmp_path / "broken.sav").write_text("not json", encoding="utf-8")
    (tmp_path / "list.sav").write_text("[1, 2]", encoding="utf-8")
    assert store.load("broken.sav") == {}
    assert store.load("list.sav") == {}


def test_missing_save_raises(tmp_path):
    store = SaveStore(tmp_path)
    with pytest.raises(FileNotFoundError):
        store.load("nothing")


def test_names_creates_directory(tmp_path):
    target = tmp_path / "saves"
    store = SaveStore(target)
    assert store.names() == []
    assert target.is_dir()