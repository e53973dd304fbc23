import json

import pytest

from note_editor.storage.notes_store import NotesStore, _note_path


def test_create_and_find(tmp_path):
    store = NotesStore(tmp_path)
    created = store.create_note(owner_username="kody", title="T", content="C", note_id="n1")

    found = store.find_note_by_id("n1")
    assert found == created
    assert found.version == 1
    assert (tmp_path / "notes" / "n1.json").exists()


def test_find_missing_returns_none(tmp_path):
    assert NotesStore(tmp_path).find_note_by_id("nope") is None


def test_update_bumps_version_and_keeps_owner(tmp_path):
    store = NotesStore(tmp_path)
    created = store.create_note(owner_username="kody", title="T", content="C", note_id="n1")

    updated = store.update_note("n1", "Hello", "World")
    assert updated is not None
    assert updated.title == "Hello"
    assert updated.content == "World"
    assert updated.version == 2
    assert updated.owner_username == "kody"
    assert updated.created_at == created.created_at

    raw = json.loads((tmp_path / "notes" / "n1.json").read_text(encoding="utf-8"))
    assert raw["title"] == "Hello"
    assert not (tmp_path / "notes" / "n1.json.tmp").exists()


def test_update_missing_returns_none(tmp_path):
    store = NotesStore(tmp_path)
    assert store.update_note("nope", "Hello", "World") is None
    assert not (tmp_path / "notes" / "nope.json").exists()


@pytest.mark.parametrize("note_id", ["../secret", "a/b", "a\\b", ""])
def test_unsafe_ids_are_not_found(tmp_path, note_id):
    store = NotesStore(tmp_path)
    assert store.find_note_by_id(note_id) is None
    assert store.update_note(note_id, "t", "c") is None
    with pytest.raises(ValueError):
        _note_path(tmp_path, note_id)


def test_generated_ids_are_unique(tmp_path):
    store = NotesStore(tmp_path)
    a = store.create_note(owner_username="kody", title="a", content="a")
    b = store.create_note(owner_username="kody", title="b", content="b")
    assert a.id != b.id
