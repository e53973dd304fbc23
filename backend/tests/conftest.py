import importlib

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))

    # reload modules so that api/notes.py picks up the new data dir
    import note_editor.api.notes
    import note_editor.main
    importlib.reload(note_editor.api.notes)
    importlib.reload(note_editor.main)

    return TestClient(note_editor.main.app)


@pytest.fixture()
def store(client):
    import note_editor.api.notes
    return note_editor.api.notes.store


@pytest.fixture()
def note(store):
    return store.create_note(owner_username="kody", title="T", content="C", note_id="n1")
