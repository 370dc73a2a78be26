import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app


@pytest.fixture()
def settings(tmp_path):
    # isolate database and uploads per test
    return Settings(
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'notes.db'}",
        UPLOAD_DIR=str(tmp_path / "uploads"),
        SEED_SAMPLE_DATA=False,
    )


@pytest.fixture()
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture()
def make_notebook(client):
    def _make(title="Work", description=None):
        r = client.post("/api/notebooks", json={"title": title, "description": description})
        assert r.status_code == 201
        return r.json()["notebook_id"]
    return _make


@pytest.fixture()
def make_tag(client):
    def _make(name, color="#ff4444"):
        r = client.post("/api/tags", json={"name": name, "color": color})
        assert r.status_code == 201
        return r.json()["tag_id"]
    return _make


@pytest.fixture()
def make_note(client):
    def _make(notebook_id, title="Note", content=None, is_pinned=False, tag_ids=None, files=None):
        data = {"notebook_id": notebook_id, "title": title, "is_pinned": str(is_pinned).lower()}
        if content is not None:
            data["content"] = content
        if tag_ids:
            data["tag_ids"] = tag_ids
        r = client.post("/api/notes", data=data, files=files)
        assert r.status_code == 201, r.text
        return r.json()["note_id"]
    return _make
