def _notes(client, notebook_id):
    r = client.get(f"/api/notebooks/{notebook_id}/notes")
    assert r.status_code == 200
    return r.json()


def test_standup_scenario(client, make_notebook, make_tag):
    notebook_id = make_notebook("Work")
    important = make_tag("Important", "#ff4444")

    r = client.post(
        "/api/notes",
        data={
            "notebook_id": notebook_id,
            "title": "Standup",
            "content": "daily sync",
            "is_pinned": "true",
            "tag_ids": [important],
        },
    )
    assert r.status_code == 201
    assert r.json()["message"] == "Note created successfully"
    note_id = r.json()["note_id"]

    notes = _notes(client, notebook_id)
    assert len(notes) == 1
    note = notes[0]
    assert note["id"] == note_id
    assert note["notebook_id"] == notebook_id
    assert note["title"] == "Standup"
    assert note["content"] == "daily sync"
    assert note["is_pinned"] is True
    assert note["pdf_path"] is None
    assert note["tags"] == [{"id": important, "name": "Important", "color": "#ff4444"}]


def test_note_requires_notebook_and_title(client, make_notebook):
    notebook_id = make_notebook()

    r = client.post("/api/notes", data={"title": "No notebook"})
    assert r.status_code == 400
    assert r.json() == {"error": "Notebook ID and title are required"}

    r = client.post("/api/notes", data={"notebook_id": notebook_id})
    assert r.status_code == 400
    assert _notes(client, notebook_id) == []


def test_note_in_unknown_notebook_is_not_found(client):
    r = client.post("/api/notes", data={"notebook_id": "missing", "title": "Lost"})
    assert r.status_code == 404
    assert r.json() == {"error": "Notebook not found"}


def test_note_with_two_tags_returns_both(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("Alpha", "#aa0000")
    b = make_tag("Beta", "#00bb00")
    make_note(notebook_id, "Tagged", tag_ids=[b, a])

    tags = _notes(client, notebook_id)[0]["tags"]
    assert {t["id"]: (t["name"], t["color"]) for t in tags} == {
        a: ("Alpha", "#aa0000"),
        b: ("Beta", "#00bb00"),
    }


def test_tag_values_containing_commas_survive(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    odd = make_tag("red, urgent", "rgb(255, 0, 0)")
    plain = make_tag("plain", "#000000")
    make_note(notebook_id, "Commas", tag_ids=[odd, plain])

    tags = _notes(client, notebook_id)[0]["tags"]
    assert tags == [
        {"id": plain, "name": "plain", "color": "#000000"},
        {"id": odd, "name": "red, urgent", "color": "rgb(255, 0, 0)"},
    ]


def test_duplicate_tag_ids_collapse_to_one_link(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("Alpha")
    make_note(notebook_id, "Twice", tag_ids=[a, a])

    assert [t["id"] for t in _notes(client, notebook_id)[0]["tags"]] == [a]


def test_unknown_tag_id_fails_whole_create(client, make_notebook, make_tag):
    notebook_id = make_notebook()
    a = make_tag("Alpha")

    r = client.post(
        "/api/notes",
        data={"notebook_id": notebook_id, "title": "Broken", "tag_ids": [a, "no-such-tag"]},
    )
    assert r.status_code == 400
    assert r.json() == {"error": "Unknown tag id(s): no-such-tag"}
    assert _notes(client, notebook_id) == []


def test_bracketed_tag_ids_field_is_accepted(client, make_notebook, make_tag):
    notebook_id = make_notebook()
    a = make_tag("Alpha")

    r = client.post(
        "/api/notes",
        data={"notebook_id": notebook_id, "title": "Brackets", "tag_ids[]": [a]},
    )
    assert r.status_code == 201
    assert [t["id"] for t in _notes(client, notebook_id)[0]["tags"]] == [a]


def test_notes_ordered_pinned_first_then_recently_updated(client, make_notebook, make_note):
    notebook_id = make_notebook()
    old = make_note(notebook_id, "Old")
    new = make_note(notebook_id, "New")
    pinned = make_note(notebook_id, "Pinned", is_pinned=True)

    assert [n["id"] for n in _notes(client, notebook_id)] == [pinned, new, old]

    r = client.put(f"/api/notes/{old}", data={"title": "Old, edited"})
    assert r.status_code == 200
    assert [n["id"] for n in _notes(client, notebook_id)] == [pinned, old, new]


def test_update_replaces_tag_set(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("A")
    b = make_tag("B")
    c = make_tag("C")
    note_id = make_note(notebook_id, "Retag", tag_ids=[a, b])

    r = client.put(f"/api/notes/{note_id}", data={"title": "Retag", "tag_ids": [b, c]})
    assert r.status_code == 200
    assert r.json() == {"message": "Note updated successfully"}

    note = _notes(client, notebook_id)[0]
    assert {t["id"] for t in note["tags"]} == {b, c}

    tables = {t["table_name"]: t["rows"] for t in client.get("/api/database/tables").json()}
    assert sorted(row["tag_id"] for row in tables["note_tags"]) == sorted([b, c])


def test_update_without_tag_ids_keeps_tags(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("A")
    note_id = make_note(notebook_id, "Keep", content="before", tag_ids=[a])

    r = client.put(
        f"/api/notes/{note_id}",
        data={"title": "Keep", "content": "after", "is_pinned": "true"},
    )
    assert r.status_code == 200

    note = _notes(client, notebook_id)[0]
    assert note["content"] == "after"
    assert note["is_pinned"] is True
    assert [t["id"] for t in note["tags"]] == [a]


def test_update_with_empty_tag_ids_clears_tags(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("A")
    note_id = make_note(notebook_id, "Clear", tag_ids=[a])

    r = client.put(f"/api/notes/{note_id}", data={"title": "Clear", "tag_ids": ""})
    assert r.status_code == 200
    assert _notes(client, notebook_id)[0]["tags"] == []


def test_update_with_unknown_tag_leaves_note_untouched(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("A")
    note_id = make_note(notebook_id, "Stable", tag_ids=[a])

    r = client.put(f"/api/notes/{note_id}", data={"title": "Changed", "tag_ids": ["nope"]})
    assert r.status_code == 400

    note = _notes(client, notebook_id)[0]
    assert note["title"] == "Stable"
    assert [t["id"] for t in note["tags"]] == [a]


def test_update_note_validation_and_not_found(client, make_notebook, make_note):
    notebook_id = make_notebook()
    note_id = make_note(notebook_id)

    r = client.put(f"/api/notes/{note_id}", data={"content": "no title"})
    assert r.status_code == 400
    assert r.json() == {"error": "Title is required"}

    r = client.put("/api/notes/missing", data={"title": "Ghost"})
    assert r.status_code == 404
    assert r.json() == {"error": "Note not found"}


def test_delete_note_removes_links(client, make_notebook, make_tag, make_note):
    notebook_id = make_notebook()
    a = make_tag("A")
    note_id = make_note(notebook_id, "Bye", tag_ids=[a])

    r = client.delete(f"/api/notes/{note_id}")
    assert r.status_code == 200
    assert r.json() == {"message": "Note deleted successfully"}
    assert _notes(client, notebook_id) == []

    tables = {t["table_name"]: t["rows"] for t in client.get("/api/database/tables").json()}
    assert tables["note_tags"] == []
    assert len(tables["tags"]) == 1

    r = client.delete(f"/api/notes/{note_id}")
    assert r.status_code == 404
