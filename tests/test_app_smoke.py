from __future__ import annotations

import json


def test_app_smoke_routes(client):
    r = client.get("/", follow_redirects=False)
    assert r.status_code == 307
    assert r.headers["location"] == "/dashboard"

    r = client.get("/api/components")
    assert r.status_code == 200
    assert "StatCard" in r.json()["components"]


def test_dashboard_renders_empty_page_when_no_document(client):
    r = client.get("/dashboard")
    assert r.status_code == 200
    assert '<main id="puck-render"></main>' in r.text


def test_publish_then_dashboard_renders_saved_blocks(client, sandbox_project):
    doc = {"content": [{"type": "StatCard", "props": {"title": "Users", "value": 42}}], "root": {}}

    r = client.post("/api/pages/dashboard", json=doc)
    assert r.status_code == 200
    assert r.json() == {"ok": True, "id": "dashboard"}

    stored = sandbox_project / "data" / "puck" / "dashboard.json"
    assert json.loads(stored.read_text(encoding="utf-8")) == doc

    r = client.get("/dashboard")
    assert "<strong>Users</strong>" in r.text
    assert "<p>42</p>" in r.text

    r = client.get("/api/pages/dashboard")
    assert r.json() == {"id": "dashboard", "status": "found", "data": doc}


def test_edit_path_segments_form_the_page_id(client, sandbox_project):
    r = client.post("/api/pages/about/team", json={"content": [], "root": {"title": "Team"}})
    assert r.status_code == 200
    assert r.json()["id"] == "about/team"

    assert (sandbox_project / "data" / "puck" / "about" / "team.json").is_file()
    assert client.get("/api/pages/dashboard").json()["status"] == "absent"

    r = client.get("/edit/about/team")
    assert r.status_code == 200
    assert "<title>Edit about/team</title>" in r.text
    assert '"/api/pages/about/team"' in r.text
    assert '{"content": [], "root": {"title": "Team"}}' in r.text


def test_edit_without_path_targets_dashboard(client):
    r = client.get("/edit")
    assert r.status_code == 200
    assert "<title>Edit dashboard</title>" in r.text
    assert '"/api/pages/dashboard"' in r.text


def test_corrupted_document_reads_as_empty(client, sandbox_project):
    root = sandbox_project / "data" / "puck"
    (root / "x.json").write_text("{oops", encoding="utf-8")

    r = client.get("/api/pages/x")
    assert r.json() == {"id": "x", "status": "corrupted", "data": None}

    (root / "dashboard.json").write_text("not json", encoding="utf-8")
    r = client.get("/dashboard")
    assert r.status_code == 200
    assert '<main id="puck-render"></main>' in r.text


def test_publish_rejects_bad_body_and_bad_ids(client, sandbox_project):
    r = client.post("/api/pages/dashboard", content=b"{not json", headers={"content-type": "application/json"})
    assert r.status_code == 400

    r = client.post("/api/pages/a%5Cb", json={})
    assert r.status_code == 400

    assert not (sandbox_project / "data" / "puck" / "dashboard.json").exists()


def test_dashboard_survives_overflowing_grid_columns(client, sandbox_project):
    stored = sandbox_project / "data" / "puck" / "dashboard.json"
    stored.write_text('{"content": [{"type": "Grid", "props": {"columns": 1e400}}]}', encoding="utf-8")

    r = client.get("/dashboard")
    assert r.status_code == 200
    assert "repeat(2, 1fr)" in r.text


def test_publish_rejects_deeply_nested_body(client):
    r = client.post("/api/pages/dashboard", content=b"[" * 100000, headers={"content-type": "application/json"})
    assert r.status_code == 400
