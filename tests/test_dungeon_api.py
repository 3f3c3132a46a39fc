from delve.dungeon import Tile


def test_render_returns_text_stage(client):
    r = client.get("/api/dungeon/render?width=21&height=15&seed=5")
    assert r.status_code == 200
    assert r.mimetype == "text/plain"
    assert r.headers["X-Dungeon-Seed"] == "5"
    lines = r.get_data(as_text=True).rstrip("\n").split("\n")
    assert len(lines) == 15 + 2
    assert lines[0] == "-" * 23
    assert all(len(line) == 23 for line in lines)
    assert any(Tile.FLOOR.glyph in line for line in lines)


def test_render_is_reproducible(client):
    a = client.get("/api/dungeon/render?width=21&height=15&seed=77").get_data(as_text=True)
    b = client.get("/api/dungeon/render?width=21&height=15&seed=77").get_data(as_text=True)
    assert a == b


def test_render_uses_app_defaults(client):
    r = client.get("/api/dungeon/render?seed=1")
    assert r.status_code == 200
    lines = r.get_data(as_text=True).rstrip("\n").split("\n")
    assert len(lines) == 21 + 2


def test_metrics_endpoint(client):
    r = client.get("/api/dungeon/metrics?width=31&height=21&seed=12")
    assert r.status_code == 200
    data = r.get_json()
    assert data["seed"] == 12
    assert (data["width"], data["height"]) == (31, 21)
    for k in ["rooms_placed", "room_attempts", "regions", "junctions", "dead_ends_removed", "runtime_ms", "phase_ms"]:
        assert k in data["metrics"]


def test_even_dimensions_are_400(client):
    r = client.get("/api/dungeon/render?width=20&height=15")
    assert r.status_code == 400
    assert "odd" in r.get_json()["error"]


def test_non_integer_is_400(client):
    r = client.get("/api/dungeon/metrics?width=wide")
    assert r.status_code == 400
    assert "width" in r.get_json()["error"]


def test_size_cap(test_app):
    test_app.config["DELVE_MAX_DIMENSION"] = 51
    r = test_app.test_client().get("/api/dungeon/render?width=53&height=15")
    assert r.status_code == 400


def test_bad_server_env_is_structured_error(client, monkeypatch):
    monkeypatch.setenv("DELVE_ROOM_TRIES", "lots")
    r = client.get("/api/dungeon/render?width=21&height=15&seed=1")
    assert r.status_code == 500
    assert "DELVE_ROOM_TRIES" in r.get_json()["error"]


def test_invalid_server_setting_is_structured_error(client, monkeypatch):
    monkeypatch.setenv("DELVE_WINDING_PERCENT", "150")
    r = client.get("/api/dungeon/metrics?width=21&height=15&seed=1")
    assert r.status_code == 500
    assert "winding_percent" in r.get_json()["error"]
