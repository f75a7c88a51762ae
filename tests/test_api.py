"""
HTTP tests for the weeklog and leaderboard routers.
"""

import pytest

from weeklog import core as weeklog_core

from .conftest import WEEK_START


def _submit(client, **overrides):
    body = {
        "steamid": "76561198000000001",
        "category": "main",
        "time": 1000,
        "portals": 4,
        "timestamp": 60,
    }
    body.update(overrides)
    return client.post("/weeklog", json=body)


class TestSystem:
    """Test readiness and configuration endpoints."""

    def test_health(self, client):
        assert client.get("/health").json() == {"ok": True}
        assert client.get("/healthz").json() == {"ok": True}

    def test_config_lists_ranking_rules(self, client):
        body = client.get("/config").json()
        assert body["week_start"] == WEEK_START
        assert body["categories"] == [
            {"key": "main", "ranking": "time"},
            {"key": "lp", "ranking": "portals"},
            {"key": "ppnf", "ranking": "time"},
        ]


class TestWeeklogRoutes:
    """Test reading and mutating the log over HTTP."""

    def test_submit_and_read(self, client):
        response = _submit(client, steamid=str(2**64 - 1))
        assert response.status_code == 200
        assert response.json() == {"ok": True, "result": "SUCCESS"}

        entries = client.get("/weeklog").json()["entries"]
        assert entries == [
            {
                "steamid": "18446744073709551615",
                "category": "main",
                "time": 1000,
                "portals": 4,
                "timestamp": 60,
            }
        ]

    @pytest.mark.parametrize(
        "overrides, status, code",
        [
            ({"category": "glitchless"}, 422, "ERR_CATEGORY"),
            ({"portals": 256}, 400, "ERR_ENCODE"),
            ({"steamid": "not-a-number"}, 400, "ERR_ENCODE"),
            ({"time": None}, 400, "ERR_ARGS"),
        ],
    )
    def test_submit_errors(self, client, weeklog, overrides, status, code):
        response = _submit(client, **overrides)
        assert response.status_code == status
        assert response.json()["code"] == code
        assert weeklog.read() == []

    def test_tombstone(self, client):
        _submit(client, time=1000, timestamp=1)
        _submit(client, time=800, timestamp=2)
        response = client.post(
            "/weeklog/tombstone",
            json={"steamid": "76561198000000001", "category": "main", "timestamp": 3},
        )
        assert response.status_code == 200
        times = [entry["time"] for entry in client.get("/weeklog").json()["entries"]]
        assert times == [1000]

    def test_remove(self, client, weeklog):
        _submit(client, steamid="1", timestamp=10)
        _submit(client, steamid="2", timestamp=42)

        response = client.delete("/weeklog/42")
        assert response.status_code == 200
        assert response.json()["removed"] == 42
        assert [entry.steamid for entry in weeklog.read()] == [1]

    def test_remove_unknown_timestamp(self, client):
        response = client.delete("/weeklog/42")
        assert response.status_code == 404
        assert response.json()["code"] == "ERR_TIMESTAMP"

    def test_corrupt_log_is_reported(self, client, weeklog):
        weeklog.path.write_bytes(b"\x00" * 20)
        response = client.get("/weeklog")
        assert response.status_code == 500
        assert response.json()["code"] == "ERR_CORRUPT"


class TestCommandRoute:
    """Test the raw command endpoint."""

    def test_unknown_command(self, client):
        response = client.post("/weeklog/command", json={"args": ["compact"]})
        assert response.status_code == 400
        assert response.json()["code"] == "ERR_COMMAND"

    def test_args_must_be_a_list(self, client):
        response = client.post("/weeklog/command", json={"args": "read"})
        assert response.status_code == 400

    def test_add_and_reconstruct(self, client):
        client.post(
            "/weeklog/command",
            json={"args": ["add", "5", "lp", "700", "3", "9"]},
        )
        result = client.post(
            "/weeklog/command", json={"args": ["reconstruct"]}
        ).json()["result"]
        assert result["lp"] == [
            {
                "steamid": "5",
                "time": 700,
                "date": WEEK_START + 9,
                "note": "",
                "portals": 3,
                "segmented": False,
            }
        ]
        assert result["main"] == []

    def test_read(self, client):
        _submit(client)
        result = client.post("/weeklog/command", json={"args": ["read"]}).json()["result"]
        assert [entry["steamid"] for entry in result] == ["76561198000000001"]


class TestAdminToken:
    """Test the optional admin guard on mutating routes."""

    @pytest.fixture(autouse=True)
    def _token(self, monkeypatch):
        monkeypatch.setattr(weeklog_core, "ADMIN_TOKEN", "hunter2")

    def test_rejects_missing_token(self, client):
        assert _submit(client).status_code == 403
        assert client.delete("/weeklog/60").status_code == 403

    def test_rejects_wrong_token(self, client):
        response = client.post(
            "/weeklog",
            json={"steamid": "1", "category": "main", "time": 1, "portals": 1},
            headers={"X-Admin-Token": "nope"},
        )
        assert response.status_code == 403

    def test_accepts_token(self, client):
        client.headers["X-Admin-Token"] = "hunter2"
        assert _submit(client).status_code == 200

    def test_reads_stay_open(self, client):
        assert client.get("/weeklog").status_code == 200
        assert client.get("/leaderboard").status_code == 200


class TestLeaderboardRoutes:
    """Test reconstructed leaderboard endpoints."""

    def test_full_leaderboard(self, client):
        for steamid, time in (("1", 500), ("2", 300), ("3", 400)):
            _submit(client, steamid=steamid, time=time)

        body = client.get("/leaderboard").json()
        assert body["week_start"] == WEEK_START
        assert [run["time"] for run in body["leaderboard"]["main"]] == [300, 400, 500]
        assert "portals" not in body["leaderboard"]["main"][0]
        assert set(body["leaderboard"]) == {"main", "lp", "ppnf"}

    def test_category_leaderboard(self, client):
        _submit(client, steamid="1", category="lp", portals=3, time=200)
        _submit(client, steamid="2", category="lp", portals=2, time=999)
        _submit(client, steamid="3", category="lp", portals=2, time=100)

        body = client.get("/leaderboard/lp").json()
        assert body["ranking"] == "portals"
        assert [(run["portals"], run["time"]) for run in body["entries"]] == [
            (2, 100),
            (2, 999),
            (3, 200),
        ]

    def test_unknown_category(self, client):
        assert client.get("/leaderboard/glitchless").status_code == 404

    def test_player_placements(self, client):
        _submit(client, steamid="1", time=500)
        _submit(client, steamid="2", time=300)

        body = client.get("/leaderboard/players/1").json()
        assert body["steamid"] == "1"
        assert [(p["category"], p["rank"]) for p in body["placements"]] == [("main", 2)]

    def test_player_placements_bad_steamid(self, client):
        response = client.get("/leaderboard/players/abc")
        assert response.status_code == 400
        assert response.json()["code"] == "ERR_ENCODE"
