"""Tests for the Flask backend."""

from __future__ import annotations

import pytest

import web.app as web_app
from conftest import DAILY_TILES
from daily_boggle.dictionary import DictionaryIndex


@pytest.fixture
def client(monkeypatch, small_index: DictionaryIndex):
    monkeypatch.setattr(web_app, "DICTIONARY", small_index)
    web_app.get_puzzle.cache_clear()
    web_app.GAMES.clear()
    web_app.app.config["TESTING"] = True
    yield web_app.app.test_client()
    web_app.get_puzzle.cache_clear()
    web_app.GAMES.clear()


def _start(client) -> str:
    resp = client.post("/start", json={"puzzle_id": "2024-01-15-v1"})
    assert resp.status_code == 200
    return resp.get_json()["session_id"]


class TestPuzzleRoute:
    def test_by_date(self, client) -> None:
        resp = client.get("/puzzle?date=2024-01-15")
        assert resp.status_code == 200
        data = resp.get_json()
        assert data["puzzle_id"] == "2024-01-15-v1"
        assert data["tiles"] == DAILY_TILES
        assert data["rows"][1] == ["qu", "e", "r", "i"]
        assert data["total_words"] == 11
        assert data["dictionary_loaded"] is True
        assert "solutions" not in data

    def test_by_id(self, client) -> None:
        data = client.get("/puzzle?puzzle_id=2024-01-15-v1").get_json()
        assert data["tiles"] == DAILY_TILES

    def test_today(self, client) -> None:
        data = client.get("/puzzle").get_json()
        assert data["puzzle_id"].endswith("-v1")
        assert len(data["tiles"]) == 16

    def test_bad_date(self, client) -> None:
        resp = client.get("/puzzle?date=yesterday")
        assert resp.status_code == 400
        assert "error" in resp.get_json()

    def test_empty_dictionary_reported(self, client, monkeypatch) -> None:
        monkeypatch.setattr(web_app, "DICTIONARY", DictionaryIndex.empty())
        web_app.get_puzzle.cache_clear()
        data = client.get("/puzzle?date=2024-01-15").get_json()
        assert data["dictionary_loaded"] is False
        assert data["total_words"] == 0


class TestGameRoutes:
    def test_start(self, client) -> None:
        resp = client.post("/start", json={"date": "2024-01-15"})
        data = resp.get_json()
        assert data["session_id"] in web_app.GAMES
        assert data["time_limit"] == 120
        assert data["score"] == 0
        assert data["finished"] is False
        assert data["tiles"] == DAILY_TILES

    def test_start_bad_date(self, client) -> None:
        resp = client.post("/start", json={"date": "2024-13-01"})
        assert resp.status_code == 400

    def test_submit_path_then_duplicate_word(self, client) -> None:
        session_id = _start(client)

        resp = client.post("/submit", json={"session_id": session_id, "path": [4, 5, 10, 6]})
        data = resp.get_json()
        assert data["submission"] == {"word": "queer", "delta": 3, "status": "new"}
        assert data["score"] == 3
        assert data["found_words"] == ["queer"]

        resp = client.post("/submit", json={"session_id": session_id, "word": "Queer"})
        data = resp.get_json()
        assert data["submission"]["status"] == "duplicate"
        assert data["score"] == 2

    def test_submit_invalid_path(self, client) -> None:
        session_id = _start(client)
        resp = client.post("/submit", json={"session_id": session_id, "path": [0, 2]})
        assert resp.status_code == 400

    def test_submit_malformed_path(self, client) -> None:
        session_id = _start(client)
        resp = client.post("/submit", json={"session_id": session_id, "path": "0,1"})
        assert resp.status_code == 400

    def test_unknown_session(self, client) -> None:
        assert client.post("/submit", json={"session_id": "nope", "word": "bed"}).status_code == 404
        assert client.post("/finish", json={"session_id": "nope"}).status_code == 404

    def test_finish(self, client) -> None:
        session_id = _start(client)
        client.post("/submit", json={"session_id": session_id, "word": "bed"})

        resp = client.post("/finish", json={"session_id": session_id})
        data = resp.get_json()
        assert data["result"]["score"] == 1
        assert data["result"]["found_words"] == ["bed"]
        assert data["share"] == "Daily Boggle 2024-01-15-v1 - Score 1 - Words 1/11"
        words = [s["word"] for s in data["solutions"]]
        assert words[0] == "aired"
        assert len(words) == 11
        assert all(len(s["path"]) >= 2 for s in data["solutions"])

        resp = client.post("/submit", json={"session_id": session_id, "word": "red"})
        assert resp.status_code == 409
        assert resp.get_json()["finished"] is True
