"""HTTP layer: state queries, moves, error mapping, and the locked service."""

import threading
import time

import pytest
from fastapi.testclient import TestClient

from Gomoku_Web.Board import Stone
from Gomoku_Web.engine.errors import GameOver
from Gomoku_Web.web.app import create_app
from Gomoku_Web.web.service import GameService


@pytest.fixture
def two_player_client():
    service = GameService(board_size=15, ai_enabled=False)
    return TestClient(create_app(service)), service


@pytest.fixture
def ai_client():
    service = GameService(board_size=15, ai_enabled=True)
    return TestClient(create_app(service)), service


def test_initial_state(two_player_client):
    client, _ = two_player_client
    resp = client.get("/api/state")
    assert resp.status_code == 200
    assert resp.headers["cache-control"].startswith("no-store")
    body = resp.json()
    assert body["size"] == 15
    assert body["turn"] == 1
    assert body["moves"] == 0
    assert body["winner"] == 0
    assert body["winning_line"] is None
    assert body["board"] == [[0] * 15 for _ in range(15)]


def test_move_updates_state(two_player_client):
    client, _ = two_player_client
    resp = client.post("/api/move", json={"x": 3, "y": 5})
    assert resp.status_code == 200
    body = resp.json()
    assert body["board"][5][3] == 1
    assert body["turn"] == 2
    assert body["moves"] == 1
    assert client.get("/api/state").json() == body


@pytest.mark.parametrize(
    "payload, kind",
    [
        ({"x": 15, "y": 0}, "out_of_bounds"),
        ({"x": -1, "y": 3}, "out_of_bounds"),
    ],
)
def test_out_of_bounds_is_400(two_player_client, payload, kind):
    client, _ = two_player_client
    resp = client.post("/api/move", json=payload)
    assert resp.status_code == 400
    assert resp.json()["kind"] == kind
    assert client.get("/api/state").json()["moves"] == 0


def test_occupied_cell_is_400(two_player_client):
    client, _ = two_player_client
    client.post("/api/move", json={"x": 7, "y": 7})
    resp = client.post("/api/move", json={"x": 7, "y": 7})
    assert resp.status_code == 400
    assert resp.json() == {"error": "cell is already occupied", "kind": "cell_occupied"}


def test_invalid_json_is_400(two_player_client):
    client, _ = two_player_client
    resp = client.post("/api/move", content=b"{not json", headers={"Content-Type": "application/json"})
    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid json"}
    resp = client.post("/api/move", json={"x": "a", "y": 1})
    assert resp.status_code == 400


def test_missing_coordinate_is_400_not_zero(two_player_client):
    client, _ = two_player_client
    resp = client.post("/api/move", json={"x": 3})
    assert resp.status_code == 400
    assert resp.json() == {"error": "invalid json"}
    assert client.get("/api/state").json()["board"][0][3] == 0


def test_wrong_method_is_405(two_player_client):
    client, _ = two_player_client
    assert client.post("/api/state").status_code == 405
    assert client.get("/api/move").status_code == 405


def test_win_then_game_over(two_player_client):
    client, _ = two_player_client
    for y in range(4):
        client.post("/api/move", json={"x": 3, "y": 3 + y})
        client.post("/api/move", json={"x": 10, "y": y})
    body = client.post("/api/move", json={"x": 3, "y": 7}).json()
    assert body["winner"] == 1
    assert body["winning_line"] == [[3, y] for y in range(3, 8)]

    resp = client.post("/api/move", json={"x": 0, "y": 14})
    assert resp.status_code == 400
    assert resp.json()["kind"] == "game_over"
    assert client.get("/api/state").json()["moves"] == 9


def test_computer_replies_to_each_move(ai_client):
    client, _ = ai_client
    body = client.post("/api/move", json={"x": 0, "y": 0}).json()
    assert body["moves"] == 2
    assert body["turn"] == 1
    assert body["board"][7][7] == 2


def test_computer_does_not_reply_after_black_wins(ai_client):
    _, service = ai_client
    game = service.game
    for x in range(4):
        game.play((x, 14))
        game.play((x, 0))
    snap = service.play(4, 14)
    assert snap["winner"] == int(Stone.BLACK)
    assert snap["moves"] == 9
    with pytest.raises(GameOver):
        service.play(5, 5)


def test_state_waits_for_computer_reply(monkeypatch):
    service = GameService(board_size=15, ai_enabled=True)
    original_ai_move = service.game.ai_move
    in_reply = threading.Event()

    def slow_ai_move():
        in_reply.set()
        time.sleep(0.2)
        return original_ai_move()

    monkeypatch.setattr(service.game, "ai_move", slow_ai_move)

    mover = threading.Thread(target=service.play, args=(0, 0))
    mover.start()
    assert in_reply.wait(timeout=2)
    # Black's stone is down and White's reply is pending; a reader must not see it half done.
    snap = service.state()
    mover.join()

    assert snap["moves"] in (0, 2)
    assert service.state()["moves"] == 2
