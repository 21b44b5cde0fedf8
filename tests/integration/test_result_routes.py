"""Integration tests for the /result route."""

import pytest
from flask import Flask

from showdown_api.config import TestingConfig
from showdown_api.routes.result_routes import result_bp


@pytest.fixture
def app():
    """Create test Flask app."""
    app = Flask(__name__)
    app.config.from_object(TestingConfig)
    app.register_blueprint(result_bp)
    return app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


def test_player1_wins(client):
    response = client.get("/result?player1Hand=AH,KH,QH,JH,10H&player2Hand=3H,3S,3D,7H,7S")
    assert response.status_code == 200

    data = response.get_json()
    assert data["success"] is True
    assert data["winner"] == 1
    assert data["message"] == "Player 1 wins with RoyalFlush. Player 2 had FullHouse."
    assert data["player2"]["description"] == "Full House, Threes over Sevens"


def test_repeated_parameters(client):
    query = "&".join(
        [f"player1Hand={c}" for c in ["2H", "3S", "4D", "5C", "6H"]]
        + [f"player2Hand={c}" for c in ["2S", "3D", "4C", "5H", "6S"]]
    )
    response = client.get(f"/result?{query}")
    assert response.status_code == 200

    data = response.get_json()
    assert data["winner"] is None
    assert data["message"] == "Both players had even hands with Straight."


def test_missing_parameter(client):
    response = client.get("/result?player1Hand=AH,KH,QH,JH,10H")
    assert response.status_code == 400

    data = response.get_json()
    assert data["success"] is False
    assert "player2Hand" in data["error"]


@pytest.mark.parametrize("player1", [
    "AH,KH,QH,JH",            # too few cards
    "AH,AH,QH,JH,10H",        # duplicate
    "AH,KH,QH,JH,ZZ",         # unknown card
    "AH,AS,AD,AC,AH",         # five of one rank
])
def test_invalid_hand(client, player1):
    response = client.get(f"/result?player1Hand={player1}&player2Hand=3H,3S,3D,7H,7S")
    assert response.status_code == 400
    assert response.get_json()["success"] is False
