"""Tests for loyalty points and reward redemption."""
import pytest


@pytest.fixture
def client_with_points(api, make_client, make_service, book):
    """Client who completed one appointment worth 60 points."""
    client = make_client()
    service = make_service(points=60)
    book(client["id"], service["id"], status="completed")
    return client


def test_rewards_catalog(api):
    rewards = api.get("/api/loyalty/rewards").json()

    assert [r["points"] for r in rewards] == [50, 100, 200, 300]


def test_summary_progress_towards_next_reward(api, client_with_points):
    body = api.get(f"/api/loyalty/{client_with_points['id']}").json()

    assert body["points"] == 60
    assert body["nextReward"]["id"] == 2
    assert body["pointsToNextReward"] == 40
    assert body["progressPercentage"] == 60
    assert [(h["points"], h["type"]) for h in body["history"]] == [(60, "earned")]


def test_redeem_reward(api, client_with_points):
    response = api.post(f"/api/loyalty/{client_with_points['id']}/redeem", json={"rewardId": 1})

    assert response.status_code == 200
    assert response.json()["remainingPoints"] == 10
    history = api.get(f"/api/loyalty/{client_with_points['id']}").json()["history"]
    assert sorted(h["points"] for h in history) == [-50, 60]


def test_redeem_with_insufficient_points(api, client_with_points):
    response = api.post(f"/api/loyalty/{client_with_points['id']}/redeem", json={"rewardId": 2})

    assert response.status_code == 400
    assert response.json()["detail"] == "Pontos insuficientes"


def test_redeem_unavailable_reward(api, client_with_points):
    response = api.post(f"/api/loyalty/{client_with_points['id']}/redeem", json={"rewardId": 3})

    assert response.status_code == 400
    assert response.json()["detail"] == "Recompensa indisponível"


def test_redeem_unknown_reward(api, client_with_points):
    response = api.post(f"/api/loyalty/{client_with_points['id']}/redeem", json={"rewardId": 99})

    assert response.status_code == 404


def test_summary_for_unknown_client(api):
    assert api.get("/api/loyalty/missing").status_code == 404
