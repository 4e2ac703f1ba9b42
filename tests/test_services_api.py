"""Tests for the service catalog endpoints."""


def test_create_and_get_service(api, make_service):
    service = make_service(name="Pedicure", price=40.5)

    response = api.get(f"/api/services/{service['id']}")

    assert response.status_code == 200
    assert response.json()["name"] == "Pedicure"
    assert response.json()["price"] == 40.5
    assert response.json()["active"] is True


def test_active_services_excludes_inactive(api, make_service):
    make_service(name="Manicure")
    make_service(name="Alongamento", active=False)

    names = [s["name"] for s in api.get("/api/services/active").json()]

    assert names == ["Manicure"]
    assert len(api.get("/api/services").json()) == 2


def test_patch_service(api, make_service):
    service = make_service()

    response = api.patch(f"/api/services/{service['id']}", json={"price": 45, "active": False})

    assert response.status_code == 200
    assert response.json()["price"] == 45
    assert response.json()["active"] is False


def test_negative_price_is_rejected(api):
    response = api.post("/api/services", json={"name": "X", "duration": 30, "price": -1})

    assert response.status_code == 422


def test_delete_unused_service(api, make_service):
    service = make_service()

    assert api.delete(f"/api/services/{service['id']}").status_code == 204
    assert api.get(f"/api/services/{service['id']}").status_code == 404


def test_delete_booked_service_conflicts(api, make_client, make_service, book):
    client = make_client()
    service = make_service()
    assert book(client["id"], service["id"]).status_code == 201

    response = api.delete(f"/api/services/{service['id']}")

    assert response.status_code == 409
