"""Tests for booking, rescheduling and listing appointments."""
from datetime import datetime

import pytest

from app.models import Appointment

# 19:00 in São Paulo
MONDAY_EVENING_UTC = "2025-01-06T22:00:00Z"


@pytest.fixture
def client_and_service(make_client, make_service):
    return make_client(), make_service(price=35.0, points=60)


def test_booking_inside_business_hours(book, client_and_service):
    client, service = client_and_service

    response = book(client["id"], service["id"])

    assert response.status_code == 201
    body = response.json()
    assert body["date"].startswith("2025-01-06T12:30:00")
    assert body["status"] == "scheduled"
    assert body["price"] == 35.0
    assert body["client"]["name"] == "Maria Silva"
    assert body["service"]["name"] == "Manicure"


def test_booking_price_can_be_overridden(book, client_and_service):
    client, service = client_and_service

    response = book(client["id"], service["id"], price=20)

    assert response.json()["price"] == 20


def test_booking_after_closing_time_is_rejected(book, client_and_service):
    client, service = client_and_service

    response = book(client["id"], service["id"], date=MONDAY_EVENING_UTC)

    assert response.status_code == 400
    assert response.json()["detail"] == {
        "message": "Horário inválido",
        "error": "Horário fora do funcionamento (08:00 às 18:00)",
    }


def test_booking_on_sunday_is_rejected(book, client_and_service):
    client, service = client_and_service

    response = book(client["id"], service["id"], date="2025-01-05T13:00:00Z")

    assert response.status_code == 400
    assert response.json()["detail"]["error"] == "Domingo não é um dia de funcionamento"


def test_booking_with_local_offset(book, client_and_service):
    client, service = client_and_service

    response = book(client["id"], service["id"], date="2025-01-06T08:00:00-03:00")

    assert response.status_code == 201
    assert response.json()["date"].startswith("2025-01-06T11:00:00")


def test_booking_unknown_client(book, make_service):
    service = make_service()

    assert book("missing", service["id"]).status_code == 404


def test_validate_time_endpoint(api):
    late = api.post("/api/appointments/validate-time", json={"date": MONDAY_EVENING_UTC})
    good = api.post("/api/appointments/validate-time", json={"date": "2025-01-06T12:30:00Z"})

    assert late.json() == {"valid": False, "message": "Horário fora do funcionamento (08:00 às 18:00)"}
    assert good.json() == {"valid": True, "message": None}


def test_day_filter_uses_local_calendar_day(api, db_session, book, client_and_service):
    client, service = client_and_service
    book(client["id"], service["id"])
    # Monday 22:00 local is already Tuesday in UTC
    db_session.add(
        Appointment(
            client_id=client["id"], service_id=service["id"], date=datetime(2025, 1, 7, 1, 0), price=35.0
        )
    )
    db_session.commit()

    monday = api.get("/api/appointments", params={"date": "2025-01-06"}).json()
    tuesday = api.get("/api/appointments", params={"date": "2025-01-07"}).json()

    assert [a["date"][:16] for a in monday] == ["2025-01-06T12:30", "2025-01-07T01:00"]
    assert tuesday == []


def test_bad_day_filter(api):
    response = api.get("/api/appointments", params={"date": "06/01/2025"})

    assert response.status_code == 400


def test_filter_by_client(api, make_client, make_service, book):
    maria = make_client()
    joana = make_client(name="Joana", cpf="98765432100", phone="21912345678")
    service = make_service()
    book(maria["id"], service["id"])
    book(joana["id"], service["id"])

    result = api.get("/api/appointments", params={"clientId": joana["id"]}).json()

    assert [a["clientId"] for a in result] == [joana["id"]]


def test_day_and_client_filters_combine(api, make_client, make_service, book):
    maria = make_client()
    joana = make_client(name="Joana", cpf="98765432100", phone="21912345678")
    service = make_service()
    book(maria["id"], service["id"])
    book(joana["id"], service["id"])
    book(joana["id"], service["id"], date="2025-01-07T14:00:00Z")

    result = api.get("/api/appointments", params={"date": "2025-01-06", "clientId": joana["id"]}).json()

    assert [(a["clientId"], a["date"][:10]) for a in result] == [(joana["id"], "2025-01-06")]


def test_reschedule_is_validated(api, book, client_and_service):
    client, service = client_and_service
    appointment = book(client["id"], service["id"]).json()

    rejected = api.put(f"/api/appointments/{appointment['id']}", json={"date": "2025-01-05T13:00:00Z"})
    accepted = api.put(f"/api/appointments/{appointment['id']}", json={"date": "2025-01-07T14:00:00Z"})

    assert rejected.status_code == 400
    assert rejected.json()["detail"]["message"] == "Horário inválido"
    assert accepted.status_code == 200
    assert accepted.json()["date"].startswith("2025-01-07T14:00:00")


def test_completion_awards_points_once(api, book, client_and_service):
    client, service = client_and_service
    appointment = book(client["id"], service["id"]).json()

    api.put(f"/api/appointments/{appointment['id']}", json={"status": "completed"})
    api.put(f"/api/appointments/{appointment['id']}", json={"status": "completed", "notes": "ok"})

    assert api.get(f"/api/clients/{client['id']}").json()["points"] == 60


def test_cancel_appointment(api, book, client_and_service):
    client, service = client_and_service
    appointment = book(client["id"], service["id"]).json()

    response = api.post(f"/api/appointments/{appointment['id']}/cancel")

    assert response.status_code == 200
    assert response.json()["status"] == "cancelled"


def test_cancel_completed_appointment_fails(api, book, client_and_service):
    client, service = client_and_service
    appointment = book(client["id"], service["id"], status="completed").json()

    response = api.post(f"/api/appointments/{appointment['id']}/cancel")

    assert response.status_code == 400


def test_delete_appointment(api, book, client_and_service):
    client, service = client_and_service
    appointment = book(client["id"], service["id"]).json()

    assert api.delete(f"/api/appointments/{appointment['id']}").status_code == 204
    assert api.get(f"/api/appointments/{appointment['id']}").status_code == 404


def test_extra_services_lifecycle(api, make_service, book, client_and_service):
    client, service = client_and_service
    extra = make_service(name="Esmaltação em gel", price=25.0)
    appointment = book(client["id"], service["id"]).json()
    base_url = f"/api/appointments/{appointment['id']}/services"

    added = api.post(base_url, json={"serviceId": extra["id"]})
    assert added.status_code == 201
    assert added.json()["price"] == 25.0

    item_id = added.json()["id"]
    patched = api.patch(f"/api/appointment-services/{item_id}", json={"price": 20})
    assert patched.json()["price"] == 20

    assert [i["id"] for i in api.get(base_url).json()] == [item_id]
    assert api.delete(f"/api/appointment-services/{item_id}").status_code == 204
    assert api.get(base_url).json() == []


def test_broken_settings_return_server_error(api, db_session):
    from app.domain.settings.service import SettingsService

    settings = SettingsService(db_session).get_settings()
    settings.working_hours = {"start": "18:00", "end": "08:00"}
    db_session.commit()

    response = api.post("/api/appointments/validate-time", json={"date": "2025-01-06T12:30:00Z"})

    assert response.status_code == 500
    assert response.json()["detail"].startswith("Configuração inválida")


def test_list_without_day_filter_ignores_broken_settings(api, db_session, book, client_and_service):
    from app.domain.settings.service import SettingsService

    client, service = client_and_service
    book(client["id"], service["id"])
    settings = SettingsService(db_session).get_settings()
    settings.working_hours = {"start": "18:00", "end": "08:00"}
    db_session.commit()

    listed = api.get("/api/appointments")
    by_client = api.get("/api/appointments", params={"clientId": client["id"]})
    by_day = api.get("/api/appointments", params={"date": "2025-01-06"})

    assert listed.status_code == 200
    assert len(listed.json()) == 1
    assert by_client.status_code == 200
    assert by_day.status_code == 500
