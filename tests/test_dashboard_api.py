"""Tests for today's stats and the recent activity feed."""
from datetime import datetime, timedelta

from app.domain.dashboard.service import DashboardService, daily_slots
from app.domain.scheduling import BusinessHoursConfig
from app.models import Appointment, Client, GalleryImage, Service

SAO_PAULO = "America/Sao_Paulo"


def business_hours(start="08:00", end="18:00") -> BusinessHoursConfig:
    return BusinessHoursConfig.build(
        timezone=SAO_PAULO, working_days=range(7), working_hours={"start": start, "end": end}
    )


def seed_client_and_service(db_session):
    client = Client(name="Maria", cpf="12345678909", phone="11987654321")
    service = Service(name="Manicure", duration=45, price=35.0, points=10)
    db_session.add_all([client, service])
    db_session.commit()
    return client, service


def test_daily_slots_follow_configured_window():
    assert daily_slots(business_hours()) == 13
    assert daily_slots(business_hours("09:00", "12:00")) == 4


def test_today_stats_use_local_day(db_session):
    client, service = seed_client_and_service(db_session)
    # 2025-01-06 22:00 local (01:00 UTC next day) counts for Monday
    now = datetime(2025, 1, 6, 15, 0)
    db_session.add_all(
        [
            Appointment(client_id=client.id, service_id=service.id, date=datetime(2025, 1, 6, 12, 0),
                        price=35.0, status="completed"),
            Appointment(client_id=client.id, service_id=service.id, date=datetime(2025, 1, 7, 1, 0),
                        price=50.0, status="scheduled"),
            Appointment(client_id=client.id, service_id=service.id, date=datetime(2025, 1, 7, 12, 0),
                        price=80.0, status="completed"),
        ]
    )
    db_session.commit()

    stats = DashboardService(db_session).get_today_stats(business_hours(), now=now)

    assert stats.todayAppointments == 2
    assert stats.todayRevenue == 35.0
    assert stats.occupancyRate == 15  # 2 of 13 slots


def test_occupancy_is_capped(db_session):
    client, service = seed_client_and_service(db_session)
    now = datetime(2025, 1, 6, 15, 0)
    db_session.add_all(
        [
            Appointment(client_id=client.id, service_id=service.id,
                        date=datetime(2025, 1, 6, 12, 0) + timedelta(minutes=i), price=35.0)
            for i in range(6)
        ]
    )
    db_session.commit()

    stats = DashboardService(db_session).get_today_stats(business_hours("09:00", "10:00"), now=now)

    assert stats.occupancyRate == 100


def test_new_clients_counts_last_seven_days(db_session):
    now = datetime(2025, 1, 10, 12, 0)
    db_session.add_all(
        [
            Client(name="Nova", cpf="11111111111", phone="11911111111", created_at=now - timedelta(days=2)),
            Client(name="Antiga", cpf="22222222222", phone="11922222222", created_at=now - timedelta(days=30)),
        ]
    )
    db_session.commit()

    stats = DashboardService(db_session).get_today_stats(business_hours(), now=now)

    assert stats.newClients == 1


def test_today_stats_endpoint(api, make_client):
    make_client()

    body = api.get("/api/stats/today").json()

    assert body == {"todayAppointments": 0, "todayRevenue": 0.0, "newClients": 1, "occupancyRate": 0}


def test_recent_activities_merge_and_order(api, db_session):
    base = datetime(2025, 1, 6, 12, 0)
    client, service = seed_client_and_service(db_session)
    client.created_at = base
    db_session.add_all(
        [
            Appointment(client_id=client.id, service_id=service.id, date=base, price=35.0,
                        status="completed", created_at=base, updated_at=base + timedelta(hours=3)),
            Appointment(client_id=client.id, service_id=service.id, date=base, price=35.0,
                        status="no_show", created_at=base, updated_at=base + timedelta(hours=1)),
            GalleryImage(url="https://cdn.example.com/1.jpg", title="Francesinha",
                         created_at=base + timedelta(hours=2)),
        ]
    )
    db_session.commit()

    activities = api.get("/api/activities/recent").json()

    assert [a["description"] for a in activities] == [
        "Agendamento concluído: Maria - Manicure",
        "Foto adicionada à galeria: Francesinha",
        "Agendamento faltou: Maria - Manicure",
        "Nova cliente cadastrada: Maria",
    ]
    assert activities[0]["icon"] == "Check"
    assert activities[0]["iconBg"] == "bg-green-100"
    assert activities[1]["type"] == "gallery"
    assert activities[2]["icon"] == "X"


def test_recent_activities_limited_to_six(api, make_client, make_service, book):
    service = make_service()
    for i in range(5):
        client = make_client(name=f"Cliente {i}", cpf=f"{i}" * 11, phone="11987654321")
        book(client["id"], service["id"])

    activities = api.get("/api/activities/recent").json()

    assert len(activities) == 6
