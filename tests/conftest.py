"""Shared test fixtures."""
import os

# Must be set before the app modules read their configuration
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECURITY_HEADERS_ENABLED"] = "true"
os.environ["DB_LOG_SLOW_QUERIES"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.database import Base, SessionLocal, engine  # noqa: E402
from app.main import app  # noqa: E402

# Monday 2025-01-06, 09:30 in São Paulo
MONDAY_MORNING = "2025-01-06T12:30:00Z"


@pytest.fixture(autouse=True)
def database():
    """Fresh in-memory schema per test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def api() -> TestClient:
    return TestClient(app)


@pytest.fixture
def db_session():
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture
def make_client(api):
    """Create a client through the API and return its JSON."""
    def _create(name="Maria Silva", cpf="123.456.789-09", phone="(11) 98765-4321", **extra):
        response = api.post("/api/clients", json={"name": name, "cpf": cpf, "phone": phone, **extra})
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def make_service(api):
    """Create a catalog service through the API and return its JSON."""
    def _create(name="Manicure", duration=45, price=35.0, points=10, **extra):
        response = api.post(
            "/api/services",
            json={"name": name, "duration": duration, "price": price, "points": points, **extra},
        )
        assert response.status_code == 201, response.text
        return response.json()
    return _create


@pytest.fixture
def book(api):
    """Book an appointment through the API and return the response."""
    def _book(client_id, service_id, date=MONDAY_MORNING, **extra):
        return api.post(
            "/api/appointments",
            json={"clientId": client_id, "serviceId": service_id, "date": date, **extra},
        )
    return _book
