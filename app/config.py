import os
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./salon.db")

ENVIRONMENT = os.getenv("ENVIRONMENT", "development").lower()

# Frontend base URL (mobile app + admin panel are served from the same origin)
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")

ALLOWED_ORIGINS = os.getenv(
    "ALLOWED_ORIGINS",
    f"{FRONTEND_URL},http://localhost:5000,http://localhost:3000",
).split(",")

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"

# Rate limiting needs Redis; disable only for local development and tests
RATE_LIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
LOGIN_RATE_LIMIT = int(os.getenv("LOGIN_RATE_LIMIT", "10"))  # per minute per IP
BOOKING_RATE_LIMIT = int(os.getenv("BOOKING_RATE_LIMIT", "30"))  # per minute per IP

# Default business settings, used when the system_settings row is created
DEFAULT_TIMEZONE = os.getenv("DEFAULT_TIMEZONE", "America/Sao_Paulo")
DEFAULT_HOLIDAY_REGION = os.getenv("DEFAULT_HOLIDAY_REGION", "sao_paulo")
DEFAULT_WORKING_DAYS = [1, 2, 3, 4, 5, 6]  # Monday to Saturday
DEFAULT_WORKING_HOURS = {"start": "08:00", "end": "18:00"}

# Average appointment length used for the occupancy rate on the dashboard
AVERAGE_APPOINTMENT_MINUTES = int(os.getenv("AVERAGE_APPOINTMENT_MINUTES", "45"))
