# barberbook/config.py

import os
import warnings
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

# Default is a private in-memory SQLite database, re-seeded on every start
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite://")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# When true, cancelled bookings stop blocking their slot
RELEASE_CANCELLED_SLOTS = os.getenv("RELEASE_CANCELLED_SLOTS", "false").lower() == "true"

# Signs the OAuth state parameter
SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    warnings.warn(
        "SECRET_KEY not set! Using insecure default - DO NOT USE IN PRODUCTION", RuntimeWarning, stacklevel=2
    )
    SECRET_KEY = "INSECURE-DEV-KEY-CHANGE-IN-PRODUCTION"  # noqa: S105

# Google Calendar OAuth
GOOGLE_CLIENT_ID = os.getenv("GOOGLE_CLIENT_ID")
GOOGLE_CLIENT_SECRET = os.getenv("GOOGLE_CLIENT_SECRET")
GOOGLE_REDIRECT_URI = os.getenv("GOOGLE_REDIRECT_URI", "http://localhost:3000/auth/google/callback")

# AI-written confirmation messages
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY")
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4")

# Confirmation email (SMTP)
SMTP_HOST = os.getenv("SMTP_HOST")
SMTP_PORT = int(os.getenv("SMTP_PORT", "587"))
SMTP_USERNAME = os.getenv("SMTP_USERNAME")
SMTP_PASSWORD = os.getenv("SMTP_PASSWORD")
EMAIL_FROM_ADDRESS = os.getenv("EMAIL_FROM_ADDRESS", "Barberbook <noreply@barberbook.local>")
# Shop inbox that receives a copy of every new booking
NOTIFY_EMAIL = os.getenv("NOTIFY_EMAIL")

# Bind address for `python -m barberbook`
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8000"))
