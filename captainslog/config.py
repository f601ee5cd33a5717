"""
Application configuration. Loads from environment variables.
Secrets and sensitive config must never be hardcoded.
"""

import os

from dotenv import load_dotenv

load_dotenv()
from functools import lru_cache


@lru_cache(maxsize=1)
def get_settings() -> "Settings":
    """Return cached settings instance."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    app_name: str = "Captain's Log"
    debug: bool = False
    app_base_url: str = "https://captainslog.ae"

    # Database (postgresql+psycopg for psycopg3; sqlite URLs accepted for tests)
    database_url: str = "postgresql+psycopg://localhost:5432/captainslog_dev"
    db_connect_timeout: int = 10  # seconds

    # Security
    secret_key: str = ""
    cron_secret: str = ""  # Required for /api/cron/* endpoints

    # Alert engine. "Today" is taken in this zone before any day arithmetic.
    alert_timezone: str = "UTC"
    alert_lookahead_days: int = 30  # date alerts further out are not surfaced
    alert_urgent_days: int = 3  # 0..N days remaining -> urgent
    alert_hours_lookahead: int = 50  # hours alerts further out are not surfaced
    alert_hours_urgent: int = 10  # 0..N hours remaining -> urgent
    document_reminder_days: int = 30  # default when a document has no reminder_days

    # Digest
    digest_advance_notice_days: int = 14

    # SMTP / Email
    smtp_host: str = ""
    smtp_port: int = 587
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from: str = ""

    def __init__(self) -> None:
        self.app_name = os.getenv("APP_NAME", self.app_name)
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.app_base_url = os.getenv("APP_BASE_URL", self.app_base_url).rstrip("/")

        default_user = os.getenv("PGUSER") or os.getenv("USER") or "postgres"
        default_url = (
            f"postgresql+psycopg://{default_user}:"
            f"{os.getenv('PGPASSWORD', '')}@"
            f"{os.getenv('PGHOST', 'localhost')}:"
            f"{os.getenv('PGPORT', '5432')}/"
            f"{os.getenv('PGDATABASE', 'captainslog_dev')}"
        )
        raw_url = os.getenv("DATABASE_URL", default_url)
        # Ensure psycopg3 driver if URL uses generic postgresql://
        if raw_url.startswith("postgresql://") and not raw_url.startswith("postgresql+psycopg"):
            raw_url = raw_url.replace("postgresql://", "postgresql+psycopg://", 1)
        self.database_url = raw_url
        self.db_connect_timeout = int(os.getenv("DB_CONNECT_TIMEOUT", str(self.db_connect_timeout)))

        self.secret_key = os.getenv("SECRET_KEY", "")
        self.cron_secret = os.getenv("CRON_SECRET", "")

        self.alert_timezone = os.getenv("ALERT_TIMEZONE", self.alert_timezone)
        self.alert_lookahead_days = int(
            os.getenv("ALERT_LOOKAHEAD_DAYS", str(self.alert_lookahead_days))
        )
        self.alert_urgent_days = int(os.getenv("ALERT_URGENT_DAYS", str(self.alert_urgent_days)))
        self.alert_hours_lookahead = int(
            os.getenv("ALERT_HOURS_LOOKAHEAD", str(self.alert_hours_lookahead))
        )
        self.alert_hours_urgent = int(
            os.getenv("ALERT_HOURS_URGENT", str(self.alert_hours_urgent))
        )
        self.document_reminder_days = int(
            os.getenv("DOCUMENT_REMINDER_DAYS", str(self.document_reminder_days))
        )
        self.digest_advance_notice_days = int(
            os.getenv("DIGEST_ADVANCE_NOTICE_DAYS", str(self.digest_advance_notice_days))
        )

        self.smtp_host = os.getenv("SMTP_HOST", "")
        self.smtp_port = int(os.getenv("SMTP_PORT", "587"))
        self.smtp_user = os.getenv("SMTP_USER", "")
        self.smtp_password = os.getenv("SMTP_PASSWORD", "")
        self.smtp_from = os.getenv("SMTP_FROM", "")
