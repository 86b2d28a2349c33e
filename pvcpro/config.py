"""Application configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_ADMIN_PASSWORD = "admin123"


class Settings(BaseSettings):
    # Database (postgresql+asyncpg://... for hosted, sqlite+aiosqlite://... for local)
    database_url: str = "sqlite+aiosqlite:///./pvcpro.db"
    seed_default_catalogue: bool = True

    # Redis (admin sessions)
    redis_url: str = "redis://localhost:6379/0"

    # App
    log_level: str = "INFO"
    environment: str = "development"
    site_name: str = "PVC Pro Solutions"

    # Admin panel. Shared password, placeholder auth only.
    admin_password: str = DEFAULT_ADMIN_PASSWORD
    admin_session_ttl_seconds: int = 86400  # 24 hours

    # Lead-capture modal
    lead_capture_policy: str = "rearm"  # rearm | once
    lead_capture_rearm_hours: int = 24

    # EmailJS (contact form relay)
    emailjs_service_id: str = ""
    emailjs_template_id: str = ""
    emailjs_public_key: str = ""
    emailjs_api_url: str = "https://api.emailjs.com/api/v1.0/email/send"

    # Telegram (new quotation alerts to sales)
    telegram_bot_token: str = ""
    telegram_notify_chat_id: Optional[str] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
