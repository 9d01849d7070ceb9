"""Environment-backed deployment settings, read once by config/settings.py."""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from events.domain import SORTABLE_FIELDS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class EnvSettings(BaseSettings):
    # App
    django_secret_key: str = "django-insecure-dev-only-key"
    django_debug: bool = False
    # Comma-separated list of hosts
    django_allowed_hosts: str = "localhost,127.0.0.1,testserver"

    # Database: PostgreSQL when postgres_db is set, SQLite otherwise
    postgres_db: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = ""
    postgres_host: str = "localhost"
    postgres_port: int = Field(default=5432, gt=0)

    # Event listing defaults
    events_default_page_size: int = Field(default=10, gt=0)
    events_default_sort_field: str = "name"

    # Logging; defaults to DEBUG when django_debug is on, INFO otherwise
    log_level: Optional[LogLevel] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @field_validator("events_default_sort_field")
    @classmethod
    def validate_sort_field(cls, value: str) -> str:
        if value not in SORTABLE_FIELDS:
            raise ValueError(
                f"Invalid events_default_sort_field '{value}'. "
                f"Must be one of: {', '.join(SORTABLE_FIELDS)}"
            )
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value

    @property
    def allowed_hosts(self) -> list[str]:
        return [host.strip() for host in self.django_allowed_hosts.split(",") if host.strip()]

    @property
    def effective_log_level(self) -> str:
        if self.log_level is not None:
            return self.log_level
        return "DEBUG" if self.django_debug else "INFO"
