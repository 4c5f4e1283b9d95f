from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from contact_proxy.clients.freshdesk import validate_domain

PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    app_name: str = "Contact Proxy API"
    app_env: str = "development"
    app_debug: bool = False
    api_prefix: str = "/api"
    cors_origins: str = "http://localhost:5173"
    app_host: str = "127.0.0.1"
    app_port: int = 8000
    log_level: str = "INFO"
    freshdesk_domain: str = ""
    freshdesk_api_key: SecretStr = SecretStr("")
    freshdesk_timeout_seconds: float = 10.0
    ticket_default_tags: str = ""

    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("freshdesk_domain")
    @classmethod
    def _check_freshdesk_domain(cls, value: str) -> str:
        if not value.strip():
            return ""
        return validate_domain(value)

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def ticket_default_tags_list(self) -> list[str]:
        return [tag.strip() for tag in self.ticket_default_tags.split(",") if tag.strip()]

    @property
    def freshdesk_configured(self) -> bool:
        return bool(self.freshdesk_domain.strip() and self.freshdesk_api_key.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    return Settings()
