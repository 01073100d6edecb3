"""Application configuration settings."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE = ".env"
ENV_FILE_ENCODING = "utf-8"

DEFAULT_LOGO_URL = (
    "https://media.cakeresume.com/image/upload/s--KlgnT1ky--/c_pad,fl_png8,h_400,w_400/"
    "v1630591964/dw7b41vpkqejdyr79t2l.png"
)


class Settings(BaseSettings):
    """Application configuration values loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=ENV_FILE, env_file_encoding=ENV_FILE_ENCODING)

    database_url: str = Field(
        description="Database connection URL used by SQLAlchemy to connect to the DB",
        min_length=1,
    )
    secret_key: str = Field(
        description="Secret key for signing access and password reset tokens", min_length=1
    )
    access_token_expire_minutes: int = Field(
        default=60,
        description="Number of minutes before access tokens expire",
        gt=0,
    )
    reset_token_expire_hours: int = Field(
        default=24,
        description="Number of hours a password reset link stays valid",
        gt=0,
    )
    base_url: str = Field(
        default="http://localhost:8000",
        description="Public base URL used to build links sent by email",
        min_length=1,
    )
    environment: str = Field(
        default="production",
        description="Deployment environment; 'development' exposes error details",
    )
    sendgrid_api_key: str | None = Field(
        default=None,
        description="SendGrid API key used for sending transactional emails via the REST API",
    )
    sendgrid_sender: str | None = Field(
        default=None,
        description="Email address that will appear as the sender of transactional messages",
        min_length=3,
    )
    mail_logo_url: str = Field(
        default=DEFAULT_LOGO_URL,
        description="Logo displayed in the header of transactional emails",
    )
    roles_seed_path: str = Field(
        default="seeders/files/xlsx/roles.xlsx",
        description="Spreadsheet loaded by the roles seeder",
    )
    app_timezone: str = Field(
        default="Asia/Jakarta",
        description="Timezone used when stamping created/updated columns",
    )
    log_level: str = Field(default="INFO", description="Root logging level")
    login_url: str | None = Field(
        default=None,
        description="Sign-in page of the client application linked from the login page",
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000"],
        description="Origins allowed to call the API from a browser (JSON list)",
    )

    @model_validator(mode="after")
    def _validate_sendgrid_pair(self) -> "Settings":
        if bool(self.sendgrid_api_key) ^ bool(self.sendgrid_sender):
            raise ValueError(
                "SENDGRID_API_KEY and SENDGRID_SENDER must both be provided to enable email"
            )
        if self.sendgrid_sender and "@" not in self.sendgrid_sender:
            raise ValueError("SENDGRID_SENDER must be a valid email address")
        return self

    @property
    def is_development(self) -> bool:
        return self.environment.strip().lower() == "development"

    @property
    def email_enabled(self) -> bool:
        return bool(self.sendgrid_api_key and self.sendgrid_sender)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings instance."""

    return Settings()


def reset_settings_cache() -> None:
    """Clear the settings cache to force reloading from the environment."""

    get_settings.cache_clear()


__all__ = ["Settings", "get_settings", "reset_settings_cache"]
