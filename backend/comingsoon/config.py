# backend/comingsoon/config.py
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    APP_NAME: str = "comingsoon"

    # Auth / CORS (required, the service refuses to start without them)
    SECRET_TOKEN: str
    HOST: str

    # Storage
    EMAIL_FILE_PATH: str = "emails.txt"

    LOG_LEVEL: str = "INFO"

    # Console-script listener
    BIND_ADDRESS: str = "0.0.0.0"
    PORT: int = 8080

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("SECRET_TOKEN", "HOST")
    @classmethod
    def require_non_blank(cls, value: str, info) -> str:
        if not value or not value.strip():
            raise ValueError(f"{info.field_name} environment variable is not set")
        return value

    @field_validator("EMAIL_FILE_PATH")
    @classmethod
    def default_email_file_path(cls, value: str) -> str:
        # empty env var behaves like an unset one
        return value or "emails.txt"
