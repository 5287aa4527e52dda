from functools import lru_cache
from typing import Annotated, Any, Literal
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    # Application Configuration
    API_NAME: str = "mdpages"
    API_SUMMARY: str = "Publish Markdown as styled HTML pages"
    MDPAGES_VERSION: str = "v0.1.x"

    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    USER_AGENT: str = "mdpages"

    CORS_ENABLED: bool = False
    CORS_ORIGINS: Annotated[list[str], NoDecode] = ["*"]

    # Page Store
    PAGE_STORE_BACKEND: Literal["http", "memory"] = "http"
    STORE_URL: str = "http://localhost:3000"
    HOMEPAGE_ID: str = "home"

    # Remote Files
    REMOTE_BASE_URL: str = "https://raw.githubusercontent.com"
    REMOTE_BRANCH: str = "main"
    REMOTE_DEFAULT_PATH: str = "README.md"

    # Limits
    REQUEST_TIMEOUT_SECONDS: float = 10
    MAX_BODY_BYTES: int = 1024 * 1024

    # Rendering
    CACHE_MAX_AGE: int = 86400
    STYLESHEET_URLS: Annotated[list[str], NoDecode] = [
        "https://cdnjs.cloudflare.com/ajax/libs/tailwindcss/2.2.19/tailwind.min.css",
        "https://unpkg.com/@tailwindcss/typography@0.5.0/dist/typography.min.css",
    ]

    # OpenTelemetry Settings
    OTEL_ENABLED: bool = False
    OTEL_SERVICE_NAME: str = "mdpages"
    OTEL_EXCLUDED_URLS: str = "healthcheck"

    @field_validator("LOG_LEVEL", mode="before")
    def normalize_log_level(cls, v: Any):
        if isinstance(v, str):
            return v.upper()
        return v

    @field_validator("STORE_URL", "REMOTE_BASE_URL", mode="after")
    def strip_trailing_slash(cls, v: str):
        return v.rstrip("/")

    @field_validator("CORS_ORIGINS", "STYLESHEET_URLS", mode="before")
    def validate_list_from_string(cls, v: Any):
        if isinstance(v, str):
            return [item.strip() for item in v.split(",") if item.strip()]
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return Settings()
