"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_max_output_tokens: int | None = None
    openai_store: bool = False
    supabase_url: str
    supabase_service_key: str
    storage_bucket: str = "catches"
    catches_table: str = "catches"
    api_base_url: str | None = None
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 3001
    max_image_edge: int = 1568
    image_quality: int = 80
    image_delivery: Literal["inline", "signed_url"] = "inline"
    signed_url_ttl_seconds: int = 900
    response_parsing: Literal["strict", "extract"] = "strict"
    default_display_name: str = "Angler"
    cors_origins: str = "*"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse allowed CORS origins from env."""
    if raw is None:
        return []
    cleaned = raw.strip()
    if cleaned == "*":
        return ["*"]
    origins: list[str] = []
    for chunk in cleaned.split(","):
        value = chunk.strip().rstrip("/")
        if value and value not in origins:
            origins.append(value)
    return origins
