"""
Worker settings loaded from environment variables.
"""

from typing import Any, Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from docworker.shared.errors import ConfigError

# Variables that must be present in every environment
REQUIRED_ENV = ("REDIS_HOST", "S3_BUCKET_NAME", "AWS_REGION")


class Settings(BaseSettings):
    """Runtime configuration for the document worker."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Redis / BullMQ
    redis_host: str
    redis_port: int = 6379
    redis_password: str | None = None
    redis_tls: bool = False

    # Storage
    s3_bucket_name: str
    aws_region: str
    s3_endpoint_url: str | None = None

    # Queue
    pdf_generation_queue: str = "pdf-generation"
    worker_concurrency: int = Field(default=1, ge=1)

    # Rendering
    local_chromium_path: str | None = None
    image_idle_timeout_ms: int = Field(default=2000, ge=0)

    # Service
    environment: str = "production"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"
    host: str = "0.0.0.0"
    port: int = 8080

    @field_validator("redis_password", "local_chromium_path", "s3_endpoint_url", mode="before")
    @classmethod
    def _empty_to_none(cls, value: Any) -> Any:
        # Empty strings mean "not configured"
        if value == "":
            return None
        return value

    @field_validator("redis_tls", mode="before")
    @classmethod
    def _parse_tls(cls, value: Any) -> bool:
        # Only the literal string "true" enables TLS
        if isinstance(value, bool):
            return value
        return str(value) == "true"

    @property
    def redis_url(self) -> str:
        """Connection URL for the BullMQ Redis client."""
        scheme = "rediss" if self.redis_tls else "redis"
        auth = f":{self.redis_password}@" if self.redis_password else ""
        return f"{scheme}://{auth}{self.redis_host}:{self.redis_port}"


def load_settings(**overrides: Any) -> Settings:
    """
    Build settings from the environment, failing fast on missing variables.

    Raises:
        ConfigError: If a required variable is missing or a value is invalid
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        for error in e.errors():
            if error["type"] == "missing":
                name = str(error["loc"][0]).upper()
                raise ConfigError(
                    f"Missing required environment variable: {name}",
                    details={"variable": name},
                ) from e
        raise ConfigError(f"Invalid configuration: {e}") from e
