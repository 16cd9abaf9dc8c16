"""Configuration management for the key/value engine."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ReplConfig(BaseModel):
    """Interactive shell configuration."""

    prompt: str = Field(default=">> ", description="Prompt printed before each line")
    echo_errors_to_stderr: bool = Field(
        default=False, description="Write error messages to stderr instead of stdout"
    )


class ServerConfig(BaseModel):
    """Metrics endpoint configuration."""

    metrics_enabled: bool = Field(default=False, description="Start the Prometheus endpoint")
    metrics_port: int = Field(default=8002, ge=1, le=65535, description="Prometheus metrics port")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING", description="Log level"
    )
    log_format: Literal["json", "console"] = Field(default="console", description="Log format")
    otel_endpoint: str | None = Field(
        default=None, description="OpenTelemetry collector endpoint"
    )
    otel_service_name: str = Field(default="memkv", description="Service name for tracing")


class Config(BaseSettings):
    """Main configuration for the key/value engine."""

    model_config = SettingsConfigDict(
        env_prefix="MEMKV_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    repl: ReplConfig = Field(default_factory=ReplConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
