"""Configuration management for swift-tools."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "swift-tools"
    otel_exporter_endpoint: str = "http://localhost:4317"

    storage_url: Optional[str] = None
    auth_token: Optional[str] = None
    request_timeout: float = 120.0

    model_config = {
        "env_prefix": "SWIFT_TOOLS_",
        "case_sensitive": False,
    }


settings = Settings()
