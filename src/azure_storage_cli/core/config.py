"""Configuration management for azure-storage."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "WARNING"
    otel_enabled: bool = False
    otel_service_name: str = "azure-storage"
    endpoint_suffix: str = "core.windows.net"

    model_config = {
        "env_prefix": "AZURE_STORAGE_CLI_",
        "case_sensitive": False,
    }


settings = Settings()
