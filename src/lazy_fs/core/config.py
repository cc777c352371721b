"""Configuration management for lazy-fs."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "lazy-fs"
    text_encoding: str = "utf-8"

    model_config = {
        "env_prefix": "LAZY_FS_",
        "case_sensitive": False,
    }


settings = Settings()
