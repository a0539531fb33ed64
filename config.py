"""Configuration settings for the media range server."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BUFFER_SIZE = 8 * 1024


class Settings(BaseSettings):
    """Served resource, server binding and logging options."""

    model_config = SettingsConfigDict(
        env_prefix="MEDIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    #  Served resource
    media_path: Path = Field(
        default=Path("video.mp4"), description="File served on the media route"
    )
    route: str = Field(default="/", description="URL path of the media route")
    buffer_size: int = Field(
        default=DEFAULT_BUFFER_SIZE,
        gt=0,
        description="Maximum bytes per streamed chunk",
    )

    #  Server
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8080, ge=0, le=65535)

    #  Logging
    log_level: str = Field(default="INFO")
    log_to_file: bool = Field(default=False, description="Also write JSON logs")
    log_dir: Path = Field(default=Path("logs"))

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("route")
    @classmethod
    def _normalize_route(cls, value: str) -> str:
        return value if value.startswith("/") else f"/{value}"


settings = Settings()
