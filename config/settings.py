from __future__ import annotations

from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings

from .routing import RoutingConfig


class Settings(BaseSettings):
    """Runtime configuration, read from ROUTING_* environment variables or .env."""

    log_level: str = Field(default="INFO")
    log_dir: str = Field(default="logs")
    network_file: str | None = Field(default=None)
    default_alternatives: int = Field(default=3, ge=1)
    default_distribution_paths: int = Field(default=3, ge=1)

    class Config:
        env_prefix = "ROUTING_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False

    def routing_config(self) -> RoutingConfig:
        return RoutingConfig(
            default_alternatives=self.default_alternatives,
            default_distribution_paths=self.default_distribution_paths,
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
