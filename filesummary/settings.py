"""Runtime settings, read from FILESUMMARY_* environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="FILESUMMARY_")

	log_level: str = "WARNING"
	host: str = "127.0.0.1"
	port: int = 8000


def get_settings() -> Settings:
	return Settings()
