"""Runtime settings, read from `JOB_FEED_*` environment variables or a .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="JOB_FEED_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    remotive_url: str = "https://remotive.com/api/remote-jobs"
    muse_url: str = "https://www.themuse.com/api/public/jobs?page=1"
    remoteok_url: str = "https://remoteok.com/api"

    # Bounds each source request; a hung source becomes an empty one.
    request_timeout_s: float = 20.0
    # Remote OK rejects clients without a browser-like agent.
    user_agent: str = "Mozilla/5.0 (compatible; job-feed/0.1)"

    preview_length: int = 180


@lru_cache
def get_settings() -> Settings:
    return Settings()
