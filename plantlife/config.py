"""Configuration management for the Easy Plant Life site backend."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_prefix="EPL_", extra="ignore")

    # Blog feed (Medium RSS)
    medium_username: str = "easyplantlife"
    feed_host: str = "medium.com"
    feed_max_posts: int = Field(default=10, ge=1)
    feed_timeout_seconds: float = Field(default=10.0, gt=0)

    # Optional feed cache, disabled when TTL is 0
    feed_cache_ttl_seconds: int = Field(default=0, ge=0)
    feed_cache_splay_max: int = Field(default=120, ge=0)  # randomized extra TTL
    redis_url: str = "redis://localhost:6379/0"

    # Resend (newsletter audience and transactional emails)
    resend_api_key: str = Field(default="")
    resend_audience_id: str = Field(default="")
    resend_from_email: str = Field(default="Easy Plant Life <hello@easyplantlife.com>")
    contact_email: str = Field(default="hello@easyplantlife.com")

    # Public site
    site_url: str = "https://easyplantlife.com"

    # CORS
    frontend_origin: str = "http://localhost:3000"

    # Environment
    env: str = Field(default="dev", pattern="^(dev|prod)$")

    @property
    def feed_cache_enabled(self) -> bool:
        return self.feed_cache_ttl_seconds > 0


_settings: Settings | None = None


def get_settings() -> Settings:
    """Get cached settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
