"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "ignore"}

    # Empty disables the X-API-Key check (the badge widget calls us directly)
    api_key: str = ""

    redis_url: str = "redis://localhost:6379"
    environment: str = "development"
    log_level: str = "INFO"

    canonical_domain: str = "https://toolcategory.com/"
    badge_src: str = "https://toolcategory.com/badge-light.svg"
    badge_alt: str = "Featured on ToolCategory.com"

    fetch_user_agent: str = "ToolCategoryBadgeBot/1.0 (+https://toolcategory.com)"
    fetch_timeout_seconds: float = 25.0
    max_html_bytes: int = 1_000_000

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"


@lru_cache
def get_settings() -> Settings:
    return Settings()
