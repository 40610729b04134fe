"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache), one instance per process
    - test_resources_version, when set, overrides the installed library version

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Blank TEST_RESOURCES_VERSION is treated as unset
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Version stamped on synthesized micronaut-test-resources-* coordinates
    test_resources_version: str | None = None

    @field_validator("test_resources_version", mode="before")
    @classmethod
    def blank_version_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v.strip() if isinstance(v, str) else v

    # Distribution queried when no override is configured
    distribution_name: str = "test-resources-classpath"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
