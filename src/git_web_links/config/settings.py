"""Application settings using Pydantic Settings."""

from functools import lru_cache
from typing import Protocol

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from git_web_links.core.models.link import LinkType, StaticServer


class SettingsProvider(Protocol):
    """Read-only view of the settings used while creating links."""

    @property
    def default_link_type(self) -> LinkType | None: ...

    @property
    def use_short_hashes(self) -> bool: ...

    @property
    def default_branch(self) -> str: ...

    def servers_for(self, key: str) -> list[StaticServer]: ...


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GIT_WEB_LINKS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # General
    log_level: str = "WARNING"

    # Links
    default_link_type: LinkType | None = None  # None means "branch"
    use_short_hashes: bool = False
    default_branch: str = ""  # Empty means "use the remote's HEAD"

    # Git
    preferred_remote_name: str = "origin"
    git_timeout: float | None = 30.0

    # Self-hosted servers, keyed by the handler's settings key.
    # e.g. GIT_WEB_LINKS_SERVERS='{"github_enterprise": [{"http": "https://git.corp"}]}'
    servers: dict[str, list[StaticServer]] = Field(default_factory=dict)

    def servers_for(self, key: str) -> list[StaticServer]:
        return list(self.servers.get(key, []))


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
