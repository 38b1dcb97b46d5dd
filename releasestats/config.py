"""
Configuration for the aggregation engine.

TTLs are in seconds. Release pages that came back full are settled history
and live long; partial pages sit at the moving frontier of new releases and
are refreshed hourly. The aggregate itself is kept only for a few minutes.
"""

import os
from dataclasses import dataclass

from releasestats.exceptions import ConfigurationError

_ENV_PREFIX = "RELEASESTATS_"


@dataclass
class StatsConfig:
    """Tunables for pagination and caching."""

    page_size: int = 30
    full_page_ttl: int = 60 * 60 * 24
    partial_page_ttl: int = 60 * 60
    asset_ttl: int = 360
    result_ttl: int = 360
    repo_ttl: int = 60 * 60 * 24
    max_pages: int = 1000
    redis_url: str | None = None
    cache_prefix: str = "releasestats:"

    def __post_init__(self) -> None:
        if not 1 <= self.page_size <= 100:
            raise ConfigurationError(f"page_size must be between 1 and 100, got {self.page_size}")
        for name in ("full_page_ttl", "partial_page_ttl", "asset_ttl", "result_ttl", "repo_ttl", "max_pages"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive, got {getattr(self, name)}")

    @classmethod
    def from_env(cls) -> "StatsConfig":
        """
        Create a configuration from environment variables.

        Environment variables:
            RELEASESTATS_PAGE_SIZE, RELEASESTATS_FULL_PAGE_TTL,
            RELEASESTATS_PARTIAL_PAGE_TTL, RELEASESTATS_ASSET_TTL,
            RELEASESTATS_RESULT_TTL, RELEASESTATS_REPO_TTL,
            RELEASESTATS_MAX_PAGES: integer overrides (optional)
            RELEASESTATS_CACHE_PREFIX: Redis key namespace (optional)
            REDIS_URL: use a Redis cache instead of process memory (optional)

        Raises:
            ConfigurationError: If an integer override is malformed
        """
        overrides: dict[str, int] = {}
        for name in ("page_size", "full_page_ttl", "partial_page_ttl", "asset_ttl", "result_ttl", "repo_ttl", "max_pages"):
            env_name = _ENV_PREFIX + name.upper()
            raw = os.environ.get(env_name)
            if raw is None or raw == "":
                continue
            try:
                overrides[name] = int(raw)
            except ValueError:
                raise ConfigurationError(f"{env_name} must be an integer, got {raw!r}") from None

        return cls(
            **overrides,
            redis_url=os.environ.get("REDIS_URL") or None,
            cache_prefix=os.environ.get(_ENV_PREFIX + "CACHE_PREFIX", "releasestats:"),
        )
