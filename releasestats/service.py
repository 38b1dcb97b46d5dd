"""
Download statistics service.

Entry point for the handler layer: validates input, confirms the repository
exists, and returns the memoized download total.
"""

import re
from collections.abc import Iterable
from typing import Any

from releasestats.cache import CacheStore, create_cache_store
from releasestats.canonicalize import cache_key
from releasestats.client import AsyncGitHubClient
from releasestats.config import StatsConfig
from releasestats.exceptions import (
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    RateLimitedError,
    ValidationError,
)
from releasestats.logging import get_logger
from releasestats.memoizer import ResultMemoizer
from releasestats.types.repos import RepoMetadata, RepoRef
from releasestats.types.stats import SuffixFilter

logger = get_logger()

_OWNER_PATTERN = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,38})")
_REPO_PATTERN = re.compile(r"[A-Za-z0-9_.-]{1,100}")


def parse_repo_ref(owner: str | None, repo: str | None) -> RepoRef:
    """
    Validate owner and repository names.

    Raises:
        ValidationError: If either is missing or malformed
    """
    if not owner or not repo:
        raise ValidationError("VALIDATION_ERROR", "repo and owner are required")
    if not _OWNER_PATTERN.fullmatch(owner):
        raise ValidationError("VALIDATION_ERROR", f"invalid owner: {owner!r}")
    if not _REPO_PATTERN.fullmatch(repo) or repo in (".", ".."):
        raise ValidationError("VALIDATION_ERROR", f"invalid repo: {repo!r}")
    return RepoRef(owner=owner, repo=repo)


class DownloadStatsService:
    """
    Aggregates release download counts behind a shared cache.

    One instance is created at startup and shared by all requests; the cache
    store it holds is the process-wide cache.

    Example:
        ```python
        service = DownloadStatsService(AsyncGitHubClient.from_env(), MemoryCacheStore())
        count = await service.count_downloads("octo", "hello", suffixes="deb,rpm")
        ```
    """

    def __init__(
        self,
        client: AsyncGitHubClient,
        cache: CacheStore,
        config: StatsConfig | None = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.config = config or StatsConfig()
        self.memoizer = ResultMemoizer(client, cache, self.config)

    @classmethod
    def from_env(cls) -> "DownloadStatsService":
        """
        Build a service from GITHUB_PAT, GITHUB_API_URL, REDIS_URL and RELEASESTATS_* variables.

        Raises:
            ConfigurationError: If required variables are missing or malformed
        """
        config = StatsConfig.from_env()
        return cls(AsyncGitHubClient.from_env(), create_cache_store(config), config)

    async def check_repository(self, repo: RepoRef) -> RepoMetadata:
        """
        Confirm ``repo`` exists and is readable.

        Successful lookups are cached for ``repo_ttl``; failures are not.

        Raises:
            NotFoundError: If upstream reports the repository missing,
                forbidden, or the token rate limited
        """
        key = cache_key("repo", owner=repo.owner, repo=repo.repo)

        cached = await self.cache.get(key)
        if cached is not None:
            return RepoMetadata.from_dict(cached)

        try:
            metadata = await self.client.repos.get(repo.owner, repo.repo)
        except (NotFoundError, AuthenticationError, AuthorizationError, RateLimitedError) as e:
            logger.info(f"repository {repo} unavailable: {e}")
            raise NotFoundError(
                "REPO_NOT_FOUND",
                f"Repository {repo} not found or inaccessible: {e.message}",
                e.request_id,
            ) from e

        await self.cache.set(key, metadata.to_dict(), self.config.repo_ttl)
        return metadata

    async def count_downloads(
        self,
        owner: str | None,
        repo: str | None,
        suffixes: str | Iterable[str] | None = None,
    ) -> str:
        """
        Formatted total downloads of ``owner/repo`` release assets.

        Args:
            owner: Repository owner login
            repo: Repository name
            suffixes: Extensions to count, comma-separated or as a sequence;
                None counts the most downloaded asset of each release

        Returns:
            Count with thousands grouping, e.g. "12,345"

        Raises:
            ValidationError: On malformed input, before any upstream call
            NotFoundError: If the repository does not exist or is inaccessible
            StatsError: On upstream or cache backend failures
        """
        repo_ref = parse_repo_ref(owner, repo)
        suffix_filter = SuffixFilter.parse(suffixes)

        await self.check_repository(repo_ref)
        return await self.memoizer.count(repo_ref, suffix_filter)

    async def close(self) -> None:
        """Close the upstream client and the cache store."""
        await self.client.close()
        await self.cache.close()

    async def __aenter__(self) -> "DownloadStatsService":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()
