"""Aggregate result memoization."""

from typing import TYPE_CHECKING

from releasestats.aggregator import AssetAggregator
from releasestats.canonicalize import cache_key
from releasestats.collector import ReleaseIdCollector
from releasestats.config import StatsConfig
from releasestats.logging import get_logger
from releasestats.types.repos import RepoRef
from releasestats.types.stats import SuffixFilter

if TYPE_CHECKING:
    from releasestats.cache import CacheStore
    from releasestats.client import AsyncGitHubClient

logger = get_logger("memoizer")


def format_count(total: int) -> str:
    """Format a total with en-US thousands grouping, e.g. ``1,234``."""
    return f"{total:,}"


def result_key(repo: RepoRef, suffix_filter: SuffixFilter | None) -> str:
    return cache_key(
        "result",
        owner=repo.owner,
        repo=repo.repo,
        suffixes=suffix_filter.key_parts() if suffix_filter is not None else None,
    )


class ResultMemoizer:
    """
    Caches the formatted download total for (repo, suffix filter).

    The result TTL is deliberately much shorter than the release page TTLs:
    badges poll the same total often, but it should still move within minutes.
    Concurrent misses for the same key each recompute; nothing serializes them.
    """

    def __init__(
        self,
        client: "AsyncGitHubClient",
        cache: "CacheStore",
        config: StatsConfig | None = None,
    ) -> None:
        self.cache = cache
        self.config = config or StatsConfig()
        self.collector = ReleaseIdCollector(client, cache, self.config)
        self.aggregator = AssetAggregator(client, cache, self.config)

    async def compute(self, repo: RepoRef, suffix_filter: SuffixFilter | None = None) -> int:
        """Run collection and aggregation without consulting the result cache."""
        logger.debug(f"calculating {repo}...")
        release_ids = await self.collector.collect(repo)
        total = await self.aggregator.aggregate(repo, release_ids, suffix_filter)
        logger.debug(f"finished calculating {repo}: {total}")
        return total

    async def count(self, repo: RepoRef, suffix_filter: SuffixFilter | None = None) -> str:
        """Formatted download total, served from cache when fresh."""
        key = result_key(repo, suffix_filter)

        cached = await self.cache.get(key)
        if cached is not None:
            return cached

        result = format_count(await self.compute(repo, suffix_filter))
        await self.cache.set(key, result, self.config.result_ttl)
        return result
