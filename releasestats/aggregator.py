"""
Per-release download aggregation.

With a suffix filter, a release contributes the summed downloads of its
matching assets. Without one, it contributes the downloads of its most
downloaded asset, i.e. one representative artifact per release. A release
with no assets yields ``NO_ASSETS`` and is dropped from the grand total.
"""

import asyncio
import math
from collections.abc import Iterable
from typing import TYPE_CHECKING

from releasestats.canonicalize import cache_key
from releasestats.config import StatsConfig
from releasestats.types.releases import ReleaseAsset
from releasestats.types.repos import RepoRef
from releasestats.types.stats import SuffixFilter

if TYPE_CHECKING:
    from releasestats.cache import CacheStore
    from releasestats.client import AsyncGitHubClient

NO_ASSETS = float("-inf")


def release_assets_key(repo: RepoRef, release_id: int) -> str:
    return cache_key("assets", owner=repo.owner, repo=repo.repo, release_id=release_id)


def count_release(assets: list[ReleaseAsset], suffix_filter: SuffixFilter | None) -> int | float:
    """Apply the counting policy to one release's assets."""
    if suffix_filter is not None:
        return sum(
            asset.download_count
            for asset in assets
            if suffix_filter.matches(asset) and math.isfinite(asset.download_count)
        )

    return max((asset.download_count for asset in assets), default=NO_ASSETS)


def sum_releases(per_release: Iterable[int | float]) -> int:
    """Sum per-release counts, skipping non-finite values."""
    return int(sum(count for count in per_release if math.isfinite(count)))


class AssetAggregator:
    """Fetches release assets and reduces them to download totals."""

    def __init__(
        self,
        client: "AsyncGitHubClient",
        cache: "CacheStore",
        config: StatsConfig | None = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.config = config or StatsConfig()

    async def fetch_assets(self, repo: RepoRef, release_id: int) -> list[ReleaseAsset]:
        key = release_assets_key(repo, release_id)

        cached = await self.cache.get(key)
        if cached is not None:
            return [ReleaseAsset.from_dict(item) for item in cached]

        assets = await self.client.repos.list_release_assets(repo.owner, repo.repo, release_id)
        await self.cache.set(key, [asset.to_dict() for asset in assets], self.config.asset_ttl)
        return assets

    async def aggregate_release(
        self,
        repo: RepoRef,
        release_id: int,
        suffix_filter: SuffixFilter | None = None,
    ) -> int | float:
        """Downloads attributed to one release, or ``NO_ASSETS``."""
        assets = await self.fetch_assets(repo, release_id)
        return count_release(assets, suffix_filter)

    async def aggregate(
        self,
        repo: RepoRef,
        release_ids: Iterable[int],
        suffix_filter: SuffixFilter | None = None,
    ) -> int:
        """
        Total downloads across ``release_ids``.

        Releases are aggregated concurrently; the first upstream failure
        cancels the fetches still in flight and propagates, so no partial
        total is returned.
        """
        tasks = [
            asyncio.create_task(self.aggregate_release(repo, release_id, suffix_filter))
            for release_id in release_ids
        ]
        try:
            per_release = await asyncio.gather(*tasks)
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
        return sum_releases(per_release)
