"""
Release ID collection.

Walks a repository's release pages one at a time, caching each page's raw id
list. Pages are fetched strictly in order: whether page N+1 exists is only
known once page N came back non-empty.
"""

from typing import TYPE_CHECKING

from releasestats.canonicalize import cache_key
from releasestats.config import StatsConfig
from releasestats.exceptions import ServerError
from releasestats.logging import get_logger
from releasestats.types.repos import RepoRef

if TYPE_CHECKING:
    from releasestats.cache import CacheStore
    from releasestats.client import AsyncGitHubClient

logger = get_logger("collector")


def release_page_key(repo: RepoRef, per_page: int, page: int) -> str:
    return cache_key("releases", owner=repo.owner, repo=repo.repo, per_page=per_page, page=page)


class ReleaseIdCollector:
    """Collects the deduplicated set of release ids for a repository."""

    def __init__(
        self,
        client: "AsyncGitHubClient",
        cache: "CacheStore",
        config: StatsConfig | None = None,
    ) -> None:
        self.client = client
        self.cache = cache
        self.config = config or StatsConfig()

    async def fetch_page(self, repo: RepoRef, page: int) -> list[int]:
        """
        Return the release ids on one page, from cache when possible.

        A full page is cached for ``full_page_ttl``; a partial page (the
        last one, including an empty one) for ``partial_page_ttl``.
        """
        per_page = self.config.page_size
        key = release_page_key(repo, per_page, page)

        cached = await self.cache.get(key)
        if cached is not None:
            return cached

        releases = await self.client.repos.list_releases(
            repo.owner, repo.repo, per_page=per_page, page=page
        )
        ids = [release.release_id for release in releases]

        ttl = self.config.full_page_ttl if len(ids) == per_page else self.config.partial_page_ttl
        await self.cache.set(key, ids, ttl)
        return ids

    async def collect(self, repo: RepoRef) -> set[int]:
        """
        Collect every release id of ``repo``.

        Raises:
            ServerError: If more than ``max_pages`` non-empty pages are returned
        """
        release_ids: set[int] = set()
        page = 0

        while True:
            if page >= self.config.max_pages:
                raise ServerError(
                    "PAGINATION_LIMIT",
                    f"{repo} returned more than {self.config.max_pages} pages of releases",
                )
            ids = await self.fetch_page(repo, page)
            if not ids:
                break
            release_ids.update(ids)
            page += 1

        logger.debug(f"{repo}: {len(release_ids)} releases over {page} pages")
        return release_ids
