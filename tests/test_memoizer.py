"""
Tests for aggregate result memoization.

Feature: releasestats
"""

import asyncio

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from releasestats.cache import MemoryCacheStore
from releasestats.config import StatsConfig
from releasestats.exceptions import ServerError
from releasestats.memoizer import ResultMemoizer, format_count, result_key
from releasestats.testing import FakeClock, MockGitHubClient, create_mock_asset
from releasestats.types.repos import RepoRef
from releasestats.types.stats import SuffixFilter

REPO = RepoRef(owner="octo", repo="hello")


@pytest.fixture
def memoizer(mock_client_with_releases: MockGitHubClient, memory_cache: MemoryCacheStore) -> ResultMemoizer:
    return ResultMemoizer(mock_client_with_releases, memory_cache, StatsConfig())


class TestFormatCount:
    @pytest.mark.parametrize(
        "total, expected",
        [(0, "0"), (999, "999"), (1000, "1,000"), (1234567, "1,234,567")],
    )
    def test_thousands_grouping(self, total: int, expected: str) -> None:
        assert format_count(total) == expected


@given(total=st.integers(min_value=0, max_value=10**15))
@settings(max_examples=100)
def test_format_count_round_trips_digits(total: int) -> None:
    """Removing the grouping separators gives back the plain integer."""
    assert int(format_count(total).replace(",", "")) == total


class TestResultMemoizer:
    def test_counts_releases(self, memoizer: ResultMemoizer) -> None:
        # max(10, 5) + max(100, 40); release 3 has no assets
        assert asyncio.run(memoizer.count(REPO)) == "110"
        assert asyncio.run(memoizer.count(REPO, SuffixFilter.parse("zip,rpm"))) == "50"

    def test_hit_skips_upstream(
        self,
        memoizer: ResultMemoizer,
        mock_client_with_releases: MockGitHubClient,
    ) -> None:
        first = asyncio.run(memoizer.count(REPO))
        mock_client_with_releases.reset()

        second = asyncio.run(memoizer.count(REPO))

        assert second == first
        assert mock_client_with_releases.call_count() == 0

    def test_result_expires_after_result_ttl(
        self,
        mock_client_with_releases: MockGitHubClient,
        memory_cache: MemoryCacheStore,
        clock: FakeClock,
    ) -> None:
        memoizer = ResultMemoizer(mock_client_with_releases, memory_cache, StatsConfig())
        asyncio.run(memoizer.count(REPO))

        mock_client_with_releases.repos.set_assets(
            "octo", "hello", 2, [create_mock_asset("hello.deb", 500)]
        )
        clock.advance(359)
        assert asyncio.run(memoizer.count(REPO)) == "110"

        clock.advance(1)
        assert asyncio.run(memoizer.count(REPO)) == "510"

    def test_result_ttl_shorter_than_page_ttl(
        self,
        mock_client_with_releases: MockGitHubClient,
        memory_cache: MemoryCacheStore,
        clock: FakeClock,
    ) -> None:
        memoizer = ResultMemoizer(mock_client_with_releases, memory_cache, StatsConfig())
        asyncio.run(memoizer.count(REPO))
        clock.advance(400)
        mock_client_with_releases.reset()

        asyncio.run(memoizer.count(REPO))

        # Asset lists and the aggregate expired; the partial release page has not
        assert not mock_client_with_releases.was_called("repos.list_releases")
        assert mock_client_with_releases.call_count("repos.list_release_assets") == 3

    def test_suffix_order_shares_cache_entry(self) -> None:
        assert result_key(REPO, SuffixFilter.parse("deb,rpm")) == result_key(REPO, SuffixFilter.parse("rpm,deb"))
        assert result_key(REPO, None) != result_key(REPO, SuffixFilter.parse("deb"))

    def test_failure_stores_nothing(
        self,
        memoizer: ResultMemoizer,
        mock_client_with_releases: MockGitHubClient,
        memory_cache: MemoryCacheStore,
    ) -> None:
        mock_client_with_releases.repos.configure_list_release_assets(
            error=ServerError("UPSTREAM_ERROR", "bad gateway")
        )

        with pytest.raises(ServerError):
            asyncio.run(memoizer.count(REPO))

        assert result_key(REPO, None) not in memory_cache

    def test_concurrent_misses_both_compute(self) -> None:
        """Simultaneous misses are not serialized; each request computes the total."""
        client = MockGitHubClient()
        client.repos.add_release("octo", "hello", 1, [("a.zip", 3)])
        mock_repos = client.repos

        class YieldingRepos:
            async def list_releases(self, *args, **kwargs):
                await asyncio.sleep(0)
                return await mock_repos.list_releases(*args, **kwargs)

            async def list_release_assets(self, *args, **kwargs):
                await asyncio.sleep(0)
                return await mock_repos.list_release_assets(*args, **kwargs)

        client.repos = YieldingRepos()  # type: ignore[assignment]
        memoizer = ResultMemoizer(client, MemoryCacheStore(), StatsConfig())

        async def run() -> list[str]:
            return await asyncio.gather(memoizer.count(REPO), memoizer.count(REPO))

        assert asyncio.run(run()) == ["3", "3"]
        assert client.call_count("repos.list_releases") == 4
