"""
Tests for releasestats testing utilities.

Verifies that MockGitHubClient and fixtures behave like the real client.
"""

import asyncio

import pytest

from releasestats.exceptions import NotFoundError
from releasestats.testing import MockGitHubClient, create_mock_asset, create_mock_repository
from releasestats.types.releases import ReleaseAsset


class TestMockGitHubClient:
    def test_unknown_repo_not_found(self) -> None:
        mock = MockGitHubClient()

        with pytest.raises(NotFoundError):
            asyncio.run(mock.repos.get("octo", "ghost"))

    def test_release_pages_are_zero_based_slices(self) -> None:
        mock = MockGitHubClient()
        for release_id in range(1, 6):
            mock.repos.add_release("octo", "hello", release_id)

        async def run() -> list[list[int]]:
            pages = []
            for page in range(3):
                releases = await mock.repos.list_releases("octo", "hello", per_page=2, page=page)
                pages.append([r.release_id for r in releases])
            return pages

        assert asyncio.run(run()) == [[1, 2], [3, 4], [5]]

    def test_assets_from_tuples(self) -> None:
        mock = MockGitHubClient()
        mock.repos.add_release("octo", "hello", 1, [("a.zip", 3)])

        assets = asyncio.run(mock.repos.list_release_assets("octo", "hello", 1))

        assert assets == [ReleaseAsset("a.zip", 3)]

    def test_configured_response_and_error(self) -> None:
        mock = MockGitHubClient()
        custom = create_mock_repository(owner="Octo", repo="Hello")
        mock.repos.configure_get(response=custom)

        assert asyncio.run(mock.repos.get("octo", "hello")) is custom

        mock.repos.configure_get(error=NotFoundError("NOT_FOUND", "gone"))
        with pytest.raises(NotFoundError):
            asyncio.run(mock.repos.get("octo", "hello"))

    def test_call_tracking(self) -> None:
        mock = MockGitHubClient()
        mock.repos.add_release("octo", "hello", 1)

        async def run() -> None:
            await mock.repos.get("octo", "hello")
            await mock.repos.list_releases("octo", "hello", per_page=30, page=0)
            await mock.repos.list_releases("octo", "hello", per_page=30, page=1)

        asyncio.run(run())

        assert mock.was_called("repos.get")
        assert mock.call_count("repos.list_releases") == 2
        assert mock.call_count() == 3
        assert mock.get_calls("repos.list_releases")[1].kwargs == {"per_page": 30, "page": 1}
        assert not mock.was_called("repos.list_release_assets")

    def test_reset_keeps_registered_data(self) -> None:
        mock = MockGitHubClient()
        mock.repos.add_release("octo", "hello", 1, [("a.zip", 3)])
        mock.repos.configure_list_releases(error=NotFoundError("NOT_FOUND", "x"))
        asyncio.run(mock.repos.get("octo", "hello"))

        mock.reset()

        assert mock.call_count() == 0
        releases = asyncio.run(mock.repos.list_releases("octo", "hello"))
        assert [r.release_id for r in releases] == [1]


class TestHelperFunctions:
    def test_create_mock_asset(self) -> None:
        asset = create_mock_asset("pkg.deb", 12)

        assert asset.extension == "deb"
        assert asset.download_count == 12

    def test_fixture_data(self, mock_client_with_releases: MockGitHubClient) -> None:
        assets = asyncio.run(mock_client_with_releases.repos.list_release_assets("octo", "hello", 3))

        assert assets == []
