"""Async repositories resource client."""

from datetime import datetime
from typing import TYPE_CHECKING, Any

from releasestats.types.releases import Release, ReleaseAsset
from releasestats.types.repos import RepoMetadata

if TYPE_CHECKING:
    from releasestats.transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository and release endpoints."""

    ASSET_PAGE_SIZE = 100

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    async def get(self, owner: str, repo: str) -> RepoMetadata:
        """
        Get repository identity.

        Args:
            owner: Repository owner login
            repo: Repository name

        Returns:
            RepoMetadata with the canonical owner/name and creation date

        Raises:
            NotFoundError: If the repository does not exist or is hidden
        """
        data = await self.transport.request("GET", f"/repos/{owner}/{repo}")
        return RepoMetadata(
            owner=data["owner"]["login"],
            repo=data["name"],
            created_at=datetime.fromisoformat(data["created_at"].rstrip("Z")),
        )

    async def list_releases(
        self,
        owner: str,
        repo: str,
        per_page: int = 30,
        page: int = 0,
    ) -> list[Release]:
        """
        List one page of releases.

        Args:
            owner: Repository owner login
            repo: Repository name
            per_page: Page size (max 100)
            page: Page number

        Returns:
            List of Release objects; fewer than ``per_page`` on the last page
        """
        data = await self.transport.request(
            "GET",
            f"/repos/{owner}/{repo}/releases",
            params={"per_page": per_page, "page": page},
        )
        return [
            Release(release_id=release["id"], tag_name=release.get("tag_name"))
            for release in data
        ]

    async def list_release_assets(
        self,
        owner: str,
        repo: str,
        release_id: int,
    ) -> list[ReleaseAsset]:
        """
        List every asset of a release, following asset pagination.

        Args:
            owner: Repository owner login
            repo: Repository name
            release_id: Release identifier

        Returns:
            List of ReleaseAsset objects
        """
        assets: list[ReleaseAsset] = []
        page = 1
        while True:
            data: list[dict[str, Any]] = await self.transport.request(
                "GET",
                f"/repos/{owner}/{repo}/releases/{release_id}/assets",
                params={"per_page": self.ASSET_PAGE_SIZE, "page": page},
            )
            assets.extend(
                ReleaseAsset(name=asset["name"], download_count=asset.get("download_count", 0))
                for asset in data
            )
            if len(data) < self.ASSET_PAGE_SIZE:
                return assets
            page += 1
