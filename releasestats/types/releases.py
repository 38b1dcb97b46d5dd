"""Release and release-asset data models."""

from dataclasses import dataclass
from typing import Any


@dataclass
class Release:
    """A release listed for a repository."""

    release_id: int
    tag_name: str | None = None


@dataclass
class ReleaseAsset:
    """A downloadable file attached to a release."""

    name: str
    download_count: int | float  # float("-inf") marks "no count"

    @property
    def extension(self) -> str:
        """Final dot-separated segment of the file name."""
        return self.name.split(".")[-1]

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "download_count": self.download_count}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReleaseAsset":
        return cls(name=data["name"], download_count=data["download_count"])
