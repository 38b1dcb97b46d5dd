"""Repository-related data models."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class RepoRef:
    """Identifies a repository by owner and name."""

    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class RepoMetadata:
    """Repository identity as reported by the upstream API."""

    owner: str
    repo: str
    created_at: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "owner": self.owner,
            "repo": self.repo,
            "created_at": self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RepoMetadata":
        return cls(
            owner=data["owner"],
            repo=data["repo"],
            created_at=datetime.fromisoformat(data["created_at"].rstrip("Z")),
        )
