"""Download statistics inputs."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from releasestats.types.releases import ReleaseAsset


@dataclass(frozen=True)
class SuffixFilter:
    """
    Ordered set of file extensions selecting which assets are counted.

    Extensions are stored without a leading dot and compared raw against the
    final dot-segment of an asset name.
    """

    suffixes: tuple[str, ...]

    @classmethod
    def parse(cls, raw: str | Iterable[str] | None) -> "SuffixFilter | None":
        """
        Build a filter from a comma-separated string or a sequence.

        Returns None when no usable suffix is given, which selects the
        max-per-release counting policy.
        """
        if raw is None:
            return None
        items = raw.split(",") if isinstance(raw, str) else list(raw)

        seen: dict[str, None] = {}
        for item in items:
            suffix = item.strip().lstrip(".")
            if suffix:
                seen.setdefault(suffix, None)

        if not seen:
            return None
        return cls(tuple(seen))

    def matches(self, asset: ReleaseAsset) -> bool:
        return asset.extension in self.suffixes

    def key_parts(self) -> list[str]:
        """Order-independent representation used in cache keys."""
        return sorted(self.suffixes)

    def __contains__(self, suffix: object) -> bool:
        return suffix in self.suffixes

    def __iter__(self) -> Iterator[str]:
        return iter(self.suffixes)
