"""releasestats type definitions.

This module exports all data model types used by the package.
"""

from releasestats.types.releases import Release, ReleaseAsset
from releasestats.types.repos import RepoMetadata, RepoRef
from releasestats.types.stats import SuffixFilter

__all__ = [
    # Repository types
    "RepoRef",
    "RepoMetadata",
    # Release types
    "Release",
    "ReleaseAsset",
    # Counting inputs
    "SuffixFilter",
]
