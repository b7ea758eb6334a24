"""Data models for detect-releases.

These Pydantic models carry a detected version bump from the diff parser
through changelog extraction to the JSON output.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class PackageChange(BaseModel):
    """A package whose version was bumped in the pull request.

    Attributes:
        name: Package name as declared in its package.json.
        version: The newly set version string.
        package_dir: Relative path from the project root to the package
                     directory (e.g., "packages/foo").
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    package_dir: str


class Release(BaseModel):
    """A release to publish, serialized as one element of the output array.

    Attributes:
        name: Package name, copied from the PackageChange.
        version: New version, copied from the PackageChange.
        changelog: Body of the matching changelog section; empty if the
                   section or the changelog file is missing.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    version: str
    changelog: str = ""

    @classmethod
    def from_change(cls, change: PackageChange, changelog: str) -> Release:
        return cls(name=change.name, version=change.version, changelog=changelog)
