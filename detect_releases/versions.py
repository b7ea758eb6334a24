"""Version bump detection.

Scans the unified diff of a pull request for package.json files under
packages/ whose "version" field was changed, and resolves each one to the
package name declared in the manifest on disk.
"""

from __future__ import annotations

import json
import re
from pathlib import Path, PurePosixPath

from .models import PackageChange

FILE_HEADER_RE = re.compile(r"^diff --git ")
MANIFEST_HEADER_RE = re.compile(r"^diff --git a/(packages/[^/]+/package\.json)")
REMOVED_VERSION_RE = re.compile(r'^-\s*"version":\s*"([^"]+)"')
ADDED_VERSION_RE = re.compile(r'^\+\s*"version":\s*"([^"]+)"')


def read_package_name(manifest_path: Path) -> str:
    """Return the "name" field of a package.json file.

    Malformed JSON or a missing name field raises; there is no fallback.
    """
    return json.loads(manifest_path.read_text(encoding="utf-8"))["name"]


def parse_package_version_changes(diff: str, root: Path) -> list[PackageChange]:
    """Find package version bumps in a unified diff.

    A change is recorded when, within one package.json file diff, a removed
    "version" line is followed by an added "version" line. Only the first
    such pair per file counts.

    Args:
        diff: Full diff text, as printed by `gh pr diff`.
        root: Project root that manifest paths in the diff are relative to.

    Returns:
        Detected changes in diff order.
    """
    changes: list[PackageChange] = []

    current_file: str | None = None
    removed_version: str | None = None

    for line in diff.split("\n"):
        line = line.rstrip("\r")
        if FILE_HEADER_RE.match(line):
            file_match = MANIFEST_HEADER_RE.match(line)
            current_file = file_match.group(1) if file_match else None
            removed_version = None
            continue

        if current_file is None:
            continue

        removed_match = REMOVED_VERSION_RE.match(line)
        if removed_match:
            if removed_version is None:
                removed_version = removed_match.group(1)
            continue

        added_match = ADDED_VERSION_RE.match(line)
        if added_match and removed_version is not None:
            changes.append(
                PackageChange(
                    name=read_package_name(root / current_file),
                    version=added_match.group(1),
                    package_dir=str(PurePosixPath(current_file).parent),
                )
            )
            # A file contributes at most one change
            current_file = None
            removed_version = None

    return changes
