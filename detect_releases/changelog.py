"""Changelog section extraction."""

from __future__ import annotations

import re
from pathlib import Path

from .models import PackageChange
from .shell import warn

CHANGELOG_FILENAME = "CHANGELOG.md"
HEADING_RE = re.compile(r"^##\s+(.+)$")


def _is_version_heading(header: str, version: str) -> bool:
    """Match "1.1.0" and "1.1.0 (2024-01-01)", but not "1.1.0-beta"."""
    return header == version or header.startswith(f"{version} ")


def extract_changelog_entry(content: str, version: str) -> str:
    """Return the body of the `## <version>` section of a changelog.

    The section runs from the line after its heading up to the next `##`
    heading or end of file. Deeper headings (`###`) are part of the body.

    Returns:
        The section body with surrounding whitespace stripped, or an empty
        string if no heading matches the version.
    """
    in_section = False
    entry: list[str] = []

    for line in content.split("\n"):
        line = line.rstrip("\r")
        heading = HEADING_RE.match(line)
        if heading:
            if _is_version_heading(heading.group(1).strip(), version):
                in_section = True
                continue
            if in_section:
                break

        if in_section:
            entry.append(line)

    return "\n".join(entry).strip()


def read_changelog_entry(change: PackageChange, root: Path) -> str:
    """Extract the changelog entry for a detected change.

    A missing or unreadable CHANGELOG.md is reported as a warning and
    yields an empty entry.
    """
    changelog_path = root / change.package_dir / CHANGELOG_FILENAME
    try:
        content = changelog_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        warn(f"Could not read {CHANGELOG_FILENAME} for {change.name}: {exc}")
        return ""
    return extract_changelog_entry(content, change.version)
