"""Release detection pipeline: diff → version bumps → changelogs → JSON.

1. Fetch the pull request diff with `gh pr diff`
2. Detect package.json version bumps under packages/
3. Extract each bumped package's changelog section
4. Render the releases as JSON for the publishing step

Everything is computed before anything is written to stdout, so a fatal
error never leaves partial output behind.
"""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

from .changelog import read_changelog_entry
from .models import Release
from .shell import fatal, gh, info, step
from .versions import parse_package_version_changes


def get_pr_diff(pr_number: str, root: Path) -> str:
    """Fetch the unified diff of a pull request.

    Exits the process with code 1 if gh fails or cannot be run.
    """
    step(f"Fetching diff for PR #{pr_number}")
    try:
        return gh("pr", "diff", str(pr_number), cwd=root)
    except (subprocess.CalledProcessError, OSError) as exc:
        fatal(f"Failed to get PR diff: {exc}")


def detect_releases(pr_number: str, root: Path) -> list[Release]:
    """Build the list of releases for a pull request.

    Args:
        pr_number: Pull request number, passed through to gh.
        root: Project root; gh runs here and package paths resolve from it.

    Returns:
        One Release per detected version bump, in diff order.
    """
    diff = get_pr_diff(pr_number, root)

    step("Detecting version bumps")
    changes = parse_package_version_changes(diff, root)
    if not changes:
        info("No package versions changed")
    for change in changes:
        info(f"{change.name} {change.version} ({change.package_dir})")

    if changes:
        step("Extracting changelogs")
    return [
        Release.from_change(change, read_changelog_entry(change, root))
        for change in changes
    ]


def render_releases(releases: list[Release], *, indent: int | None = 2) -> str:
    """Serialize releases as a JSON array.

    Pass indent=None for the compact single-line form used in step outputs.
    """
    return json.dumps([r.model_dump() for r in releases], indent=indent)


def write_github_output(output_path: Path, releases: list[Release]) -> None:
    """Append the releases to a GitHub Actions step output file."""
    with open(output_path, "a", encoding="utf-8") as fh:
        fh.write(f"releases={render_releases(releases, indent=None)}\n")
