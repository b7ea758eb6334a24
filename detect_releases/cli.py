"""CLI entry point for detect-releases."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from detect_releases.pipeline import (
    detect_releases,
    render_releases,
    write_github_output,
)

USAGE = "Usage: detect-releases <pr-number>"


@click.command()
@click.version_option(package_name="detect-releases")
@click.argument("pr_number", required=False)
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    envvar="DETECT_RELEASES_ROOT",
    help="Project root containing packages/.",
)
@click.option(
    "--github-output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    envvar="DETECT_RELEASES_GITHUB_OUTPUT",
    help="Also append releases=<json> to this GitHub step output file.",
)
def cli(pr_number: str | None, root: Path, github_output: Path | None) -> None:
    """Print the releases a pull request's version bumps call for, as JSON."""
    if not pr_number:
        click.echo(USAGE, err=True)
        sys.exit(1)

    releases = detect_releases(pr_number, root.resolve())
    if github_output is not None:
        write_github_output(github_output, releases)
    click.echo(render_releases(releases))
