"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from helpers import manifest_diff, write_package


@pytest.fixture
def monorepo(tmp_path: Path) -> Path:
    """Create a workspace with two packages, only one of which has a changelog."""
    write_package(
        tmp_path,
        "ai",
        "@scope/ai",
        "1.1.0",
        "# Changelog\n\n## 1.1.0 (2024-01-01)\n\n- Fixed bug\n\n## 1.0.0\n\n- Initial\n",
    )
    write_package(tmp_path, "tui", "@scope/tui", "0.3.0", None)
    return tmp_path


@pytest.fixture
def two_bump_diff() -> str:
    return manifest_diff("ai", "1.0.0", "1.1.0") + manifest_diff(
        "tui", "0.2.0", "0.3.0"
    )


@pytest.fixture
def fake_gh(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Put a `gh` on PATH that prints the given bytes as its output."""
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    script = bin_dir / "gh"
    script.write_text('#!/bin/sh\ncat "$(dirname "$0")/output"\n')
    script.chmod(0o755)
    monkeypatch.setenv("PATH", str(bin_dir), prepend=os.pathsep)

    def set_output(data: bytes) -> None:
        (bin_dir / "output").write_bytes(data)

    return set_output
