"""Builders for test monorepos and PR diffs."""

from __future__ import annotations

import json
from pathlib import Path


def manifest_diff(package: str, old: str, new: str) -> str:
    """Render a `gh pr diff` style hunk bumping one package.json version."""
    return f"""\
diff --git a/packages/{package}/package.json b/packages/{package}/package.json
index 1111111..2222222 100644
--- a/packages/{package}/package.json
+++ b/packages/{package}/package.json
@@ -1,6 +1,6 @@
 {{
   "name": "@scope/{package}",
-  "version": "{old}",
+  "version": "{new}",
   "type": "module",
"""


def write_package(
    root: Path, directory: str, name: str, version: str, changelog: str | None
) -> Path:
    package_dir = root / "packages" / directory
    package_dir.mkdir(parents=True)
    (package_dir / "package.json").write_text(
        json.dumps({"name": name, "version": version, "type": "module"}, indent=2)
    )
    if changelog is not None:
        (package_dir / "CHANGELOG.md").write_text(changelog)
    return package_dir
