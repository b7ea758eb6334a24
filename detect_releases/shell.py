"""Shell and output utilities.

Thin wrappers around subprocess calls to the GitHub CLI, plus the status
helpers used for progress reporting. stdout is reserved for the JSON result,
so every status message goes to stderr.
"""

from __future__ import annotations

import subprocess
import sys
from pathlib import Path
from typing import NoReturn


def gh(*args: str, cwd: Path | None = None, check: bool = True) -> str:
    """Run a gh command and return its stdout.

    stderr is not captured, so gh's own diagnostics reach the terminal.
    Output is decoded as UTF-8; undecodable bytes (e.g. a latin-1 file in a
    diff) become U+FFFD.

    Args:
        *args: Arguments to pass to gh (e.g., "pr", "diff", "42").
        cwd: Working directory for the command; gh resolves the repository
             from it.
        check: If True (default), raise CalledProcessError on non-zero exit.

    Returns:
        Unmodified stdout from the gh command.
    """
    result = subprocess.run(
        ["gh", *args],
        cwd=cwd,
        stdout=subprocess.PIPE,
        encoding="utf-8",
        errors="replace",
        check=check,
    )
    return result.stdout


def step(msg: str) -> None:
    """Print a visually distinct step header."""
    print(f"\n{'─' * 60}\n{msg}\n{'─' * 60}", file=sys.stderr)


def info(msg: str) -> None:
    """Print an indented progress line under the current step."""
    print(f"  {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    """Print a warning for a recoverable problem."""
    print(f"Warning: {msg}", file=sys.stderr)


def fatal(msg: str) -> NoReturn:
    """Print an error message and exit with code 1.

    Use for unrecoverable errors that should halt the run before any
    output is written.
    """
    print(f"ERROR: {msg}", file=sys.stderr)
    sys.exit(1)
