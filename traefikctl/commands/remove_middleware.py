"""The ``remove-middleware`` command: delete a middleware file."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..errors import TraefikctlError
from ..validation import validate_name


def _confirm(prompt: str) -> bool:
    print(prompt, end="", flush=True)
    return sys.stdin.readline().strip().lower() == "y"


def execute(
    directory: str | os.PathLike,
    name: str,
    force: bool = False,
    dry_run: bool = False,
) -> None:
    """Remove the middleware file ``<directory>/mw-<name>.yml``.

    Without ``force`` the user is asked to confirm on standard input.
    """
    validate_name(name)

    file_path = Path(directory) / f"mw-{name}.yml"
    if not file_path.exists():
        raise TraefikctlError(f"middleware {name!r} not found at {file_path}")

    if dry_run:
        print("--- dry-run: would remove ---")
        print(f"file: {file_path}")
        return

    if not force and not _confirm(f"Remove middleware {name}? [y/N] "):
        print("cancelled")
        return

    try:
        file_path.unlink()
    except OSError as exc:
        raise TraefikctlError(f"failed to remove {file_path}: {exc}") from exc

    print(f"✓ removed middleware {name}")