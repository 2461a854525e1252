"""The ``remove`` command: delete a route file."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from ..errors import TraefikctlError
from ..validation import validate_name


def _confirm(prompt: str) -> bool:
    print(prompt, end="", flush=True)
    answer = sys.stdin.readline().strip().lower()
    return answer in ("y", "yes")


def execute(
    directory: str | os.PathLike,
    name: str,
    force: bool = False,
    dry_run: bool = False,
) -> None:
    """Remove the route file ``<directory>/<name>.yml``.

    Without ``force`` the user is asked to confirm on standard input.
    """
    validate_name(name)

    file_path = Path(directory) / f"{name}.yml"
    if not file_path.exists():
        raise TraefikctlError(f"route {name!r} not found at {file_path}")

    if dry_run:
        print(f"--- dry-run: would remove route {name} ({file_path})")
        return

    if not force and not _confirm(f"Remove route {name}? [y/N] "):
        print("aborted")
        return

    try:
        file_path.unlink()
    except OSError as exc:
        raise TraefikctlError(f"failed to remove {file_path}: {exc}") from exc

    print(f"✓ removed route {name}")