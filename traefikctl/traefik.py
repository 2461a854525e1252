"""Reloading the running Traefik service."""

from __future__ import annotations

import subprocess
import sys

from .errors import TraefikctlError


def _systemctl(action: str) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            ["systemctl", action, "traefik"], capture_output=True, check=False
        )
    except OSError as exc:
        raise TraefikctlError(
            f"failed to execute systemctl {action} traefik: {exc}"
        ) from exc


def _stderr_text(result: subprocess.CompletedProcess) -> str:
    stderr = result.stderr or b""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr.strip()


def reload_traefik() -> None:
    """Reload Traefik via systemctl, falling back to a restart."""
    reload = _systemctl("reload")
    if reload.returncode == 0:
        return

    print(
        f"systemctl reload traefik failed ({_stderr_text(reload)}), trying restart...",
        file=sys.stderr,
    )

    restart = _systemctl("restart")
    if restart.returncode != 0:
        raise TraefikctlError(
            f"failed to reload/restart traefik: {_stderr_text(restart)}"
        )