"""The ``update`` command: change fields of an existing HTTP route."""

from __future__ import annotations

import os
from pathlib import Path

from ..config import Router, RouterTls, TraefikDynamicConfig
from ..errors import TraefikctlError
from ..validation import validate_host, validate_name, validate_url

_SECURE_ENTRYPOINT = "websecure"
_ENTRYPOINTS_KEY = "entryPoints"


def _parse_middlewares(raw: str) -> list[str] | None:
    names = [part.strip() for part in raw.split(",")]
    names = [part for part in names if part]
    return names or None


def _with_entrypoints(router: Router, entrypoints: list[str]) -> Router:
    """Return a copy of ``router`` that listens on ``entrypoints``."""
    data = router.to_dict()
    data[_ENTRYPOINTS_KEY] = list(entrypoints)
    updated = Router.from_dict(data)
    updated.tls = router.tls
    updated.middlewares = router.middlewares
    return updated


def execute(
    directory: str | os.PathLike,
    name: str,
    host: str | None = None,
    url: str | None = None,
    entrypoint: str | None = None,
    tls: bool | None = None,
    middlewares: str | None = None,
    dry_run: bool = False,
) -> None:
    """Update the route file ``<directory>/<name>.yml`` in place.

    Only the values that are given are changed. ``middlewares`` is a
    comma-separated list; an empty list removes the router's middlewares.
    """
    validate_name(name)

    file_path = Path(directory) / f"{name}.yml"
    if not file_path.exists():
        raise TraefikctlError(
            f"route {name!r} not found at {file_path}. Use 'add' to create it."
        )

    if host is not None:
        validate_host(host)
    if url is not None:
        validate_url(url)

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise TraefikctlError(f"failed to read {file_path}: {exc}") from exc
    try:
        config = TraefikDynamicConfig.from_yaml(content)
    except TraefikctlError as exc:
        raise TraefikctlError(f"failed to parse {file_path}: {exc}") from exc

    http = config.http
    if http is None:
        raise TraefikctlError(
            f"route {name!r} is not an HTTP route — "
            "update only supports HTTP routes currently"
        )

    router = http.routers.get(name)
    if router is None:
        raise TraefikctlError(f"router {name!r} not found in config file")

    entrypoints = list(router.to_dict()[_ENTRYPOINTS_KEY])

    if host is not None:
        router.rule = f"Host(`{host}`)"
    if entrypoint is not None:
        entrypoints = [entrypoint]
    if tls is not None:
        if tls:
            router.tls = RouterTls()
            if _SECURE_ENTRYPOINT not in entrypoints:
                entrypoints.append(_SECURE_ENTRYPOINT)
        else:
            router.tls = None
            entrypoints = [ep for ep in entrypoints if ep != _SECURE_ENTRYPOINT]
    if middlewares is not None:
        router.middlewares = _parse_middlewares(middlewares)

    http.routers[name] = _with_entrypoints(router, entrypoints)

    if url is not None:
        service = http.services.get(name)
        if service is not None and service.load_balancer.servers:
            service.load_balancer.servers[0].url = url

    yaml_text = config.to_yaml()

    if dry_run:
        print("--- dry-run: would write ---")
        print(f"file: {file_path}")
        print(yaml_text)
        return

    try:
        file_path.write_text(yaml_text, encoding="utf-8")
    except OSError as exc:
        raise TraefikctlError(f"failed to write {file_path}: {exc}") from exc

    print(f"✓ updated route {name}")
    print(f"  file: {file_path}")