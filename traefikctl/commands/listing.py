"""The ``list`` command: show configured routes and middlewares."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, TypeVar

from ..config import TraefikDynamicConfig, _first_value
from ..errors import TraefikctlError
from ..middleware import MiddlewareDynamicConfig

T = TypeVar("T")

_YAML_SUFFIXES = (".yml", ".yaml")
_MIDDLEWARE_PREFIX = "mw-"


def _load(path: Path, parse: Callable[[str], T]) -> T | None:
    """Read and parse one file, reporting problems on stderr instead of raising."""
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"  ✗ failed to read {path}: {exc}", file=sys.stderr)
        return None
    try:
        return parse(content)
    except TraefikctlError as exc:
        print(f"  ✗ failed to parse {path}: {exc}", file=sys.stderr)
        return None


def _tls_badge(router) -> str:
    return " 🔒" if router is not None and router.tls is not None else ""


def _entrypoints(router) -> str:
    if router is None:
        return ""
    return ", ".join(router.to_dict().get("entryPoints", []))


def _print_http_route(config: TraefikDynamicConfig, name: str) -> None:
    host = config.host() or "?"
    url = config.backend_url() or "?"
    router = _first_value(config.http.routers) if config.http else None
    print(
        f"  ▸ [HTTP] {name} → {host} → {url} [{_entrypoints(router)}]{_tls_badge(router)}"
    )


def _print_tcp_route(config: TraefikDynamicConfig, name: str) -> None:
    rule = config.tcp_rule() or "?"
    addr = config.backend_address() or "?"
    router = _first_value(config.tcp.routers) if config.tcp else None
    print(
        f"  ▸ [TCP] {name} → {rule} → {addr} [{_entrypoints(router)}]{_tls_badge(router)}"
    )


def _print_udp_route(config: TraefikDynamicConfig, name: str) -> None:
    addr = config.backend_address() or "?"
    router = _first_value(config.udp.routers) if config.udp else None
    print(f"  ▸ [UDP] {name} → {addr} [{_entrypoints(router)}]")


_PRINTERS = {
    "http": _print_http_route,
    "tcp": _print_tcp_route,
    "udp": _print_udp_route,
}


def execute(directory: str | os.PathLike) -> None:
    """Print every route and middleware file found in ``directory``."""
    directory = Path(directory)

    if not directory.exists():
        print(f"! directory {directory} does not exist — no routes configured")
        return

    try:
        entries = sorted(
            (
                path
                for path in directory.iterdir()
                if path.is_file() and path.suffix in _YAML_SUFFIXES
            ),
            key=lambda path: path.name,
        )
    except OSError as exc:
        raise TraefikctlError(f"failed to read directory {directory}: {exc}") from exc

    middleware_files = [p for p in entries if p.name.startswith(_MIDDLEWARE_PREFIX)]
    route_files = [p for p in entries if not p.name.startswith(_MIDDLEWARE_PREFIX)]

    if not route_files and not middleware_files:
        print(f"! no routes or middlewares configured in {directory}")
        return

    if route_files:
        print(f"● {len(route_files)} route(s) in {directory}:\n")
        for path in route_files:
            config = _load(path, TraefikDynamicConfig.from_yaml)
            if config is None:
                continue
            name = config.route_name() or "?"
            printer = _PRINTERS.get(config.protocol())
            if printer is None:
                print(f"  ▸ {name} (unknown protocol)")
            else:
                printer(config, name)
        print()

    if middleware_files:
        print(f"● {len(middleware_files)} middleware(s):\n")
        for path in middleware_files:
            config = _load(path, MiddlewareDynamicConfig.from_yaml)
            if config is None:
                continue
            name = config.middleware_name() or "?"
            mw_type = config.middleware_type() or "unknown"
            print(f"  ▸ {name} ({mw_type})")
        print()