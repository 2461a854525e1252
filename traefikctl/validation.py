"""Checks for user-supplied route names, hosts, URLs and addresses."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from .errors import ValidationError

_PORT = re.compile(r"\+?[0-9]+")
_FORBIDDEN_HOST_CHARS = set(" \t\n\r#%/:<>?@[\\]^|")


def _is_ascii_alnum(ch: str) -> bool:
    return ch.isascii() and ch.isalnum()


def validate_host(host: str) -> None:
    """Validate a fully qualified domain name for a ``Host()`` rule."""
    host = host.strip()

    if not host:
        raise ValidationError("host cannot be empty")
    if any(ch.isspace() for ch in host):
        raise ValidationError(f"host cannot contain whitespace: {host!r}")
    if host.startswith((".", "-")):
        raise ValidationError(f"host cannot start with '.' or '-': {host!r}")
    if host.endswith((".", "-")):
        raise ValidationError(f"host cannot end with '.' or '-': {host!r}")
    if "." not in host:
        raise ValidationError(
            f"host must be a fully qualified domain name (e.g. app.example.com): {host!r}"
        )

    for label in host.split("."):
        if not label:
            raise ValidationError(
                f"host contains an empty label (consecutive dots): {host!r}"
            )
        if label.startswith("-") or label.endswith("-"):
            raise ValidationError(
                f"host label {label!r} cannot start or end with '-': {host!r}"
            )
        for ch in label:
            if not _is_ascii_alnum(ch) and ch != "-":
                raise ValidationError(
                    f"host contains invalid character {ch!r}: {host!r}"
                )


def validate_url(raw: str) -> None:
    """Validate a backend URL: it must be an http or https URL with a host."""
    raw = raw.strip()

    if not raw:
        raise ValidationError("backend URL cannot be empty")

    try:
        parts = urlsplit(raw)
        parts.port  # raises ValueError on a malformed port
    except ValueError as exc:
        raise ValidationError(f"invalid backend URL {raw!r}: {exc}") from exc

    if not parts.scheme:
        raise ValidationError(
            f"invalid backend URL {raw!r}: relative URL without a base"
        )

    scheme = parts.scheme.lower()
    if scheme not in ("http", "https"):
        raise ValidationError(
            f"backend URL must use http:// or https:// scheme, got {scheme!r}"
        )

    hostname = parts.hostname
    if not hostname:
        raise ValidationError(f"backend URL is missing a host: {raw!r}")

    if not parts.netloc.rpartition("@")[2].startswith("["):
        bad = next((ch for ch in hostname if ch in _FORBIDDEN_HOST_CHARS), None)
        if bad is not None:
            raise ValidationError(
                f"invalid backend URL {raw!r}: invalid domain character {bad!r}"
            )


def validate_address(addr: str) -> None:
    """Validate a TCP/UDP backend address in ``host:port`` form."""
    addr = addr.strip()

    if not addr:
        raise ValidationError("backend address cannot be empty")

    if ":" not in addr:
        raise ValidationError(
            f"backend address must be in host:port format (e.g. 127.0.0.1:5432): {addr!r}"
        )
    host, _, port_text = addr.rpartition(":")

    if not host:
        raise ValidationError(f"backend address is missing host: {addr!r}")

    if not _PORT.fullmatch(port_text) or int(port_text) > 0xFFFF:
        raise ValidationError(f"invalid port number in address {addr!r}")
    if int(port_text) == 0:
        raise ValidationError(f"port cannot be 0 in address {addr!r}")

    if any(ch.isspace() for ch in host):
        raise ValidationError(f"address host cannot contain whitespace: {addr!r}")


def validate_name(name: str) -> None:
    """Validate a route or middleware name: ASCII letters, digits, '-' and '_'."""
    name = name.strip()

    if not name:
        raise ValidationError("route name cannot be empty")

    if len(name.encode("utf-8")) > 128:
        raise ValidationError(f"route name too long (max 128 characters): {name!r}")

    for ch in name:
        if not _is_ascii_alnum(ch) and ch not in "-_":
            raise ValidationError(
                f"route name contains invalid character {ch!r} "
                f"(allowed: a-z, 0-9, -, _): {name!r}"
            )