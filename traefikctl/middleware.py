"""Middleware definitions, stored one middleware per dynamic configuration file."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable

from .config import (
    _bool,
    _dump_yaml,
    _first_key,
    _first_value,
    _load_yaml,
    _map_of,
    _mapping,
    _optional,
    _put,
    _required,
    _sorted_dict,
    _str_list,
    _string,
    _uint,
)


def _string_map(value: Any, what: str) -> dict[str, str]:
    return _map_of(value, _string, what)


def _plain(value: Any) -> Any:
    """Copy a field value for output: maps come out in key order."""
    if isinstance(value, dict):
        return _sorted_dict(value, lambda item: item)
    if isinstance(value, list):
        return list(value)
    return value


# Attribute name, YAML key and converter of every headers option, in output order.
_HEADER_KEYS: tuple[tuple[str, str, Callable[[Any, str], Any]], ...] = (
    ("sts_seconds", "stsSeconds", _uint),
    ("sts_include_subdomains", "stsIncludeSubdomains", _bool),
    ("sts_preload", "stsPreload", _bool),
    ("frame_deny", "frameDeny", _bool),
    ("content_type_nosniff", "contentTypeNosniff", _bool),
    ("browser_xss_filter", "browserXssFilter", _bool),
    ("referrer_policy", "referrerPolicy", _string),
    ("custom_response_headers", "customResponseHeaders", _string_map),
    ("custom_request_headers", "customRequestHeaders", _string_map),
    ("access_control_allow_methods", "accessControlAllowMethods", _str_list),
    ("access_control_allow_headers", "accessControlAllowHeaders", _str_list),
    ("access_control_allow_origin_list", "accessControlAllowOriginList", _str_list),
    ("access_control_max_age", "accessControlMaxAge", _uint),
)


@dataclass
class HeadersMiddleware:
    """The headers middleware: security headers, custom headers and CORS."""

    sts_seconds: int | None = None
    sts_include_subdomains: bool | None = None
    sts_preload: bool | None = None
    frame_deny: bool | None = None
    content_type_nosniff: bool | None = None
    browser_xss_filter: bool | None = None
    referrer_policy: str | None = None
    custom_response_headers: dict[str, str] | None = None
    custom_request_headers: dict[str, str] | None = None
    access_control_allow_methods: list[str] | None = None
    access_control_allow_headers: list[str] | None = None
    access_control_allow_origin_list: list[str] | None = None
    access_control_max_age: int | None = None

    @classmethod
    def security_preset(cls) -> HeadersMiddleware:
        """Security-hardened preset (HSTS, frame deny, nosniff, XSS filter)."""
        return cls(
            sts_seconds=63_072_000,
            sts_include_subdomains=True,
            sts_preload=True,
            frame_deny=True,
            content_type_nosniff=True,
            browser_xss_filter=True,
            referrer_policy="strict-origin-when-cross-origin",
            custom_response_headers={"X-Powered-By": "", "Server": ""},
        )

    @classmethod
    def from_dict(cls, data: Any) -> HeadersMiddleware:
        what = "headers"
        data = _mapping(data, what)
        return cls(
            **{
                attr: _optional(data, key, convert, what)
                for attr, key, convert in _HEADER_KEYS
            }
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        for attr, key, _convert in _HEADER_KEYS:
            _put(out, key, _plain(getattr(self, attr)))
        return out


@dataclass
class RateLimitMiddleware:
    """The rateLimit middleware."""

    average: int
    burst: int | None = None
    period: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RateLimitMiddleware:
        what = "rateLimit"
        data = _mapping(data, what)
        return cls(
            average=_uint(_required(data, "average", what), f"{what}.average"),
            burst=_optional(data, "burst", _uint, what),
            period=_optional(data, "period", _string, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"average": self.average}
        _put(out, "burst", self.burst)
        _put(out, "period", self.period)
        return out


@dataclass
class RedirectSchemeMiddleware:
    """The redirectScheme middleware."""

    scheme: str
    permanent: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RedirectSchemeMiddleware:
        what = "redirectScheme"
        data = _mapping(data, what)
        return cls(
            scheme=_string(_required(data, "scheme", what), f"{what}.scheme"),
            permanent=_optional(data, "permanent", _bool, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"scheme": self.scheme}
        _put(out, "permanent", self.permanent)
        return out


@dataclass
class BasicAuthMiddleware:
    """The basicAuth middleware; users are ``name:hash`` entries."""

    users: list[str]
    realm: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> BasicAuthMiddleware:
        what = "basicAuth"
        data = _mapping(data, what)
        return cls(
            users=_str_list(_required(data, "users", what), f"{what}.users"),
            realm=_optional(data, "realm", _string, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"users": list(self.users)}
        _put(out, "realm", self.realm)
        return out


@dataclass
class StripPrefixMiddleware:
    """The stripPrefix middleware."""

    prefixes: list[str]

    @classmethod
    def from_dict(cls, data: Any) -> StripPrefixMiddleware:
        what = "stripPrefix"
        data = _mapping(data, what)
        return cls(
            prefixes=_str_list(_required(data, "prefixes", what), f"{what}.prefixes")
        )

    def to_dict(self) -> dict:
        return {"prefixes": list(self.prefixes)}


@dataclass
class CompressMiddleware:
    """The compress middleware."""

    excluded_content_types: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> CompressMiddleware:
        what = "compress"
        data = _mapping(data, what)
        return cls(
            excluded_content_types=_optional(
                data, "excludedContentTypes", _str_list, what
            )
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(
            out,
            "excludedContentTypes",
            None
            if self.excluded_content_types is None
            else list(self.excluded_content_types),
        )
        return out


# Attribute name, YAML key, reported type name and class of every kind,
# in the order they are serialised and recognised.
_KINDS: tuple[tuple[str, str, str, Any], ...] = (
    ("headers", "headers", "headers", HeadersMiddleware),
    ("rate_limit", "rateLimit", "rate-limit", RateLimitMiddleware),
    ("redirect_scheme", "redirectScheme", "redirect-scheme", RedirectSchemeMiddleware),
    ("basic_auth", "basicAuth", "basic-auth", BasicAuthMiddleware),
    ("strip_prefix", "stripPrefix", "strip-prefix", StripPrefixMiddleware),
    ("compress", "compress", "compress", CompressMiddleware),
)


@dataclass
class MiddlewareDefinition:
    """One middleware; normally exactly one of its fields is set."""

    headers: HeadersMiddleware | None = None
    rate_limit: RateLimitMiddleware | None = None
    redirect_scheme: RedirectSchemeMiddleware | None = None
    basic_auth: BasicAuthMiddleware | None = None
    strip_prefix: StripPrefixMiddleware | None = None
    compress: CompressMiddleware | None = None

    @classmethod
    def from_dict(cls, data: Any) -> MiddlewareDefinition:
        data = _mapping(data, "middleware")
        values = {}
        for attr, key, _name, kind in _KINDS:
            raw = data.get(key)
            values[attr] = None if raw is None else kind.from_dict(raw)
        return cls(**values)

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        for attr, key, _name, _kind_cls in _KINDS:
            value = getattr(self, attr)
            _put(out, key, None if value is None else value.to_dict())
        return out

    def _type_name(self) -> str | None:
        return next(
            (name for attr, _key, name, _cls in _KINDS if getattr(self, attr) is not None),
            None,
        )


@dataclass
class MiddlewareDynamicConfig:
    """A dynamic configuration file holding middleware definitions."""

    middlewares: dict[str, MiddlewareDefinition] = field(default_factory=dict)

    @classmethod
    def new(cls, name: str, definition: MiddlewareDefinition) -> MiddlewareDynamicConfig:
        return cls(middlewares={name: definition})

    def middleware_name(self) -> str | None:
        return _first_key(self.middlewares)

    def middleware_type(self) -> str | None:
        definition = _first_value(self.middlewares)
        return None if definition is None else definition._type_name()

    @classmethod
    def from_dict(cls, data: Any) -> MiddlewareDynamicConfig:
        data = _mapping(data, "middleware config")
        http = _mapping(_required(data, "http", "middleware config"), "http")
        return cls(
            middlewares=_map_of(
                _required(http, "middlewares", "http"),
                lambda value, _what: MiddlewareDefinition.from_dict(value),
                "http.middlewares",
            )
        )

    def to_dict(self) -> dict:
        return {
            "http": {
                "middlewares": _sorted_dict(
                    self.middlewares, MiddlewareDefinition.to_dict
                )
            }
        }

    @classmethod
    def from_yaml(cls, text: str) -> MiddlewareDynamicConfig:
        return cls.from_dict(_load_yaml(text, "middleware config"))

    def to_yaml(self) -> str:
        return _dump_yaml(self.to_dict())


__all__ = [f.name for f in fields(MiddlewareDefinition)] and [
    "BasicAuthMiddleware",
    "CompressMiddleware",
    "HeadersMiddleware",
    "MiddlewareDefinition",
    "MiddlewareDynamicConfig",
    "RateLimitMiddleware",
    "RedirectSchemeMiddleware",
    "StripPrefixMiddleware",
]