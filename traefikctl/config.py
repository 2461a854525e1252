"""Data model for Traefik static and dynamic configuration files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

import yaml

from .errors import TraefikctlError

T = TypeVar("T")


def _kind(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _mapping(value: Any, what: str) -> dict:
    if not isinstance(value, dict):
        raise TraefikctlError(f"{what}: expected a mapping, got {_kind(value)}")
    return value


def _required(data: dict, key: str, what: str) -> Any:
    if key not in data:
        raise TraefikctlError(f"{what}: missing field `{key}`")
    return data[key]


def _string(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise TraefikctlError(f"{what}: expected a string, got {_kind(value)}")
    return value


def _bool(value: Any, what: str) -> bool:
    if not isinstance(value, bool):
        raise TraefikctlError(f"{what}: expected a boolean, got {_kind(value)}")
    return value


def _uint(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise TraefikctlError(
            f"{what}: expected a non-negative integer, got {value!r}"
        )
    return value


def _str_list(value: Any, what: str) -> list[str]:
    if not isinstance(value, list):
        raise TraefikctlError(f"{what}: expected a sequence, got {_kind(value)}")
    return [_string(item, f"{what}[{pos}]") for pos, item in enumerate(value)]


def _optional(
    data: dict, key: str, convert: Callable[[Any, str], T], what: str
) -> T | None:
    value = data.get(key)
    if value is None:
        return None
    return convert(value, f"{what}.{key}")


def _map_of(
    value: Any, convert: Callable[[Any, str], T], what: str
) -> dict[str, T]:
    return {
        str(key): convert(item, f"{what}.{key}")
        for key, item in _mapping(value, what).items()
    }


def _sorted_dict(items: dict[str, T], convert: Callable[[T], Any]) -> dict:
    return {key: convert(items[key]) for key in sorted(items)}


def _first_key(items: dict[str, Any]) -> str | None:
    return min(items) if items else None


def _first_value(items: dict[str, T]) -> T | None:
    key = _first_key(items)
    return None if key is None else items[key]


def _put(out: dict, key: str, value: Any) -> None:
    if value is not None:
        out[key] = value


def _load_yaml(text: str, what: str) -> Any:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise TraefikctlError(f"failed to parse {what}: {exc}") from exc


def _dump_yaml(data: dict) -> str:
    return yaml.safe_dump(
        data, sort_keys=False, default_flow_style=False, allow_unicode=True
    )


# ---------------------------------------------------------------------------
# Static configuration
# ---------------------------------------------------------------------------


@dataclass
class FileProvider:
    """The file provider section of the static configuration."""

    directory: str | None = None
    watch: bool | None = None
    rest: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> FileProvider:
        what = "providers.file"
        data = _mapping(data, what)
        return cls(
            directory=_optional(data, "directory", _string, what),
            watch=_optional(data, "watch", _bool, what),
            rest={
                str(k): v for k, v in data.items() if k not in ("directory", "watch")
            },
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"directory": self.directory, "watch": self.watch}
        out.update(_sorted_dict(self.rest, lambda v: v))
        return out


@dataclass
class Providers:
    """The providers section of the static configuration."""

    file: FileProvider | None = None
    rest: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Providers:
        data = _mapping(data, "providers")
        raw_file = data.get("file")
        return cls(
            file=None if raw_file is None else FileProvider.from_dict(raw_file),
            rest={str(k): v for k, v in data.items() if k != "file"},
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "file": None if self.file is None else self.file.to_dict()
        }
        out.update(_sorted_dict(self.rest, lambda v: v))
        return out


@dataclass
class DnsPropagation:
    """Propagation settings of a DNS challenge."""

    delay_before_checks: int | None = None
    disable_checks: bool | None = None

    @classmethod
    def from_dict(cls, data: Any) -> DnsPropagation:
        what = "propagation"
        data = _mapping(data, what)
        return cls(
            delay_before_checks=_optional(data, "delayBeforeChecks", _uint, what),
            disable_checks=_optional(data, "disableChecks", _bool, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "delayBeforeChecks", self.delay_before_checks)
        _put(out, "disableChecks", self.disable_checks)
        return out


@dataclass
class DnsChallenge:
    """ACME DNS-01 challenge settings."""

    provider: str
    resolvers: list[str] | None = None
    propagation: DnsPropagation | None = None

    @classmethod
    def from_dict(cls, data: Any) -> DnsChallenge:
        what = "dnsChallenge"
        data = _mapping(data, what)
        raw_prop = data.get("propagation")
        return cls(
            provider=_string(_required(data, "provider", what), f"{what}.provider"),
            resolvers=_optional(data, "resolvers", _str_list, what),
            propagation=None if raw_prop is None else DnsPropagation.from_dict(raw_prop),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"provider": self.provider}
        _put(out, "resolvers", None if self.resolvers is None else list(self.resolvers))
        _put(out, "propagation", None if self.propagation is None else self.propagation.to_dict())
        return out


@dataclass
class AcmeConfig:
    """ACME settings of a certificate resolver."""

    email: str
    storage: str | None = None
    ca_server: str | None = None
    key_type: str | None = None
    dns_challenge: DnsChallenge | None = None

    @classmethod
    def from_dict(cls, data: Any) -> AcmeConfig:
        what = "acme"
        data = _mapping(data, what)
        raw_dns = data.get("dnsChallenge")
        return cls(
            email=_string(_required(data, "email", what), f"{what}.email"),
            storage=_optional(data, "storage", _string, what),
            ca_server=_optional(data, "caServer", _string, what),
            key_type=_optional(data, "keyType", _string, what),
            dns_challenge=None if raw_dns is None else DnsChallenge.from_dict(raw_dns),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {"email": self.email}
        _put(out, "storage", self.storage)
        _put(out, "caServer", self.ca_server)
        _put(out, "keyType", self.key_type)
        _put(out, "dnsChallenge", None if self.dns_challenge is None else self.dns_challenge.to_dict())
        return out


@dataclass
class CertificateResolver:
    """A named certificate resolver in the static configuration."""

    acme: AcmeConfig

    @classmethod
    def from_dict(cls, data: Any) -> CertificateResolver:
        data = _mapping(data, "certificateResolver")
        return cls(acme=AcmeConfig.from_dict(_required(data, "acme", "certificateResolver")))

    def to_dict(self) -> dict:
        return {"acme": self.acme.to_dict()}


_STATIC_KEYS = ("providers", "certificatesResolvers")


@dataclass
class TraefikStaticConfig:
    """Traefik's static configuration; keys it does not model are kept as-is."""

    providers: Providers | None = None
    certificates_resolvers: dict[str, CertificateResolver] | None = None
    rest: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> TraefikStaticConfig:
        data = _mapping(data, "static config")
        raw_providers = data.get("providers")
        raw_resolvers = data.get("certificatesResolvers")
        return cls(
            providers=None if raw_providers is None else Providers.from_dict(raw_providers),
            certificates_resolvers=(
                None
                if raw_resolvers is None
                else _map_of(
                    raw_resolvers,
                    lambda v, _w: CertificateResolver.from_dict(v),
                    "certificatesResolvers",
                )
            ),
            rest={str(k): v for k, v in data.items() if k not in _STATIC_KEYS},
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "providers", None if self.providers is None else self.providers.to_dict())
        if self.certificates_resolvers is not None:
            out["certificatesResolvers"] = _sorted_dict(
                self.certificates_resolvers, CertificateResolver.to_dict
            )
        out.update(_sorted_dict(self.rest, lambda v: v))
        return out

    @classmethod
    def from_yaml(cls, text: str) -> TraefikStaticConfig:
        return cls.from_dict(_load_yaml(text, "static config"))

    def to_yaml(self) -> str:
        return _dump_yaml(self.to_dict())


# ---------------------------------------------------------------------------
# TLS dynamic configuration
# ---------------------------------------------------------------------------


@dataclass
class TlsCertificate:
    """A certificate and key file pair."""

    cert_file: str
    key_file: str

    @classmethod
    def from_dict(cls, data: Any) -> TlsCertificate:
        what = "certificate"
        data = _mapping(data, what)
        return cls(
            cert_file=_string(_required(data, "certFile", what), f"{what}.certFile"),
            key_file=_string(_required(data, "keyFile", what), f"{what}.keyFile"),
        )

    def to_dict(self) -> dict:
        return {"certFile": self.cert_file, "keyFile": self.key_file}


@dataclass
class TlsStore:
    """A TLS certificate store."""

    default_certificate: TlsCertificate | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TlsStore:
        data = _mapping(data, "store")
        raw = data.get("defaultCertificate")
        return cls(default_certificate=None if raw is None else TlsCertificate.from_dict(raw))

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "defaultCertificate", None if self.default_certificate is None else self.default_certificate.to_dict())
        return out


@dataclass
class ClientAuth:
    """Client certificate authentication settings."""

    ca_files: list[str]
    client_auth_type: str

    @classmethod
    def from_dict(cls, data: Any) -> ClientAuth:
        what = "clientAuth"
        data = _mapping(data, what)
        return cls(
            ca_files=_str_list(_required(data, "caFiles", what), f"{what}.caFiles"),
            client_auth_type=_string(
                _required(data, "clientAuthType", what), f"{what}.clientAuthType"
            ),
        )

    def to_dict(self) -> dict:
        return {"caFiles": list(self.ca_files), "clientAuthType": self.client_auth_type}


@dataclass
class TlsOptions:
    """A named set of TLS options."""

    client_auth: ClientAuth | None = None
    min_version: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TlsOptions:
        what = "options"
        data = _mapping(data, what)
        raw = data.get("clientAuth")
        return cls(
            client_auth=None if raw is None else ClientAuth.from_dict(raw),
            min_version=_optional(data, "minVersion", _string, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "clientAuth", None if self.client_auth is None else self.client_auth.to_dict())
        _put(out, "minVersion", self.min_version)
        return out


@dataclass
class TlsConfig:
    """The tls section of a dynamic configuration file."""

    certificates: list[TlsCertificate] | None = None
    stores: dict[str, TlsStore] | None = None
    options: dict[str, TlsOptions] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TlsConfig:
        what = "tls"
        data = _mapping(data, what)
        raw_certs = data.get("certificates")
        if raw_certs is not None and not isinstance(raw_certs, list):
            raise TraefikctlError(f"{what}.certificates: expected a sequence")
        raw_stores = data.get("stores")
        raw_options = data.get("options")
        return cls(
            certificates=None if raw_certs is None else [TlsCertificate.from_dict(c) for c in raw_certs],
            stores=None if raw_stores is None else _map_of(raw_stores, lambda v, _w: TlsStore.from_dict(v), f"{what}.stores"),
            options=None if raw_options is None else _map_of(raw_options, lambda v, _w: TlsOptions.from_dict(v), f"{what}.options"),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        if self.certificates is not None:
            out["certificates"] = [c.to_dict() for c in self.certificates]
        if self.stores is not None:
            out["stores"] = _sorted_dict(self.stores, TlsStore.to_dict)
        if self.options is not None:
            out["options"] = _sorted_dict(self.options, TlsOptions.to_dict)
        return out


# ---------------------------------------------------------------------------
# HTTP dynamic configuration
# ---------------------------------------------------------------------------


@dataclass
class RouterTls:
    """TLS settings of an HTTP router."""

    cert_resolver: str | None = None
    options: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> RouterTls:
        what = "router.tls"
        data = _mapping(data, what)
        return cls(
            cert_resolver=_optional(data, "certResolver", _string, what),
            options=_optional(data, "options", _string, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "certResolver", self.cert_resolver)
        _put(out, "options", self.options)
        return out


@dataclass
class Router:
    """An HTTP router."""

    rule: str
    entrypoints: list[str]
    service: str
    tls: RouterTls | None = None
    middlewares: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Router:
        what = "router"
        data = _mapping(data, what)
        raw_tls = data.get("tls")
        return cls(
            rule=_string(_required(data, "rule", what), f"{what}.rule"),
            entrypoints=_str_list(_required(data, "entryPoints", what), f"{what}.entryPoints"),
            service=_string(_required(data, "service", what), f"{what}.service"),
            tls=None if raw_tls is None else RouterTls.from_dict(raw_tls),
            middlewares=_optional(data, "middlewares", _str_list, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "rule": self.rule,
            "entryPoints": list(self.entrypoints),
            "service": self.service,
        }
        _put(out, "tls", None if self.tls is None else self.tls.to_dict())
        _put(out, "middlewares", None if self.middlewares is None else list(self.middlewares))
        return out


@dataclass
class Server:
    """An HTTP backend server."""

    url: str

    @classmethod
    def from_dict(cls, data: Any) -> Server:
        data = _mapping(data, "server")
        return cls(url=_string(_required(data, "url", "server"), "server.url"))

    def to_dict(self) -> dict:
        return {"url": self.url}


@dataclass
class LoadBalancer:
    """An HTTP load balancer."""

    servers: list[Server]

    @classmethod
    def from_dict(cls, data: Any) -> LoadBalancer:
        data = _mapping(data, "loadBalancer")
        raw = _required(data, "servers", "loadBalancer")
        if not isinstance(raw, list):
            raise TraefikctlError("loadBalancer.servers: expected a sequence")
        return cls(servers=[Server.from_dict(s) for s in raw])

    def to_dict(self) -> dict:
        return {"servers": [s.to_dict() for s in self.servers]}


@dataclass
class Service:
    """An HTTP service."""

    load_balancer: LoadBalancer

    @classmethod
    def from_dict(cls, data: Any) -> Service:
        data = _mapping(data, "service")
        return cls(load_balancer=LoadBalancer.from_dict(_required(data, "loadBalancer", "service")))

    def to_dict(self) -> dict:
        return {"loadBalancer": self.load_balancer.to_dict()}


@dataclass
class HttpConfig:
    """The http section of a route file."""

    routers: dict[str, Router]
    services: dict[str, Service]

    @classmethod
    def from_dict(cls, data: Any) -> HttpConfig:
        data = _mapping(data, "http")
        return cls(
            routers=_map_of(_required(data, "routers", "http"), lambda v, _w: Router.from_dict(v), "http.routers"),
            services=_map_of(_required(data, "services", "http"), lambda v, _w: Service.from_dict(v), "http.services"),
        )

    def to_dict(self) -> dict:
        return {
            "routers": _sorted_dict(self.routers, Router.to_dict),
            "services": _sorted_dict(self.services, Service.to_dict),
        }


# ---------------------------------------------------------------------------
# TCP dynamic configuration
# ---------------------------------------------------------------------------


@dataclass
class TcpRouterTls:
    """TLS settings of a TCP router."""

    passthrough: bool | None = None
    options: str | None = None
    cert_resolver: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TcpRouterTls:
        what = "tcp router.tls"
        data = _mapping(data, what)
        return cls(
            passthrough=_optional(data, "passthrough", _bool, what),
            options=_optional(data, "options", _string, what),
            cert_resolver=_optional(data, "certResolver", _string, what),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "passthrough", self.passthrough)
        _put(out, "options", self.options)
        _put(out, "certResolver", self.cert_resolver)
        return out


@dataclass
class TcpRouter:
    """A TCP router."""

    rule: str
    entrypoints: list[str]
    service: str
    tls: TcpRouterTls | None = None
    middlewares: list[str] | None = None
    priority: int | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TcpRouter:
        what = "tcp router"
        data = _mapping(data, what)
        raw_tls = data.get("tls")
        priority = _optional(data, "priority", _uint, what)
        if priority is not None and priority > 0xFFFFFFFF:
            raise TraefikctlError(f"{what}.priority: value {priority} out of range")
        return cls(
            rule=_string(_required(data, "rule", what), f"{what}.rule"),
            entrypoints=_str_list(_required(data, "entryPoints", what), f"{what}.entryPoints"),
            service=_string(_required(data, "service", what), f"{what}.service"),
            tls=None if raw_tls is None else TcpRouterTls.from_dict(raw_tls),
            middlewares=_optional(data, "middlewares", _str_list, what),
            priority=priority,
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {
            "rule": self.rule,
            "entryPoints": list(self.entrypoints),
            "service": self.service,
        }
        _put(out, "tls", None if self.tls is None else self.tls.to_dict())
        _put(out, "middlewares", None if self.middlewares is None else list(self.middlewares))
        _put(out, "priority", self.priority)
        return out


@dataclass
class TcpServer:
    """A TCP backend server."""

    address: str

    @classmethod
    def from_dict(cls, data: Any) -> TcpServer:
        data = _mapping(data, "server")
        return cls(address=_string(_required(data, "address", "server"), "server.address"))

    def to_dict(self) -> dict:
        return {"address": self.address}


@dataclass
class TcpLoadBalancer:
    """A TCP load balancer."""

    servers: list[TcpServer]

    @classmethod
    def from_dict(cls, data: Any) -> TcpLoadBalancer:
        data = _mapping(data, "loadBalancer")
        raw = _required(data, "servers", "loadBalancer")
        if not isinstance(raw, list):
            raise TraefikctlError("loadBalancer.servers: expected a sequence")
        return cls(servers=[TcpServer.from_dict(s) for s in raw])

    def to_dict(self) -> dict:
        return {"servers": [s.to_dict() for s in self.servers]}


@dataclass
class TcpService:
    """A TCP service."""

    load_balancer: TcpLoadBalancer

    @classmethod
    def from_dict(cls, data: Any) -> TcpService:
        data = _mapping(data, "service")
        return cls(load_balancer=TcpLoadBalancer.from_dict(_required(data, "loadBalancer", "service")))

    def to_dict(self) -> dict:
        return {"loadBalancer": self.load_balancer.to_dict()}


@dataclass
class TcpConfig:
    """The tcp section of a route file."""

    routers: dict[str, TcpRouter]
    services: dict[str, TcpService]

    @classmethod
    def from_dict(cls, data: Any) -> TcpConfig:
        data = _mapping(data, "tcp")
        return cls(
            routers=_map_of(_required(data, "routers", "tcp"), lambda v, _w: TcpRouter.from_dict(v), "tcp.routers"),
            services=_map_of(_required(data, "services", "tcp"), lambda v, _w: TcpService.from_dict(v), "tcp.services"),
        )

    def to_dict(self) -> dict:
        return {
            "routers": _sorted_dict(self.routers, TcpRouter.to_dict),
            "services": _sorted_dict(self.services, TcpService.to_dict),
        }


# ---------------------------------------------------------------------------
# UDP dynamic configuration
# ---------------------------------------------------------------------------


@dataclass
class UdpRouter:
    """A UDP router; UDP routers carry no rule."""

    entrypoints: list[str]
    service: str

    @classmethod
    def from_dict(cls, data: Any) -> UdpRouter:
        what = "udp router"
        data = _mapping(data, what)
        return cls(
            entrypoints=_str_list(_required(data, "entryPoints", what), f"{what}.entryPoints"),
            service=_string(_required(data, "service", what), f"{what}.service"),
        )

    def to_dict(self) -> dict:
        return {"entryPoints": list(self.entrypoints), "service": self.service}


@dataclass
class UdpServer:
    """A UDP backend server."""

    address: str

    @classmethod
    def from_dict(cls, data: Any) -> UdpServer:
        data = _mapping(data, "server")
        return cls(address=_string(_required(data, "address", "server"), "server.address"))

    def to_dict(self) -> dict:
        return {"address": self.address}


@dataclass
class UdpLoadBalancer:
    """A UDP load balancer."""

    servers: list[UdpServer]

    @classmethod
    def from_dict(cls, data: Any) -> UdpLoadBalancer:
        data = _mapping(data, "loadBalancer")
        raw = _required(data, "servers", "loadBalancer")
        if not isinstance(raw, list):
            raise TraefikctlError("loadBalancer.servers: expected a sequence")
        return cls(servers=[UdpServer.from_dict(s) for s in raw])

    def to_dict(self) -> dict:
        return {"servers": [s.to_dict() for s in self.servers]}


@dataclass
class UdpService:
    """A UDP service."""

    load_balancer: UdpLoadBalancer

    @classmethod
    def from_dict(cls, data: Any) -> UdpService:
        data = _mapping(data, "service")
        return cls(load_balancer=UdpLoadBalancer.from_dict(_required(data, "loadBalancer", "service")))

    def to_dict(self) -> dict:
        return {"loadBalancer": self.load_balancer.to_dict()}


@dataclass
class UdpConfig:
    """The udp section of a route file."""

    routers: dict[str, UdpRouter]
    services: dict[str, UdpService]

    @classmethod
    def from_dict(cls, data: Any) -> UdpConfig:
        data = _mapping(data, "udp")
        return cls(
            routers=_map_of(_required(data, "routers", "udp"), lambda v, _w: UdpRouter.from_dict(v), "udp.routers"),
            services=_map_of(_required(data, "services", "udp"), lambda v, _w: UdpService.from_dict(v), "udp.services"),
        )

    def to_dict(self) -> dict:
        return {
            "routers": _sorted_dict(self.routers, UdpRouter.to_dict),
            "services": _sorted_dict(self.services, UdpService.to_dict),
        }


# ---------------------------------------------------------------------------
# Route files
# ---------------------------------------------------------------------------


_HOST_PREFIX = "Host(`"
_HOST_SUFFIX = "`)"


@dataclass
class TraefikDynamicConfig:
    """A dynamic configuration file holding one route."""

    http: HttpConfig | None = None
    tcp: TcpConfig | None = None
    udp: UdpConfig | None = None
    tls: TlsConfig | None = None

    @classmethod
    def new_http(
        cls,
        name: str,
        host: str,
        backend_url: str,
        entrypoints: list[str],
        tls: RouterTls | None = None,
        middlewares: list[str] | None = None,
    ) -> TraefikDynamicConfig:
        router = Router(
            rule=f"{_HOST_PREFIX}{host}{_HOST_SUFFIX}",
            entrypoints=list(entrypoints),
            service=name,
            tls=tls,
            middlewares=None if middlewares is None else list(middlewares),
        )
        service = Service(LoadBalancer([Server(backend_url)]))
        return cls(http=HttpConfig(routers={name: router}, services={name: service}))

    @classmethod
    def new_tcp(
        cls,
        name: str,
        rule: str,
        address: str,
        entrypoints: list[str],
        tls: TcpRouterTls | None = None,
    ) -> TraefikDynamicConfig:
        router = TcpRouter(rule=rule, entrypoints=list(entrypoints), service=name, tls=tls)
        service = TcpService(TcpLoadBalancer([TcpServer(address)]))
        return cls(tcp=TcpConfig(routers={name: router}, services={name: service}))

    @classmethod
    def new_udp(cls, name: str, address: str, entrypoints: list[str]) -> TraefikDynamicConfig:
        router = UdpRouter(entrypoints=list(entrypoints), service=name)
        service = UdpService(UdpLoadBalancer([UdpServer(address)]))
        return cls(udp=UdpConfig(routers={name: router}, services={name: service}))

    def route_name(self) -> str | None:
        """Name of the first router of the first protocol section present."""
        for section in (self.http, self.tcp, self.udp):
            if section is not None:
                return _first_key(section.routers)
        return None

    def protocol(self) -> str:
        if self.http is not None:
            return "http"
        if self.tcp is not None:
            return "tcp"
        if self.udp is not None:
            return "udp"
        return "unknown"

    def host(self) -> str | None:
        """The host of a plain ``Host(`...`)`` HTTP rule, if that is the rule."""
        if self.http is None:
            return None
        router = _first_value(self.http.routers)
        if router is None:
            return None
        rule = router.rule
        if not (rule.startswith(_HOST_PREFIX) and rule[len(_HOST_PREFIX):].endswith(_HOST_SUFFIX)):
            return None
        return rule[len(_HOST_PREFIX):len(rule) - len(_HOST_SUFFIX)]

    def tcp_rule(self) -> str | None:
        if self.tcp is None:
            return None
        router = _first_value(self.tcp.routers)
        return None if router is None else router.rule

    def backend_url(self) -> str | None:
        if self.http is None:
            return None
        service = _first_value(self.http.services)
        if service is None or not service.load_balancer.servers:
            return None
        return service.load_balancer.servers[0].url

    def backend_address(self) -> str | None:
        for section in (self.tcp, self.udp):
            if section is not None:
                service = _first_value(section.services)
                if service is None or not service.load_balancer.servers:
                    return None
                return service.load_balancer.servers[0].address
        return None

    @classmethod
    def from_dict(cls, data: Any) -> TraefikDynamicConfig:
        data = _mapping(data, "dynamic config")
        raw_http = data.get("http")
        raw_tcp = data.get("tcp")
        raw_udp = data.get("udp")
        raw_tls = data.get("tls")
        return cls(
            http=None if raw_http is None else HttpConfig.from_dict(raw_http),
            tcp=None if raw_tcp is None else TcpConfig.from_dict(raw_tcp),
            udp=None if raw_udp is None else UdpConfig.from_dict(raw_udp),
            tls=None if raw_tls is None else TlsConfig.from_dict(raw_tls),
        )

    def to_dict(self) -> dict:
        out: dict[str, Any] = {}
        _put(out, "http", None if self.http is None else self.http.to_dict())
        _put(out, "tcp", None if self.tcp is None else self.tcp.to_dict())
        _put(out, "udp", None if self.udp is None else self.udp.to_dict())
        _put(out, "tls", None if self.tls is None else self.tls.to_dict())
        return out

    @classmethod
    def from_yaml(cls, text: str) -> TraefikDynamicConfig:
        return cls.from_dict(_load_yaml(text, "dynamic config"))

    def to_yaml(self) -> str:
        return _dump_yaml(self.to_dict())