# traefikctl

Manage Traefik's dynamic configuration directory from Python. The package
builds, inspects, updates, lists and removes the per-route and
per-middleware YAML files that Traefik's file provider watches.

Each HTTP, TCP or UDP route lives in `<name>.yml`. Each middleware lives in
`mw-<name>.yml`. Keys are written in Traefik's camelCase form
(`entryPoints`, `loadBalancer`, `certResolver`, ...). Map keys are written
in sorted order, so writing the same configuration twice gives identical
files.

## Building route files

```python
from pathlib import Path

from traefikctl.config import RouterTls, TraefikDynamicConfig

cfg = TraefikDynamicConfig.new_http(
    "myapp",
    "app.example.com",
    "http://127.0.0.1:3000",
    ["web", "websecure"],
    RouterTls(cert_resolver="letsencrypt"),
    ["headers"],
)
Path("/etc/traefik/conf.d/myapp.yml").write_text(cfg.to_yaml())

db = TraefikDynamicConfig.new_tcp(
    "postgres", "HostSNI(`*`)", "10.0.0.1:5432", ["postgres"], None
)
dns = TraefikDynamicConfig.new_udp("dns", "10.0.0.53:53", ["dns"])
```

`TraefikDynamicConfig.from_yaml(text)` parses a route file. These methods
inspect it:

- `route_name()`
- `protocol()`, which returns `"http"`, `"tcp"`, `"udp"` or `"unknown"`
- `host()`, which returns a value only for a plain ``Host(`...`)`` rule
- `tcp_rule()`
- `backend_url()`
- `backend_address()`

A file's `tls` section (certificates, stores, options) is modelled by
`TlsConfig`. Traefik's static configuration is modelled by
`TraefikStaticConfig`, which keeps the top-level keys it does not know
(`entryPoints`, `api`, ...) when it writes the file back.

## Middlewares

```python
from traefikctl.middleware import (
    HeadersMiddleware,
    MiddlewareDefinition,
    MiddlewareDynamicConfig,
    RateLimitMiddleware,
)

mw = MiddlewareDynamicConfig.new(
    "sec-headers",
    MiddlewareDefinition(headers=HeadersMiddleware.security_preset()),
)
print(mw.middleware_type())  # "headers"
print(mw.to_yaml())

rl = MiddlewareDynamicConfig.new(
    "rl",
    MiddlewareDefinition(rate_limit=RateLimitMiddleware(average=100, burst=200)),
)
```

The supported kinds are:

- headers (`HeadersMiddleware`)
- rate limit (`RateLimitMiddleware`)
- redirect scheme (`RedirectSchemeMiddleware`)
- basic auth (`BasicAuthMiddleware`)
- strip prefix (`StripPrefixMiddleware`)
- compress (`CompressMiddleware`)

`middleware_type()` reports the kind as `headers`, `rate-limit`,
`redirect-scheme`, `basic-auth`, `strip-prefix` or `compress`.

## Validation

`traefikctl.validation` offers these functions:

- `validate_host`
- `validate_url`
- `validate_address`
- `validate_name`

Each one raises `traefikctl.errors.ValidationError` when it rejects its
input.

## Managing a configuration directory

```python
from traefikctl.commands import listing, remove, remove_middleware, update

listing.execute("/etc/traefik/conf.d")

update.execute(
    "/etc/traefik/conf.d",
    "myapp",
    host="new.example.com",
    tls=True,
    middlewares="auth,headers",
)

remove.execute("/etc/traefik/conf.d", "myapp", force=True)
remove_middleware.execute("/etc/traefik/conf.d", "sec-headers", force=True, dry_run=True)
```

- `listing.execute` prints every route and middleware file in the
  directory. Files it cannot read or parse are reported on stderr and
  skipped.
- `update.execute` changes only HTTP routes. With `tls=True` it adds the
  `websecure` entry point. With `tls=False` it removes the TLS settings and
  the `websecure` entry point. An empty `middlewares` string clears the
  router's middlewares.
- With `dry_run=True`, nothing is written or deleted. The intended change is
  printed instead.
- Without `force`, removals ask for confirmation on stdin.

Failures raise `traefikctl.errors.TraefikctlError`. Examples are a missing
route, an unreadable file or an invalid configuration.

`traefikctl.traefik.reload_traefik()` runs `systemctl reload traefik`. If
that fails, it runs `systemctl restart traefik`, and it raises
`TraefikctlError` if both fail.

## What is not included

The package has no command-line program. It works only as a library.

It does not offer operations to do the following:

- create route or middleware files in a configuration directory; you build
  them with the classes above and write them yourself
- set up ACME certificate resolvers or a local CA
- register certificate files
- check that Traefik's file provider is set up