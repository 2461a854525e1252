import pytest

from traefikctl.commands.update import execute
from traefikctl.config import RouterTls, TraefikDynamicConfig
from traefikctl.errors import TraefikctlError, ValidationError


def create_route(directory, name):
    cfg = TraefikDynamicConfig.new_http(
        name, f"{name}.example.com", f"http://{name}:80", ["web"], None, None
    )
    (directory / f"{name}.yml").write_text(cfg.to_yaml(), encoding="utf-8")


def read(directory, name):
    return (directory / f"{name}.yml").read_text(encoding="utf-8")


def router_entrypoints(router):
    return router.to_dict()["entryPoints"]


def test_update_host(tmp_path):
    create_route(tmp_path, "up")
    execute(tmp_path, "up", host="new.example.com")
    content = read(tmp_path, "up")
    assert "Host(`new.example.com`)" in content
    assert TraefikDynamicConfig.from_yaml(content).host() == "new.example.com"


def test_update_url(tmp_path):
    create_route(tmp_path, "urlup")
    execute(tmp_path, "urlup", url="http://newback:9999")
    content = read(tmp_path, "urlup")
    assert "http://newback:9999" in content
    assert TraefikDynamicConfig.from_yaml(content).backend_url() == "http://newback:9999"


def test_update_enable_tls(tmp_path):
    create_route(tmp_path, "tlsup")
    execute(tmp_path, "tlsup", tls=True)
    content = read(tmp_path, "tlsup")
    assert "tls:" in content
    assert "certResolver:" not in content
    assert "websecure" in content
    router = TraefikDynamicConfig.from_yaml(content).http.routers["tlsup"]
    assert router_entrypoints(router) == ["web", "websecure"]


def test_update_enable_tls_does_not_duplicate_websecure(tmp_path):
    cfg = TraefikDynamicConfig.new_http(
        "dup", "dup.example.com", "http://dup:80", ["websecure"], None, None
    )
    (tmp_path / "dup.yml").write_text(cfg.to_yaml(), encoding="utf-8")
    execute(tmp_path, "dup", tls=True)
    router = TraefikDynamicConfig.from_yaml(read(tmp_path, "dup")).http.routers["dup"]
    assert router_entrypoints(router) == ["websecure"]


def test_update_disable_tls(tmp_path):
    cfg = TraefikDynamicConfig.new_http(
        "tlsoff",
        "tlsoff.example.com",
        "http://tlsoff:80",
        ["web", "websecure"],
        RouterTls(cert_resolver="letsencrypt"),
        None,
    )
    (tmp_path / "tlsoff.yml").write_text(cfg.to_yaml(), encoding="utf-8")
    execute(tmp_path, "tlsoff", tls=False)
    content = read(tmp_path, "tlsoff")
    assert "certResolver:" not in content
    assert "websecure" not in content


def test_update_entrypoint(tmp_path):
    create_route(tmp_path, "epup")
    execute(tmp_path, "epup", entrypoint="internal")
    router = TraefikDynamicConfig.from_yaml(read(tmp_path, "epup")).http.routers["epup"]
    assert router_entrypoints(router) == ["internal"]


def test_update_middlewares(tmp_path):
    create_route(tmp_path, "mwup")
    execute(tmp_path, "mwup", middlewares="auth,headers")
    content = read(tmp_path, "mwup")
    assert "auth" in content
    assert "headers" in content
    router = TraefikDynamicConfig.from_yaml(content).http.routers["mwup"]
    assert router.middlewares == ["auth", "headers"]


def test_update_middlewares_trims_and_drops_empty(tmp_path):
    create_route(tmp_path, "mwtrim")
    execute(tmp_path, "mwtrim", middlewares=" auth , ,headers ")
    router = TraefikDynamicConfig.from_yaml(read(tmp_path, "mwtrim")).http.routers["mwtrim"]
    assert router.middlewares == ["auth", "headers"]


def test_update_clear_middlewares(tmp_path):
    cfg = TraefikDynamicConfig.new_http(
        "clrmw", "clrmw.example.com", "http://clrmw:80", ["web"], None, ["auth"]
    )
    (tmp_path / "clrmw.yml").write_text(cfg.to_yaml(), encoding="utf-8")
    execute(tmp_path, "clrmw", middlewares="")
    assert "middlewares:" not in read(tmp_path, "clrmw")


def test_update_dry_run_no_write(tmp_path, capsys):
    create_route(tmp_path, "dryup")
    before = read(tmp_path, "dryup")
    execute(tmp_path, "dryup", host="changed.example.com", dry_run=True)
    after = read(tmp_path, "dryup")
    assert before == after
    out = capsys.readouterr().out
    assert "dry-run" in out
    assert "Host(`changed.example.com`)" in out


def test_update_missing_route_errors(tmp_path):
    with pytest.raises(TraefikctlError) as info:
        execute(tmp_path, "ghost", host="x.example.com")
    assert "not found" in str(info.value)


def test_update_validates_host(tmp_path):
    create_route(tmp_path, "valhost")
    with pytest.raises(ValidationError) as info:
        execute(tmp_path, "valhost", host="bad host!")
    message = str(info.value)
    assert "whitespace" in message or "invalid" in message


def test_update_validates_url(tmp_path):
    create_route(tmp_path, "valurl")
    with pytest.raises(ValidationError) as info:
        execute(tmp_path, "valurl", url="ftp://bad")
    assert "http://" in str(info.value)


def test_update_validates_name(tmp_path):
    with pytest.raises(ValidationError) as info:
        execute(tmp_path, "bad name!", host="x.example.com")
    assert "invalid character" in str(info.value)


def test_update_rejects_tcp_route(tmp_path):
    cfg = TraefikDynamicConfig.new_tcp("db", "HostSNI(`*`)", "10.0.0.1:5432", ["db"], None)
    (tmp_path / "db.yml").write_text(cfg.to_yaml(), encoding="utf-8")
    with pytest.raises(TraefikctlError) as info:
        execute(tmp_path, "db", host="db.example.com")
    assert "not an HTTP route" in str(info.value)


def test_update_malformed_file_errors(tmp_path):
    (tmp_path / "broken.yml").write_text("not: [valid: yaml: config", encoding="utf-8")
    with pytest.raises(TraefikctlError) as info:
        execute(tmp_path, "broken", host="x.example.com")
    assert "failed to parse" in str(info.value)