from pathlib import Path

from traefikctl.commands.listing import execute


def write_route(directory: Path, name: str) -> None:
    yaml = (
        f"http:\n  routers:\n    {name}:\n      rule: \"Host(`{name}.test`)\"\n"
        f"      entryPoints:\n      - web\n      service: {name}\n  services:\n"
        f"    {name}:\n      loadBalancer:\n        servers:\n"
        f"        - url: http://127.0.0.1:80\n"
    )
    (directory / f"{name}.yml").write_text(yaml)


def write_tcp_route(directory: Path, name: str) -> None:
    yaml = (
        f"tcp:\n  routers:\n    {name}:\n      rule: \"HostSNI(`*`)\"\n"
        f"      entryPoints:\n      - postgres\n      service: {name}\n  services:\n"
        f"    {name}:\n      loadBalancer:\n        servers:\n"
        f"        - address: 10.0.0.5:5432\n"
    )
    (directory / f"{name}.yml").write_text(yaml)


def write_udp_route(directory: Path, name: str) -> None:
    yaml = (
        f"udp:\n  routers:\n    {name}:\n      entryPoints:\n      - dns\n"
        f"      service: {name}\n  services:\n    {name}:\n      loadBalancer:\n"
        f"        servers:\n        - address: 10.0.0.2:53\n"
    )
    (directory / f"{name}.yml").write_text(yaml)


def write_middleware(directory: Path, name: str) -> None:
    yaml = f"http:\n  middlewares:\n    {name}:\n      compress: {{}}\n"
    (directory / f"mw-{name}.yml").write_text(yaml)


def test_list_nonexistent_dir_ok(tmp_path, capsys):
    execute(tmp_path / "nope")
    out = capsys.readouterr().out
    assert "does not exist" in out


def test_list_empty_dir_ok(tmp_path, capsys):
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "no routes or middlewares configured" in out


def test_list_routes_only(tmp_path, capsys):
    write_route(tmp_path, "app1")
    write_route(tmp_path, "app2")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "2 route(s)" in out
    assert "[HTTP] app1 → app1.test → http://127.0.0.1:80 [web]" in out
    assert "[HTTP] app2 → app2.test → http://127.0.0.1:80 [web]" in out
    assert out.index("app1") < out.index("app2")
    assert "middleware(s)" not in out


def test_list_middlewares_only(tmp_path, capsys):
    write_middleware(tmp_path, "compress")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "1 middleware(s)" in out
    assert "compress (compress)" in out
    assert "route(s)" not in out


def test_list_mixed_routes_and_middlewares(tmp_path, capsys):
    write_route(tmp_path, "myapp")
    write_middleware(tmp_path, "headers")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "1 route(s)" in out
    assert "1 middleware(s)" in out
    assert "[HTTP] myapp" in out
    assert "headers (compress)" in out


def test_list_ignores_non_yaml_files(tmp_path, capsys):
    (tmp_path / "notes.txt").write_text("not yaml")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "no routes or middlewares configured" in out


def test_list_handles_malformed_yaml_gracefully(tmp_path, capsys):
    (tmp_path / "bad.yml").write_text("not: [valid: yaml: config")
    execute(tmp_path)
    captured = capsys.readouterr()
    assert "1 route(s)" in captured.out
    assert "failed to parse" in captured.err
    assert "bad.yml" in captured.err


def test_list_tcp_routes(tmp_path, capsys):
    write_tcp_route(tmp_path, "postgres")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "[TCP] postgres → HostSNI(`*`) → 10.0.0.5:5432 [postgres]" in out


def test_list_udp_routes(tmp_path, capsys):
    write_udp_route(tmp_path, "dns")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "[UDP] dns → 10.0.0.2:53 [dns]" in out


def test_list_mixed_protocols(tmp_path, capsys):
    write_route(tmp_path, "webapp")
    write_tcp_route(tmp_path, "postgres")
    write_udp_route(tmp_path, "dns")
    write_middleware(tmp_path, "headers")
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "3 route(s)" in out
    assert "1 middleware(s)" in out
    assert out.index("[UDP] dns") < out.index("[TCP] postgres") < out.index("[HTTP] webapp")


def test_list_tls_badge(tmp_path, capsys):
    yaml = (
        "http:\n  routers:\n    sec:\n      rule: \"Host(`sec.test`)\"\n"
        "      entryPoints: [web, websecure]\n      service: sec\n"
        "      tls:\n        certResolver: le\n  services:\n    sec:\n"
        "      loadBalancer:\n        servers:\n        - url: https://b:443\n"
    )
    (tmp_path / "sec.yaml").write_text(yaml)
    execute(tmp_path)
    out = capsys.readouterr().out
    assert "[HTTP] sec → sec.test → https://b:443 [web, websecure] 🔒" in out