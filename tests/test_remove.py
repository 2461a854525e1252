import io

import pytest

from traefikctl.commands.remove import execute
from traefikctl.errors import TraefikctlError, ValidationError


def tmp_with_route(directory, name):
    content = (
        f"http:\n  routers:\n    {name}:\n      rule: \"Host(`{name}.test`)\"\n"
        f"      entryPoints: [web]\n      service: {name}\n  services:\n"
        f"    {name}:\n      loadBalancer:\n        servers:\n"
        f"          - url: http://127.0.0.1:80\n"
    )
    (directory / f"{name}.yml").write_text(content, encoding="utf-8")
    return directory


def test_remove_deletes_file_with_force(tmp_path):
    tmp_with_route(tmp_path, "myapp")
    assert (tmp_path / "myapp.yml").exists()
    execute(tmp_path, "myapp", force=True, dry_run=False)
    assert not (tmp_path / "myapp.yml").exists()


def test_remove_dry_run_keeps_file(tmp_path, capsys):
    tmp_with_route(tmp_path, "keepme")
    execute(tmp_path, "keepme", force=True, dry_run=True)
    assert (tmp_path / "keepme.yml").exists()
    assert "would remove route keepme" in capsys.readouterr().out


def test_remove_missing_route_errors(tmp_path):
    with pytest.raises(TraefikctlError) as info:
        execute(tmp_path, "ghost", force=True, dry_run=False)
    assert "not found" in str(info.value)


def test_remove_validates_name(tmp_path):
    with pytest.raises(ValidationError) as info:
        execute(tmp_path, "bad name!", force=True, dry_run=False)
    assert "invalid character" in str(info.value)


@pytest.mark.parametrize("answer", ["y\n", "yes\n", "YES\n", " Y \n"])
def test_remove_confirmed_deletes(tmp_path, monkeypatch, answer):
    tmp_with_route(tmp_path, "confirm")
    monkeypatch.setattr("sys.stdin", io.StringIO(answer))
    execute(tmp_path, "confirm", force=False, dry_run=False)
    assert not (tmp_path / "confirm.yml").exists()


@pytest.mark.parametrize("answer", ["n\n", "\n", "", "nope\n"])
def test_remove_declined_keeps_file(tmp_path, monkeypatch, capsys, answer):
    tmp_with_route(tmp_path, "decline")
    monkeypatch.setattr("sys.stdin", io.StringIO(answer))
    execute(tmp_path, "decline", force=False, dry_run=False)
    assert (tmp_path / "decline.yml").exists()
    assert "aborted" in capsys.readouterr().out