# tests/test_policy.py
from __future__ import annotations

from filedock.server.policy import Policy


def test_loads_yaml(tmp_path):
    cfg = tmp_path / "policy.yaml"
    cfg.write_text(
        "visibility:\n  backend: dotfile\nblocked_commands: [Greet]\n"
        "defaults:\n  port: 9000\n",
        encoding="utf-8",
    )
    p = Policy(str(cfg))
    assert p.visibility_backend() == "dotfile"
    assert p.is_command_blocked("greet")
    assert not p.is_command_blocked("list_files")
    assert p.defaults()["port"] == 9000


def test_missing_file_means_defaults(tmp_path):
    p = Policy(str(tmp_path / "absent.yaml"))
    assert p.cfg == {}
    assert p.visibility_backend() == "auto"
    assert p.sandbox_guard(str(tmp_path)) == (True, "")


def test_env_override(tmp_path, monkeypatch):
    cfg = tmp_path / "env.yaml"
    cfg.write_text("visibility:\n  backend: attribute\n", encoding="utf-8")
    monkeypatch.setenv("FILEDOCK_POLICY", str(cfg))
    assert Policy().visibility_backend() == "attribute"


def test_sandbox_guard(tmp_path):
    root = tmp_path / "root"
    root.mkdir()
    cfg = tmp_path / "sb.yaml"
    cfg.write_text(f"path_sandboxes:\n  - '{root}'\n", encoding="utf-8")
    p = Policy(str(cfg))
    assert p.sandbox_guard(str(root / "child"))[0] is True
    ok, reason = p.sandbox_guard(str(tmp_path / "elsewhere"))
    assert ok is False
    assert "outside sandbox" in reason
