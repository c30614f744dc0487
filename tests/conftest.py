# tests/conftest.py
from __future__ import annotations
import os, sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from filedock.server.main import app
from filedock.server.policy import policy
from filedock.worker import visibility


def make_files(directory: Path, *names: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    for n in names:
        (directory / n).write_text(f"content of {n}", encoding="utf-8")
    return directory


class FakeAttributes:
    """In-memory stand-in for GetFileAttributes/SetFileAttributesW keyed by path."""

    def __init__(self, initial: int = 0x20):  # FILE_ATTRIBUTE_ARCHIVE
        self.initial = initial
        self.attrs: dict[str, int] = {}
        self.fail_on: set[str] = set()

    def get(self, path) -> int:
        return self.attrs.get(os.fspath(path), self.initial)

    def set(self, path, attrs: int) -> None:
        if Path(path).name in self.fail_on:
            raise PermissionError(13, "Access is denied")
        self.attrs[os.fspath(path)] = attrs


@pytest.fixture()
def fake_attrs(monkeypatch):
    fake = FakeAttributes()
    monkeypatch.setattr(visibility, "_get_file_attributes", fake.get)
    monkeypatch.setattr(visibility, "_set_file_attributes", fake.set)
    return fake


@pytest.fixture()
def policy_cfg(monkeypatch):
    """Swap the loaded policy for a per-test dict."""
    cfg = {"defaults": {}, "visibility": {"backend": "dotfile"},
           "path_sandboxes": [], "blocked_commands": []}
    monkeypatch.setattr(policy, "cfg", cfg)
    return cfg


@pytest.fixture()
def client(policy_cfg):
    return TestClient(app)
