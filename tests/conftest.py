from __future__ import annotations

from pathlib import Path

import pytest

from platform_roots.config import paths

OVERRIDE_VARS = ("ROOT", "DATAROOT", "DB_ROOT", "DB_BASEDIR")


@pytest.fixture(autouse=True)
def clean_root_env(monkeypatch) -> None:
    for name in OVERRIDE_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def no_system_dirs(monkeypatch, tmp_path: Path) -> Path:
    empty = tmp_path / "system-sbin"
    empty.mkdir()
    monkeypatch.setattr(paths, "ENGINE_SYSTEM_DIRS", (str(empty),))
    return empty


@pytest.fixture
def install_engine():
    def _install(prefix: Path) -> Path:
        sbin = prefix / "sbin"
        sbin.mkdir(parents=True)
        binary = sbin / paths.ENGINE_BINARY
        binary.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
        binary.chmod(0o755)
        return binary

    return _install
