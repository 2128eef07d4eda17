from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass


def _env_value(environ: Mapping[str, str], name: str) -> str | None:
    raw = environ.get(name)
    if not raw:
        return None
    return raw


@dataclass(frozen=True)
class RootEnvironment:
    root: str | None
    data_root: str | None
    db_root: str | None
    db_basedir: str | None
    search_path: str


def get_settings(environ: Mapping[str, str] | None = None) -> RootEnvironment:
    source = os.environ if environ is None else environ
    return RootEnvironment(
        root=_env_value(source, "ROOT"),
        data_root=_env_value(source, "DATAROOT"),
        db_root=_env_value(source, "DB_ROOT"),
        db_basedir=_env_value(source, "DB_BASEDIR"),
        search_path=source.get("PATH", ""),
    )
