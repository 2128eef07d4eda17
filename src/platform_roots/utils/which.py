"""Executable lookup over an explicit directory list."""

from __future__ import annotations

import os
import shutil
from collections.abc import Iterable, Sequence


def engine_search_path(system_dirs: Iterable[str], inherited: str) -> list[str]:
    """Return ``system_dirs`` followed by the entries of ``inherited``.

    ``inherited`` is a ``PATH``-style string. Empty entries are dropped and
    duplicates are kept in place so the search order matches the shell's.
    """
    dirs = [d for d in system_dirs if d]
    dirs.extend(entry for entry in inherited.split(os.pathsep) if entry)
    return dirs


def find_executable(name: str, search_dirs: Sequence[str]) -> str | None:
    if not search_dirs:
        return None
    found = shutil.which(name, path=os.pathsep.join(search_dirs))
    if found is None:
        return None
    return os.path.abspath(found)
