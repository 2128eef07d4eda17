"""Installation root lookups for the platform and its database engine.

Each lookup prefers its environment override and otherwise falls back to a
default or a filesystem probe. None of them check that the returned
directory exists or is writable; callers do that.
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence

from platform_roots.config.settings import RootEnvironment, get_settings
from platform_roots.errors import EngineBaseDirError, EngineNotFoundError, ProgramPathError
from platform_roots.utils.which import engine_search_path, find_executable

DEFAULT_ROOT = "/usr/local/platform"
DEFAULT_DATA_ROOT = "/platform"

BIN_SUFFIX = "/bin"
ENGINE_BINARY = "mysqld"
ENGINE_SYSTEM_DIRS: tuple[str, ...] = ("/usr/sbin",)

logger = logging.getLogger(__name__)


def _program_path(argv: Sequence[str] | None) -> str:
    if argv is None:
        argv = getattr(sys, "argv", None) or []
    command = argv[0] if argv else ""
    try:
        return os.path.abspath(command)
    except OSError as exc:
        raise ProgramPathError(f"Unable to resolve program path {command!r}: {exc}") from exc


def platform_root(
    argv: Sequence[str] | None = None, env: RootEnvironment | None = None
) -> str:
    """Return $ROOT, or guess the platform root from the program location.

    A program living in ``<root>/bin`` yields ``<root>``; anything else
    yields ``DEFAULT_ROOT``.
    """
    env = env or get_settings()
    if env.root:
        logger.debug("platform root from ROOT: %s", env.root)
        return env.root

    directory = os.path.dirname(_program_path(argv))
    if directory.endswith(BIN_SUFFIX):
        root = os.path.dirname(directory)
        logger.debug("platform root from program location: %s", root)
        return root
    logger.debug("platform root defaulted to %s", DEFAULT_ROOT)
    return DEFAULT_ROOT


def data_root(env: RootEnvironment | None = None) -> str:
    """Return $DATAROOT, or DEFAULT_DATA_ROOT if it is not set.

    The directory is not checked for existence or writability.
    """
    env = env or get_settings()
    if env.data_root:
        return env.data_root
    return DEFAULT_DATA_ROOT


def db_root(env: RootEnvironment | None = None) -> str:
    """Return $DB_ROOT, or the install root of the mysqld found on the search path.

    ``ENGINE_SYSTEM_DIRS`` are searched ahead of PATH. The process PATH is
    left untouched.
    """
    env = env or get_settings()
    if env.db_root:
        logger.debug("engine root from DB_ROOT: %s", env.db_root)
        return env.db_root

    search_dirs = engine_search_path(ENGINE_SYSTEM_DIRS, env.search_path)
    binary = find_executable(ENGINE_BINARY, search_dirs)
    if binary is None:
        raise EngineNotFoundError(
            f"DB_ROOT is not set and no {ENGINE_BINARY} could be found in your PATH"
        )

    # strip the binary and its sbin directory
    root = os.path.dirname(os.path.dirname(binary))
    logger.debug("engine root from %s: %s", binary, root)
    return root


def db_basedir(env: RootEnvironment | None = None) -> str:
    """Return $DB_BASEDIR, falling back to the engine root."""
    env = env or get_settings()
    if env.db_basedir:
        return env.db_basedir

    try:
        return db_root(env)
    except EngineNotFoundError:
        raise EngineBaseDirError("DB_BASEDIR is not set. Please set $DB_BASEDIR") from None
