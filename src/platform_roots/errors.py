"""Errors raised by the root lookups."""

from __future__ import annotations


class RootLookupError(RuntimeError):
    """Base class for root lookup failures."""


class ProgramPathError(RootLookupError):
    """The running program's path could not be made absolute."""


class EngineNotFoundError(RootLookupError):
    """No override was set and the engine binary is not on the search path."""


class EngineBaseDirError(RootLookupError):
    """No base directory override was set and the engine root is unknown."""
