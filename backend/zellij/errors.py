"""Exception hierarchy shared by the engine and its collaborators. No engine imports."""

from __future__ import annotations


class ZellijError(Exception):
    """Base class for errors that abort a generation call."""


class ConfigurationError(ZellijError, ValueError):
    """Caller-supplied options cannot produce a pattern (palette, canvas size, ...)."""


class DataIntegrityError(ZellijError):
    """Filler library data, or geometry derived from it, is malformed."""
