"""FastAPI dependency injection."""

from __future__ import annotations

from zellij.config import Settings, settings
from zellij.engine.filler import FillerLibrary
from zellij.library import default_filler_library, load_filler_library

_library: FillerLibrary | None = None


def get_settings() -> Settings:
    return settings


def get_library() -> FillerLibrary:
    """Filler library configured for this process, loaded on first use."""
    global _library
    if _library is None:
        if settings.filler_library_path:
            _library = load_filler_library(settings.filler_library_path)
        else:
            _library = default_filler_library()
    return _library
