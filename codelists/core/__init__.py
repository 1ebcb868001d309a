"""Core: config and application bootstrap (lifespan, exception handlers).

Single place for settings.
"""

from codelists.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
