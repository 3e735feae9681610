"""Settings for the accessors' own diagnostics.

Settings only affect logging. They never change what a lookup returns.
They are read through pydantic-settings rather than through `Env` so that
loading them never recurses into the traced lookup path.
"""

from __future__ import annotations

import threading

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AccessorSettings(BaseSettings):
    """Diagnostics configuration read from environment variables.

    Prefix: ENVACCESS_ (e.g., ENVACCESS_TRACE_LOOKUPS=true)
    """

    model_config = SettingsConfigDict(
        env_prefix="ENVACCESS_",
        extra="ignore",
    )

    trace_lookups: bool = Field(
        default=False,
        description="Log every lookup (name, outcome, redacted value) at DEBUG level.",
    )
    trace_max_chars: int = Field(
        default=64,
        ge=8,
        description="Truncate traced values longer than this many characters.",
    )
    redact_values: bool = Field(
        default=True,
        description="Mask values of secret-looking variables in traces.",
    )


_settings: AccessorSettings | None = None
_settings_lock = threading.Lock()


def get_settings() -> AccessorSettings:
    """Return the process-wide settings, loading them on first use."""

    global _settings
    if _settings is None:
        with _settings_lock:
            if _settings is None:
                _settings = AccessorSettings()
    return _settings


def reload_settings() -> AccessorSettings:
    """Re-read settings from the environment and return the new instance."""

    global _settings
    with _settings_lock:
        _settings = AccessorSettings()
    return _settings
