"""Typed, blank-aware access to process environment variables."""

from .accessors import Env, EnvAccessor, NBEnv, is_blank
from .config import AccessorSettings, get_settings, reload_settings
from .errors import EnvAccessError, MissingVariableError
from .logging_filters import RedactEnvValuesFilter, install_redaction_filter

__all__ = [
    "AccessorSettings",
    "Env",
    "EnvAccessError",
    "EnvAccessor",
    "MissingVariableError",
    "NBEnv",
    "RedactEnvValuesFilter",
    "get_settings",
    "install_redaction_filter",
    "is_blank",
    "reload_settings",
]
