"""Environment variable accessors.

Two stateless facades over `os.environ`:

- `Env` returns whatever string is stored, including empty strings.
- `NBEnv` ("non-blank") treats an empty or whitespace-only value as if the
  variable were not set at all.

Every operation is built on a single read (`_lookup`), so overriding that
one classmethod is enough to change how lookup, defaulting, mapping and
requiring behave.

Nothing is cached: each call reads the current process environment.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from typing import TypeVar

from pydantic import ValidationError

from envaccess.config import get_settings
from envaccess.errors import MissingVariableError
from envaccess.redaction import redact_value, truncate

logger = logging.getLogger(__name__)

_settings_warning_logged = False

T = TypeVar("T")
D = TypeVar("D")


def is_blank(value: str) -> bool:
    """Return True if `value` is empty or consists only of whitespace."""
    return not value.strip()


class EnvAccessor:
    """Shared operation set for the environment accessors.

    Accessors are used through their classmethods (`Env.get("HOME")`) and
    hold no state of their own.
    """

    __slots__ = ()

    @classmethod
    def get(cls, name: str) -> str | None:
        """Return the value of `name`, or None if it is not set."""
        value, _ = cls._lookup(name)
        return value

    @classmethod
    def get_or(cls, name: str, default: D) -> str | D:
        """Return the value of `name`, or `default` if it is not set."""
        value = cls.get(name)
        return default if value is None else value

    @classmethod
    def get_or_else(cls, name: str, provider: Callable[[], D]) -> str | D:
        """Return the value of `name`, or the result of `provider()` if it is not set.

        `provider` is only called on the fallback path.
        """
        value = cls.get(name)
        return provider() if value is None else value

    @classmethod
    def get_mapped(cls, name: str, fn: Callable[[str], T]) -> T | None:
        """Return `fn(value)` if `name` is set, otherwise None.

        Exceptions raised by `fn` propagate to the caller unchanged.
        """
        value = cls.get(name)
        if value is None:
            return None
        return fn(value)

    @classmethod
    def get_mapped_or(cls, name: str, default: T, fn: Callable[[str], T]) -> T:
        """Return `fn(value)` if `name` is set, otherwise `default`.

        `default` is returned as given, it is not passed through `fn`.
        """
        value = cls.get(name)
        if value is None:
            return default
        return fn(value)

    @classmethod
    def get_mapped_or_else(
        cls,
        name: str,
        provider: Callable[[], T],
        fn: Callable[[str], T],
    ) -> T:
        """Return `fn(value)` if `name` is set, otherwise `provider()`."""
        value = cls.get(name)
        if value is None:
            return provider()
        return fn(value)

    @classmethod
    def require(cls, name: str) -> str:
        """Return the value of `name`.

        Raises:
            MissingVariableError: If `name` is not available.
        """
        value, rejected_blank = cls._lookup(name)
        if value is None:
            raise MissingVariableError(name, blank=rejected_blank)
        return value

    @classmethod
    def require_mapped(cls, name: str, fn: Callable[[str], T]) -> T:
        """Return `fn(value)` for a required variable.

        `fn` is not called when the variable is missing.

        Raises:
            MissingVariableError: If `name` is not available.
        """
        return fn(cls.require(name))

    @classmethod
    def _lookup(cls, name: str) -> tuple[str | None, bool]:
        """Read `name` once and return `(value, rejected_blank)`.

        `rejected_blank` is True only when the variable is set but the
        accessor treats its value as absent.
        """
        value = os.environ.get(name)
        cls._trace(name, value)
        return value, False

    @classmethod
    def _trace(cls, name: str, value: str | None) -> None:
        global _settings_warning_logged

        if not logger.isEnabledFor(logging.DEBUG):
            return
        try:
            settings = get_settings()
        except ValidationError as e:
            # Diagnostics must never break a lookup.
            if not _settings_warning_logged:
                _settings_warning_logged = True
                logger.warning("Invalid ENVACCESS_* settings, lookup tracing disabled: %s", e)
            return
        if not settings.trace_lookups:
            return

        if value is None:
            logger.debug("%s lookup %s: not set", cls.__name__, name)
            return

        shown = (
            redact_value(name, value, max_chars=settings.trace_max_chars)
            if settings.redact_values
            else truncate(value, max_chars=settings.trace_max_chars)
        )
        logger.debug("%s lookup %s: %r", cls.__name__, name, shown)


class Env(EnvAccessor):
    """Environment access where blank values count as set.

    If a variable is set to an empty or whitespace-only string, that string
    is returned, passed to mapping functions, and satisfies `require`.

    See also: `NBEnv`.
    """

    __slots__ = ()


class NBEnv(EnvAccessor):
    """Non-blank environment access.

    A variable set to an empty or whitespace-only string is treated exactly
    like an unset one: lookups return None, defaults are used, mapping
    functions are not called, and `require` raises `MissingVariableError`.
    Non-blank values are returned untrimmed.

    See also: `Env`.
    """

    __slots__ = ()

    @classmethod
    def _lookup(cls, name: str) -> tuple[str | None, bool]:
        value, _ = super()._lookup(name)
        if value is not None and is_blank(value):
            logger.debug("Ignoring blank environment variable %s", name)
            return None, True
        return value, False
