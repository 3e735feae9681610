"""Mapping functions for typed environment lookups.

Each helper takes the raw string value and either returns the converted
value or raises `ValueError`, the same contract as `int()` and `float()`.
They are meant to be passed as the `fn` argument of the accessors:

    debug = NBEnv.get_mapped_or("APP_DEBUG", False, to_bool)
    hosts = Env.require_mapped("APP_HOSTS", to_list)
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_TRUE_VALUES = frozenset({"1", "true", "yes", "on", "y", "t"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", "n", "f"})


def to_bool(raw: str) -> bool:
    """Parse typical truthy/falsy env encodings (case-insensitive)."""
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {raw!r}")


def to_int(raw: str) -> int:
    return int(raw.strip())


def to_float(raw: str) -> float:
    return float(raw.strip())


def to_list(raw: str, sep: str = ",") -> list[str]:
    """Split on `sep`, strip items and drop empty ones."""
    return [item.strip() for item in raw.split(sep) if item.strip()]


def list_of(fn: Callable[[str], T], sep: str = ",") -> Callable[[str], list[T]]:
    """Build a mapper that applies `fn` to every item of a separated list."""

    def _map(raw: str) -> list[T]:
        return [fn(item) for item in to_list(raw, sep)]

    return _map


def to_path(raw: str) -> Path:
    return Path(raw).expanduser()


def one_of(*choices: str, case_sensitive: bool = False) -> Callable[[str], str]:
    """Build a mapper accepting only the given choices.

    The matching choice is returned in its declared spelling.
    """

    if not choices:
        raise ValueError("one_of() requires at least one choice")

    def _key(value: str) -> str:
        return value if case_sensitive else value.lower()

    lookup = {_key(choice): choice for choice in choices}

    def _map(raw: str) -> str:
        try:
            return lookup[_key(raw.strip())]
        except KeyError:
            allowed = ", ".join(choices)
            raise ValueError(f"Invalid value {raw!r}, expected one of: {allowed}") from None

    return _map


def enum_of(enum_cls: type[E]) -> Callable[[str], E]:
    """Build a mapper resolving a member of `enum_cls` by value or name.

    Matching is case-insensitive.
    """

    members: dict[str, E] = {}
    for member in enum_cls:
        members.setdefault(str(member.value).lower(), member)
        members.setdefault(member.name.lower(), member)

    def _map(raw: str) -> E:
        try:
            return members[raw.strip().lower()]
        except KeyError:
            allowed = ", ".join(str(m.value) for m in enum_cls)
            raise ValueError(
                f"Invalid {enum_cls.__name__} value {raw!r}, expected one of: {allowed}"
            ) from None

    return _map
