"""Exceptions raised by the environment accessors."""

from __future__ import annotations


class EnvAccessError(Exception):
    """Base class for errors raised by envaccess."""

    pass


class MissingVariableError(EnvAccessError, LookupError):
    """Raised when a required environment variable is not available.

    For the non-blank accessor this also covers variables that are set to an
    empty or whitespace-only string; `blank` tells the two cases apart.
    """

    def __init__(self, name: str, *, blank: bool = False) -> None:
        self.name = name
        self.blank = blank
        message = f"Missing required environment variable ${name}"
        if blank:
            message += " (set but blank)"
        super().__init__(message)
