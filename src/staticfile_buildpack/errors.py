"""Custom exceptions for the staticfile finalizer."""

from __future__ import annotations


class StaticfileError(Exception):
    """Base exception for all finalize operations."""

    def __init__(self, message: str, *, exit_code: int = 1):
        super().__init__(message)
        self.exit_code = exit_code


class StaticfileParseError(StaticfileError):
    """The Staticfile exists but could not be read as directives."""


class RootDirNotFoundError(StaticfileError):
    """The configured root directory does not exist."""


class RootDirIsFileError(StaticfileError):
    """The configured root directory is a plain file."""
