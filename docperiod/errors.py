"""Exceptions raised by docperiod."""

from __future__ import annotations


class DocPeriodError(Exception):
    """Base class for all docperiod errors."""


class MarkupError(DocPeriodError):
    """Raised when documentation markup is not well formed.

    Attributes:
        offset: Character offset where the problem was detected.
    """

    def __init__(self, message: str, offset: int) -> None:
        super().__init__(f"{message} at offset {offset}")
        self.offset = offset


class ConfigError(DocPeriodError):
    """Raised when a configuration file cannot be read or is invalid."""
