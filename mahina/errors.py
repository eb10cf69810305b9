"""Exception types raised by the lunar engine."""

from __future__ import annotations


class MahinaError(Exception):
    """Base class for engine errors."""


class CatalogIncompleteError(MahinaError):
    """The phase catalog or group table does not cover lunar days 1..30."""

    def __init__(self, message: str, missing: tuple[int, ...] = ()):
        self.message = message
        self.missing = missing
        super().__init__(self.message)
