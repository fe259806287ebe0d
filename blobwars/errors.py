"""Exception types raised by blobwars.

Illegal moves are never errors: ``Board.jump`` reports them by returning
``False``. The types below cover contract violations and bad input only.
"""

from __future__ import annotations

__all__ = [
    "BlobwarsError",
    "BoardShapeError",
    "ConfigError",
    "LayoutError",
    "UnknownKeyError",
]


class BlobwarsError(Exception):
    """Base class for every blobwars error."""


class BoardShapeError(BlobwarsError, ValueError):
    """The supplied cells disagree with the declared board dimensions."""


class LayoutError(BlobwarsError, ValueError):
    """A text layout could not be parsed into a board."""


class ConfigError(BlobwarsError, ValueError):
    """A session configuration file is malformed."""


class UnknownKeyError(BlobwarsError, ValueError):
    """A key name does not map to any command."""
