"""
Error types raised by relbump.

Every failure an operation can hit derives from :class:`TagError` so the
command line front end can report it with a single ``except`` clause.
"""

from pathlib import Path


class TagError(Exception):
    """Base class for all relbump failures."""


class InvalidVersionFormat(TagError, ValueError):
    """A tag has the wrong number of fields or a non-integer counter."""


class MarkerFileError(TagError, ValueError):
    """The dev marker file is not UTF-8 YAML holding a ``version`` string."""


class ConfigError(TagError):
    """The settings file is missing or malformed."""


class IOFailure(TagError):
    """A marker file could not be opened, read or written."""

    def __init__(self, path: Path, exc: OSError) -> None:
        super().__init__(f"{path}: {exc.strerror or exc}")
        self.path = path
