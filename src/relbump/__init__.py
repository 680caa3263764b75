"""
relbump package root.

Release-tagging helper for build pipelines.  :class:`TagUpdater` bumps the
dev build counter or cuts a GA release; :mod:`relbump.cli` is the command
line front end.
"""

from .errors import (  # noqa: F401
    ConfigError,
    InvalidVersionFormat,
    IOFailure,
    MarkerFileError,
    TagError,
)
from .updater import TagUpdater  # noqa: F401
from .version import DevTag, ReleaseTag, increment_dev, increment_release  # noqa: F401

__version__ = "0.1.0"

__all__ = [
    "TagUpdater",
    "DevTag",
    "ReleaseTag",
    "increment_dev",
    "increment_release",
    "TagError",
    "InvalidVersionFormat",
    "IOFailure",
    "MarkerFileError",
    "ConfigError",
]
