"""
Version tag value types.

Two shapes are understood:

* :class:`ReleaseTag` -- ``MAJOR.MINOR.PATCH`` for GA builds.  Only the
  minor field is interpreted; the major field is carried over verbatim so
  a leading ``v`` survives a bump.
* :class:`DevTag` -- ``dev.N`` for release-candidate builds.

Both are immutable tuples; :meth:`bump` returns a new value.
"""

from __future__ import annotations

import logging
import re
from typing import NamedTuple

from .errors import InvalidVersionFormat

logger = logging.getLogger(__name__)

DEV_PREFIX = "dev"
RELEASE_FIELDS = 3
DEV_FIELDS = 2

# Optional sign followed by ASCII digits, nothing else.
_INT_RE = re.compile(r"[+-]?[0-9]+\Z")


def _split(tag: str, fields: int) -> list[str]:
    items = tag.split(".")
    if len(items) != fields:
        raise InvalidVersionFormat(
            f"invalid version format: {tag!r} has {len(items)} fields, expected {fields}"
        )
    return items


def _to_int(tag: str, field: str) -> int:
    if not _INT_RE.match(field):
        raise InvalidVersionFormat(f"invalid version format: {field!r} in {tag!r} is not an integer")
    return int(field)


class ReleaseTag(NamedTuple):
    major: str
    minor: int
    patch: str

    @classmethod
    def parse(cls, tag: str) -> "ReleaseTag":
        major, minor, patch = _split(tag, RELEASE_FIELDS)
        return cls(major, _to_int(tag, minor), patch)

    def bump(self) -> "ReleaseTag":
        """Increment the minor field and reset the patch field to ``0``."""
        return ReleaseTag(self.major, self.minor + 1, "0")

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


class DevTag(NamedTuple):
    number: int

    @classmethod
    def parse(cls, tag: str) -> "DevTag":
        # The prefix field is not checked; any two-field tag with an
        # integer counter is accepted and re-emitted as ``dev.N``.
        _, number = _split(tag, DEV_FIELDS)
        return cls(_to_int(tag, number))

    def bump(self) -> "DevTag":
        return DevTag(self.number + 1)

    def __str__(self) -> str:
        return f"{DEV_PREFIX}.{self.number}"


def increment_release(tag: str) -> str:
    """Return the next release tag for ``tag``: ``1.2.3`` -> ``1.3.0``."""
    new_tag = str(ReleaseTag.parse(tag).bump())
    logger.info("next release tag: %s", new_tag)
    return new_tag


def increment_dev(tag: str) -> str:
    """Return the next dev tag for ``tag``: ``dev.5`` -> ``dev.6``."""
    new_tag = str(DevTag.parse(tag).bump())
    logger.info("next dev tag: %s", new_tag)
    return new_tag
