"""
Marker-file updater for relbump.

:class:`TagUpdater` owns the two marker files:

* the dev marker, a YAML document with a single ``version`` field holding
  a ``dev.N`` tag, bumped on every release-candidate build;
* the new-version marker, a raw text file that receives the next release
  tag when a GA release is cut.

Files are rewritten in place (truncate then write).  There is no atomic
rename and no backup of the previous value.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .config import apply_defaults
from .errors import IOFailure, MarkerFileError
from .version import DevTag, increment_dev, increment_release


class TagUpdater:
    """Reads, bumps and writes the version marker files.

    ``cfg`` is a settings mapping as returned by
    :func:`relbump.config.load_config`; missing keys get their defaults.
    With ``dry_run`` set, writes are logged and skipped.
    """

    def __init__(self, cfg: Optional[Dict[str, Any]] = None) -> None:
        self.cfg = apply_defaults(dict(cfg or {}))
        self.logger = logging.getLogger(__name__)

    @property
    def dev_path(self) -> Path:
        return Path(self.cfg["dev_version_file"])

    @property
    def new_version_path(self) -> Path:
        return Path(self.cfg["new_version_file"])

    @property
    def dry_run(self) -> bool:
        return bool(self.cfg["dry_run"])

    # ------------------------------------------------------------------
    # Operations
    def cut_release_candidate(self) -> str:
        """Bump the dev counter in the dev marker and return the new tag."""
        current = self.read_dev_tag()
        new_tag = increment_dev(current)
        self.write_dev_tag(new_tag)
        return new_tag

    def cut_release(self, tag: str) -> str:
        """Record the release that follows ``tag`` and reset the dev counter.

        ``tag`` is validated before any file is touched.  The dev marker is
        reset first and stays reset if writing the new version fails.
        """
        new_tag = increment_release(tag)
        self.logger.info("cutting GA release after %s, resetting dev counter", tag)
        self.reset_dev()
        self.write_release(new_tag)
        return new_tag

    # ------------------------------------------------------------------
    # Dev marker
    def read_dev_tag(self) -> str:
        """Return the ``version`` value stored in the dev marker."""
        path = self.dev_path
        try:
            with path.open("r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as exc:
            self.logger.error("open for read failed: %s", exc)
            raise IOFailure(path, exc) from exc
        except UnicodeDecodeError as exc:
            raise MarkerFileError(f"{path} is not valid UTF-8: {exc}") from exc

        try:
            doc = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise MarkerFileError(f"{path} is not valid YAML: {exc}") from exc
        if doc is None:
            doc = {}
        if not isinstance(doc, dict):
            raise MarkerFileError(f"{path} must contain a mapping with a 'version' field")

        version = doc.get("version")
        if version is None:
            # An absent field reads as empty and fails tag parsing.
            return ""
        if not isinstance(version, str):
            raise MarkerFileError(f"{path}: 'version' must be a string, got {version!r}")
        self.logger.debug("read %s from %s", version, path)
        return version

    def write_dev_tag(self, tag: str) -> None:
        """Store ``tag`` in the dev marker as ``version: <tag>``."""
        DevTag.parse(tag)
        raw = yaml.safe_dump({"version": tag}, default_flow_style=False)
        self.logger.debug("dev marker content:\n%s", raw)
        self._write(self.dev_path, raw)

    def reset_dev(self) -> None:
        """Put the dev marker back to the configured baseline tag."""
        self.write_dev_tag(self.cfg["default_dev_tag"])

    # ------------------------------------------------------------------
    # New-version marker
    def write_release(self, tag: str) -> None:
        """Store ``tag`` verbatim in the new-version marker."""
        self._write(self.new_version_path, tag)

    def _write(self, path: Path, text: str) -> None:
        if self.dry_run:
            self.logger.info("dry run: would write %r to %s", text, path)
            return
        try:
            with path.open("w", encoding="utf-8") as f:
                f.write(text)
        except OSError as exc:
            self.logger.error("write to %s failed: %s", path, exc)
            raise IOFailure(path, exc) from exc
        self.logger.info("wrote %s", path)
