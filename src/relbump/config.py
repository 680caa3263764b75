"""
Settings for relbump.

Settings are a plain ``dict``.  :func:`load_config` reads an optional YAML
file and fills in any key it leaves out, so callers can always index the
result directly.  Marker paths are kept relative; they resolve against the
working directory at the time a file is opened.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEV_VERSION_FILE = Path("hack") / "DEV_BUILD_VERSION.yaml"
NEW_VERSION_FILE = Path("hack") / "NEW_BUILD_VERSION"
DEFAULT_DEV_TAG = "dev.1"


def apply_defaults(cfg: Dict[str, Any]) -> Dict[str, Any]:
    """Populate missing settings in ``cfg`` in place and return it.

    Raises :class:`ConfigError` if a setting has the wrong type.
    """
    cfg.setdefault("dev_version_file", str(DEV_VERSION_FILE))
    cfg.setdefault("new_version_file", str(NEW_VERSION_FILE))
    cfg.setdefault("default_dev_tag", DEFAULT_DEV_TAG)
    cfg.setdefault("dry_run", False)
    for key in ("dev_version_file", "new_version_file"):
        if not isinstance(cfg[key], (str, Path)):
            raise ConfigError(f"setting {key!r} must be a path string, got {cfg[key]!r}")
    if not isinstance(cfg["default_dev_tag"], str):
        raise ConfigError(f"setting 'default_dev_tag' must be a string, got {cfg['default_dev_tag']!r}")
    if not isinstance(cfg["dry_run"], bool):
        raise ConfigError(f"setting 'dry_run' must be true or false, got {cfg['dry_run']!r}")
    return cfg


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load settings from the YAML file at ``path``, or defaults if ``None``."""
    if path is None:
        return apply_defaults({})

    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read settings file {path}: {exc.strerror or exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"settings file {path} is not valid UTF-8: {exc}") from exc
    try:
        cfg = yaml.safe_load(text) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"settings file {path} is not valid YAML: {exc}") from exc
    if not isinstance(cfg, dict):
        raise ConfigError(f"settings file {path} must contain a mapping")

    logger.debug("loaded settings from %s", path)
    return apply_defaults(cfg)
