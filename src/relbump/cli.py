"""
Command line front end for relbump.

Without ``-release`` the dev counter in the dev marker is bumped for a
release-candidate build.  With ``-release -tag X.Y.Z`` a GA release is
cut: the dev marker goes back to its baseline and the next release tag is
written to the new-version marker.  ``Succeeded`` is printed on stdout
when the operation completes; diagnostics go to the log.

Single-dash spellings (``-tag``, ``-release``) are accepted alongside the
double-dash ones so existing pipeline invocations keep working.
"""

from __future__ import annotations

import argparse
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from .config import load_config
from .errors import TagError
from .updater import TagUpdater

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Handlers installed by the last call to configure_logging.
_handlers: List[logging.Handler] = []


def remove_handlers() -> None:
    """Detach and close the handlers installed by :func:`configure_logging`."""
    root_logger = logging.getLogger()
    for handler in _handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _handlers.clear()


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Attach console (and optionally rotating file) handlers to the root logger."""
    remove_handlers()
    root_logger = logging.getLogger()

    fmt = logging.Formatter(LOG_FORMAT)
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(fmt)
    _handlers.append(console)
    if log_file:
        rotating = RotatingFileHandler(log_file, maxBytes=1_500_000, backupCount=3)
        rotating.setFormatter(fmt)
        _handlers.append(rotating)

    for handler in _handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="relbump",
        description="Bump the dev build counter, or cut a GA release and reset it.",
    )
    parser.add_argument("-tag", "--tag", default="", help="The current release tag")
    parser.add_argument("-release", "--release", action="store_true", help="Is this a release")
    parser.add_argument("--config", help="YAML settings file")
    parser.add_argument("--dev-file", help="Path to the dev marker file")
    parser.add_argument("--new-version-file", help="Path to the new-version marker file")
    parser.add_argument("--dry-run", action="store_true", help="Show what would change, write nothing")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", help="Also log to this file (rotated)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.release and not args.tag:
        parser.error("must supply -tag when -release is set")

    try:
        configure_logging(args.verbose, args.log_file)
    except OSError as exc:
        parser.error(f"cannot open log file {args.log_file}: {exc.strerror or exc}")

    try:
        cfg = load_config(args.config)
    except TagError as exc:
        logger.error("loading settings failed: %s", exc)
        return 1
    if args.dev_file:
        cfg["dev_version_file"] = args.dev_file
    if args.new_version_file:
        cfg["new_version_file"] = args.new_version_file
    if args.dry_run:
        cfg["dry_run"] = True

    updater = TagUpdater(cfg)
    try:
        if args.release:
            logger.info("Cutting GA release, so resetting")
            new_tag = updater.cut_release(args.tag)
        else:
            logger.info("Cutting RC release, so bumping")
            new_tag = updater.cut_release_candidate()
    except TagError as exc:
        logger.error("%s failed: %s", "release" if args.release else "bump", exc)
        return 1

    logger.info("new version: %s", new_tag)
    print("Succeeded")
    return 0
