from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


class PathResolutionError(Exception):
    """Raised when a file path has no representation relative to the working directory."""


def join_path(filepath: str, prefix: str | None = None, extra_prefix: str | None = None) -> str:
    """Concatenate the configured and captured prefixes in front of 'filepath'.

    Only the captured prefix is followed by a separator; 'extra_prefix' is
    glued on verbatim, so it normally carries its own trailing slash.
    """
    if prefix is not None:
        filepath = prefix + "/" + filepath
    if extra_prefix is not None:
        filepath = extra_prefix + filepath
    return filepath


def display_path(path: str, current_dir: Path) -> str:
    """Return 'path' relative to 'current_dir', climbing with '..' where needed."""
    absolute = os.path.join(current_dir, path)
    try:
        return os.path.relpath(absolute, current_dir)
    except ValueError as e:
        # Only reachable where paths can live on different roots (Windows drives)
        raise PathResolutionError(f"cannot express {path!r} relative to {str(current_dir)!r}: {e}") from e


def is_openable(path: str, current_dir: Path) -> bool:
    """Check that 'path' (relative to 'current_dir') can be opened for reading."""
    try:
        with open(os.path.join(current_dir, path), "rb"):
            return True
    except OSError as e:
        logger.debug("Dropping %s: %s", path, e)
        return False
