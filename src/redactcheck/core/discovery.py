"""File discovery for redactcheck.

Turns a scan target into the ordered list of regular files to classify.
Directories are listed single-level by default and walked recursively on
request; the result is sorted so repeated runs see files in the same
order.
"""

from __future__ import annotations

import fnmatch
import logging
import os
from pathlib import Path

from redactcheck.core.exceptions import TargetNotFoundError

logger = logging.getLogger(__name__)


def matches_pattern(path: Path, patterns: list[str]) -> bool:
    """Check if a path matches any of the given glob patterns.

    A pattern matches the file name, the full path, or the name of any
    parent directory. Callers pass paths relative to the scan target so
    directories above the target never match.

    Args:
        path: Path to check.
        patterns: List of glob patterns to match against.

    Returns:
        True if path matches any pattern, False otherwise.
    """
    path_str = str(path)
    name = path.name

    for pattern in patterns:
        if fnmatch.fnmatch(name, pattern) or fnmatch.fnmatch(path_str, pattern):
            return True
        for parent in path.parents:
            if fnmatch.fnmatch(parent.name, pattern):
                return True
    return False


def discover_files(
    target: Path,
    recursive: bool = False,
    exclude: list[str] | None = None,
) -> list[Path]:
    """Discover the files to scan for a target.

    Args:
        target: File or directory to scan.
        recursive: Whether to descend into subdirectories.
        exclude: Glob patterns of files or directories to leave out.

    Returns:
        Sorted list of regular files. May be empty.

    Raises:
        TargetNotFoundError: If the target does not exist, or is neither
            a regular file nor a directory.
    """
    exclude = exclude or []

    if not target.exists():
        raise TargetNotFoundError(f"Target not found: {target}", path=str(target))

    if target.is_file():
        return [] if matches_pattern(Path(target.name), exclude) else [target]

    if not target.is_dir():
        raise TargetNotFoundError(f"Target is not a file or directory: {target}", path=str(target))

    files: list[Path] = []
    if recursive:

        def _on_error(error: OSError) -> None:
            logger.warning("Cannot list directory %s: %s", error.filename, error.strerror)

        for dirpath, dirnames, filenames in os.walk(target, onerror=_on_error):
            dirnames[:] = sorted(d for d in dirnames if not matches_pattern(Path(d), exclude))
            for filename in filenames:
                item = Path(dirpath) / filename
                if item.is_file() and not matches_pattern(item.relative_to(target), exclude):
                    files.append(item)
    else:
        try:
            for item in target.iterdir():
                if item.is_file() and not matches_pattern(Path(item.name), exclude):
                    files.append(item)
        except OSError as e:
            logger.warning("Cannot list directory %s: %s", target, e.strerror or e)

    files.sort()
    logger.debug("Discovered %d files under %s", len(files), target)
    return files
