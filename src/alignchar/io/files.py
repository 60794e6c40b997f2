# topmark:header:start
#
#   project      : AlignChar
#   file         : files.py
#   file_relpath : src/alignchar/io/files.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Run the engine between files on disk.

Two modes are supported:

- *output*: read ``input_path``, write ``output_path``. The two must differ.
- *in place*: rename the input to a backup name next to it, read from the
  backup and write the new content to the original path, then delete the
  backup. If anything fails, the backup is left behind so no data is lost.

Opening errors (missing file, permissions) propagate as the usual `OSError`
subclasses; read/write failures during processing surface as `AlignIOError`.
"""

from __future__ import annotations

import errno
import os
from typing import TYPE_CHECKING

from alignchar.config.logging import get_logger
from alignchar.constants import INPLACE_BACKUP_NAME
from alignchar.core.engine import process
from alignchar.core.errors import AlignIOError, AlignUsageError

if TYPE_CHECKING:
    from pathlib import Path

    from alignchar.config.logging import AlignCharLogger
    from alignchar.config.model import AlignConfig
    from alignchar.core.engine import ProcessResult

logger: AlignCharLogger = get_logger(__name__)


def backup_path_for(path: Path) -> Path:
    """Return the backup path used while ``path`` is rewritten in place."""
    return path.with_name(INPLACE_BACKUP_NAME)


def same_file(a: Path, b: Path) -> bool:
    """True if ``a`` and ``b`` refer to the same file (existing or not)."""
    try:
        return a.samefile(b)
    except OSError:
        return a.resolve() == b.resolve()


def align_to_path(input_path: Path, output_path: Path, config: AlignConfig) -> ProcessResult:
    """Align ``input_path`` into ``output_path``.

    Args:
        input_path (Path): File to read.
        output_path (Path): File to (over)write.
        config (AlignConfig): Alignment settings.

    Returns:
        ProcessResult: Counters for the run.

    Raises:
        AlignUsageError: If both paths refer to the same file (use in-place mode instead).
        AlignIOError: On read/write failure during processing.
    """
    if same_file(input_path, output_path):
        raise AlignUsageError(
            f"Output path {output_path} is the same as the input path; use in-place mode instead."
        )
    config.validate()
    logger.info("Aligning %s -> %s", input_path, output_path)
    with input_path.open("rb") as src, output_path.open("wb") as dst:
        return process(src, dst, config)


def align_in_place(path: Path, config: AlignConfig) -> ProcessResult:
    """Rewrite ``path`` with aligned content.

    Args:
        path (Path): File to rewrite.
        config (AlignConfig): Alignment settings.

    Returns:
        ProcessResult: Counters for the run.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        AlignIOError: If the backup cannot be created or removed, or processing fails.
            The backup file is kept whenever processing did not complete.
    """
    config.validate()
    backup = backup_path_for(path)
    if not path.exists():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path))
    if backup.exists():
        raise AlignIOError(
            f"Backup file {backup} already exists; remove it before editing {path} in place."
        )

    try:
        path.rename(backup)
    except OSError as exc:
        raise AlignIOError(
            f"Failed to move input file {path} to the backup file path {backup}: {exc}"
        ) from exc
    logger.debug("Moved %s to backup %s", path, backup)

    try:
        with backup.open("rb") as src, path.open("wb") as dst:
            result = process(src, dst, config)
    except OSError as exc:
        logger.error("In-place edit of %s failed; original content kept in %s", path, backup)
        if isinstance(exc, AlignIOError):
            raise
        raise AlignIOError(f"Failed to rewrite {path}: {exc}") from exc

    try:
        backup.unlink()
    except OSError as exc:
        raise AlignIOError(f"Failed to remove backup file {backup}: {exc}") from exc
    logger.info("Aligned %s in place", path)
    return result
