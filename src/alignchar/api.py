# topmark:header:start
#
#   project      : AlignChar
#   file         : api.py
#   file_relpath : src/alignchar/api.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

r"""Public API for AlignChar.

This module exposes a small, stable surface for tools and tests:

- `process`: the stream-level engine (binary input and output streams).
- `align_bytes`: align an in-memory byte string.
- `align_file`: align a file into another file or in place.

Example:
    ```python
    from alignchar.api import align_bytes
    from alignchar.config import AlignConfig

    cfg = AlignConfig(target_column=10)
    assert align_bytes(b"a\tX\\\n", cfg) == b"a\tX   \\\n"
    ```
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import TYPE_CHECKING

from alignchar.config.model import AlignConfig
from alignchar.core.engine import ProcessResult, process
from alignchar.core.errors import AlignUsageError
from alignchar.io.files import align_in_place, align_to_path

if TYPE_CHECKING:
    from os import PathLike

__all__ = [
    "AlignConfig",
    "ProcessResult",
    "align_bytes",
    "align_file",
    "process",
]


def align_bytes(data: bytes, config: AlignConfig | None = None) -> bytes:
    """Return ``data`` with every eligible line aligned.

    Args:
        data (bytes): Input content.
        config (AlignConfig | None): Alignment settings (defaults if None).

    Returns:
        bytes: The aligned content.
    """
    out = io.BytesIO()
    process(io.BytesIO(data), out, config or AlignConfig())
    return out.getvalue()


def align_file(
    input_path: str | PathLike[str],
    output_path: str | PathLike[str] | None = None,
    *,
    in_place: bool = False,
    config: AlignConfig | None = None,
) -> ProcessResult:
    """Align a file, writing to ``output_path`` or rewriting it in place.

    Exactly one of ``output_path`` and ``in_place=True`` must be given.

    Args:
        input_path (str | PathLike[str]): File to read.
        output_path (str | PathLike[str] | None): File to write.
        in_place (bool): Rewrite ``input_path`` itself.
        config (AlignConfig | None): Alignment settings (defaults if None).

    Returns:
        ProcessResult: Counters for the run.

    Raises:
        AlignUsageError: If neither or both output modes are selected, or the
            output path equals the input path.
    """
    cfg = config or AlignConfig()
    src = Path(input_path)
    if in_place and output_path is not None:
        raise AlignUsageError("Do not specify both an output path and in-place mode.")
    if in_place:
        return align_in_place(src, cfg)
    if output_path is None:
        raise AlignUsageError("Specify either an output path or in-place mode.")
    return align_to_path(src, Path(output_path), cfg)
