# topmark:header:start
#
#   project      : AlignChar
#   file         : transformer.py
#   file_relpath : src/alignchar/core/transformer.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

r"""Line transformer: decide whether a buffered line is aligned, then emit it.

A line is aligned only when the byte immediately before its ``\n`` is the
target character and the line is narrower than the target column. Everything
else is written back exactly as it was read:

  * a blank line (just ``\n``),
  * a last line without a terminator,
  * a line whose last content byte is not the target character,
  * a line that already reaches (or passes) the target column.

Alignment never truncates or moves content. It inserts fill bytes between the
last content byte and the target character so that the target character ends up
in column ``target_column``.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from alignchar.config.logging import get_logger
from alignchar.constants import NEWLINE
from alignchar.core.streams import write_all
from alignchar.core.width import line_width

if TYPE_CHECKING:
    from typing import BinaryIO

    from alignchar.config.logging import AlignCharLogger
    from alignchar.config.model import AlignConfig

logger: AlignCharLogger = get_logger(__name__)


class LineAction(str, Enum):
    """What the transformer does with one line."""

    BLANK = "blank"
    NO_TERMINATOR = "no_terminator"
    NO_TARGET = "no_target"
    ALREADY_ALIGNED = "already_aligned"
    ALIGN = "align"

    @property
    def changes_line(self) -> bool:
        """True if the emitted bytes differ from the input line."""
        return self is LineAction.ALIGN


def plan_line(line: bytes, config: AlignConfig) -> LineAction:
    """Classify ``line`` without writing anything.

    Args:
        line (bytes): One complete line, with its ``\\n`` unless it is the
            last line of a stream that lacks a trailing newline.
        config (AlignConfig): Alignment settings.

    Returns:
        LineAction: The decision for this line.
    """
    if line == NEWLINE:
        return LineAction.BLANK
    if not line.endswith(NEWLINE):
        return LineAction.NO_TERMINATOR
    if line[-2:-1] != config.target_char:
        return LineAction.NO_TARGET
    if line_width(line, config.tab_width) >= config.target_column:
        return LineAction.ALREADY_ALIGNED
    return LineAction.ALIGN


def fill_count(line: bytes, config: AlignConfig) -> int:
    """Number of fill bytes needed to put the target character at the target column.

    The width includes the target character itself, so the content before it
    ends at column ``width - 1`` and the fill occupies columns ``width`` up to
    ``target_column - 1``.

    Returns:
        int: ``target_column - width``, or 0 when the line is already wide enough.
    """
    return max(0, config.target_column - line_width(line, config.tab_width))


def emit_line(line: bytes, out: BinaryIO, config: AlignConfig) -> tuple[LineAction, int]:
    """Write ``line`` to ``out``, aligned if `plan_line` says so.

    Args:
        line (bytes): One complete line (see `plan_line`).
        out (BinaryIO): Binary output stream.
        config (AlignConfig): Alignment settings.

    Returns:
        tuple[LineAction, int]: The action that was applied and the number of
        bytes written.

    Raises:
        AlignIOError: If writing to ``out`` fails.
    """
    action = plan_line(line, config)
    if action is not LineAction.ALIGN:
        return action, write_all(out, line)

    n_fill = fill_count(line, config)
    logger.trace("align: %d fill byte(s) before target at column %d", n_fill, config.target_column)
    # Content without the target character and the terminator.
    written = write_all(out, line[:-2])
    written += write_all(out, config.fill_char * n_fill)
    written += write_all(out, config.target_char)
    written += write_all(out, NEWLINE)
    return action, written
