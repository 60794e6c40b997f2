# topmark:header:start
#
#   project      : AlignChar
#   file         : test_api.py
#   file_relpath : tests/api/test_api.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Tests for the public API (`alignchar.api`)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import alignchar.api as api
from alignchar.api import AlignConfig, align_bytes, align_file
from alignchar.core.errors import AlignConfigError, AlignUsageError

if TYPE_CHECKING:
    from pathlib import Path


def test_public_surface() -> None:
    """The documented names are exported."""
    assert sorted(api.__all__) == [
        "AlignConfig",
        "ProcessResult",
        "align_bytes",
        "align_file",
        "process",
    ]


def test_align_bytes_default_config() -> None:
    """Defaults put the backslash at column 80."""
    out = align_bytes(b"x \\\n")
    assert out == b"x" + b" " * 78 + b"\\\n"
    assert out.index(b"\\") == 79


def test_align_bytes_docstring_example() -> None:
    """The tab example from the module docstring holds."""
    assert align_bytes(b"a\tX\\\n", AlignConfig(target_column=10)) == b"a\tX   \\\n"


def test_align_file_to_output(tmp_path: Path) -> None:
    """String paths are accepted for input and output."""
    src = tmp_path / "in.txt"
    src.write_bytes(b"ab\\\nplain\n")

    result = align_file(str(src), str(tmp_path / "out.txt"), config=AlignConfig(target_column=5))

    assert (tmp_path / "out.txt").read_bytes() == b"ab  \\\nplain\n"
    assert result.aligned == 1
    assert result.unchanged == 1


def test_align_file_in_place(tmp_path: Path) -> None:
    """In-place mode rewrites the input."""
    src = tmp_path / "in.txt"
    src.write_bytes(b"ab\\\n")

    align_file(src, in_place=True, config=AlignConfig(target_column=5))

    assert src.read_bytes() == b"ab  \\\n"


@pytest.mark.parametrize(
    ("output", "in_place"),
    [(None, False), ("out.txt", True)],
)
def test_align_file_requires_exactly_one_mode(
    tmp_path: Path, output: str | None, in_place: bool
) -> None:
    """Neither or both output modes is a usage error."""
    src = tmp_path / "in.txt"
    src.write_bytes(b"ab\\\n")
    out = str(tmp_path / output) if output else None

    with pytest.raises(AlignUsageError):
        align_file(src, out, in_place=in_place)

    assert src.read_bytes() == b"ab\\\n"


@pytest.mark.parametrize(
    "config",
    [
        AlignConfig(target_char=";", target_column=10),  # type: ignore[arg-type]
        AlignConfig(fill_char=".", target_column=10),  # type: ignore[arg-type]
        AlignConfig(target_column=10.0),  # type: ignore[arg-type]
    ],
)
def test_align_bytes_rejects_wrongly_typed_config(config: AlignConfig) -> None:
    """A config holding str characters or a float column fails before any output."""
    with pytest.raises(AlignConfigError, match="must be"):
        align_bytes(b"ab;\n", config)
