# topmark:header:start
#
#   project      : AlignChar
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

# pyright: strict

"""Property tests for the alignment engine.

Generated documents mix aligned candidates, ordinary lines, tabs, blank lines,
overlong lines and a possibly unterminated tail. The properties checked:

1) aligning twice gives the same bytes as aligning once,
2) line structure is preserved and only fill bytes are ever inserted,
3) lines not ending in the target byte come out unchanged,
4) eligible lines end up with the target byte exactly at the target column.
"""

from __future__ import annotations

import pytest
from hypothesis import HealthCheck, given, settings

from alignchar.config.model import AlignConfig
from alignchar.core.width import line_width
from tests.conftest import run_process
from tests.strategies_alignchar import TARGET, s_config, s_document

# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=200,
)


def _pairs(data: bytes, out: bytes) -> list[tuple[bytes, bytes]]:
    src_lines = data.split(b"\n")
    out_lines = out.split(b"\n")
    assert len(src_lines) == len(out_lines)
    return list(zip(src_lines, out_lines))


@_SETTINGS
@given(data=s_document(), config=s_config())
def test_alignment_is_idempotent(data: bytes, config: AlignConfig) -> None:
    """Running the output through the engine again changes nothing."""
    once, _ = run_process(data, config)
    twice, result = run_process(once, config)
    assert twice == once
    assert result.aligned == 0


@_SETTINGS
@given(data=s_document(), config=s_config())
def test_only_fill_bytes_are_inserted(data: bytes, config: AlignConfig) -> None:
    """Every output line is its input line, possibly with fill before the target byte."""
    out, _ = run_process(data, config)
    fill: int = config.fill_char[0]

    for src, dst in _pairs(data, out):
        if dst == src:
            continue
        assert src.endswith(TARGET)
        assert dst.startswith(src[:-1])
        assert dst.endswith(TARGET)
        assert len(dst) > len(src)
        assert set(dst[len(src) - 1 : -1]) <= {fill}


@_SETTINGS
@given(data=s_document(), config=s_config())
def test_lines_without_target_pass_through(data: bytes, config: AlignConfig) -> None:
    """Lines whose last byte is not the target byte are never modified."""
    out, _ = run_process(data, config)
    for src, dst in _pairs(data, out):
        if not src.endswith(TARGET):
            assert dst == src


@_SETTINGS
@given(data=s_document(), config=s_config())
def test_eligible_lines_reach_target_column(data: bytes, config: AlignConfig) -> None:
    """A terminated line that fits the buffer and ends in the target lands on the target column.

    Lines already at or past the column are left alone.
    """
    out, _ = run_process(data, config)
    pairs = _pairs(data, out)

    # The last piece of a split has no terminator and is never aligned.
    for src, dst in pairs[:-1]:
        fits = len(src) + 1 <= config.buffer_capacity - 1
        if not (fits and src.endswith(TARGET)):
            assert dst == src
            continue
        width = line_width(src, config.tab_width)
        if width >= config.target_column:
            assert dst == src
        else:
            assert line_width(dst, config.tab_width) == config.target_column

    assert pairs[-1][1] == pairs[-1][0]
