# topmark:header:start
#
#   project      : AlignChar
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Tests for TOML loading and config resolution in `alignchar.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import tomlkit

from alignchar.config.io import (
    discover_config_files,
    extract_alignchar_table,
    load_config_file,
    load_toml_dict,
    resolve_config,
    to_toml,
)
from alignchar.config.model import AlignConfig
from alignchar.core.errors import AlignConfigError

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_toml_dict_returns_plain_dict(tmp_path: Path) -> None:
    """Parsed documents are unwrapped to builtin types."""
    path = _write(tmp_path / "alignchar.toml", 'char = ";"\nposition = 72\n')
    data = load_toml_dict(path)
    assert data == {"char": ";", "position": 72}
    assert type(data) is dict


def test_load_toml_dict_invalid_toml(tmp_path: Path) -> None:
    """Malformed TOML is a configuration error naming the file."""
    path = _write(tmp_path / "alignchar.toml", "position = = 3\n")
    with pytest.raises(AlignConfigError, match="Invalid TOML"):
        load_toml_dict(path)


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """An unreadable file is a configuration error."""
    with pytest.raises(AlignConfigError, match="Cannot read"):
        load_toml_dict(tmp_path / "missing.toml")


def test_extract_table_from_pyproject(tmp_path: Path) -> None:
    """Only [tool.alignchar] is used from pyproject.toml."""
    path = tmp_path / "pyproject.toml"
    data: dict[str, Any] = {"project": {"name": "x"}, "tool": {"alignchar": {"position": 40}}}
    assert extract_alignchar_table(path, data) == {"position": 40}
    assert extract_alignchar_table(path, {"tool": {"ruff": {}}}) is None
    with pytest.raises(AlignConfigError, match="must be a table"):
        extract_alignchar_table(path, {"tool": {"alignchar": 3}})


def test_pyproject_without_table_is_skipped(tmp_path: Path) -> None:
    """A pyproject.toml without our table contributes nothing."""
    path = _write(tmp_path / "pyproject.toml", '[project]\nname = "demo"\n')
    assert load_config_file(path) is None


def test_discover_config_files_order(tmp_path: Path) -> None:
    """pyproject.toml is found before alignchar.toml."""
    _write(tmp_path / "alignchar.toml", "position = 60\n")
    _write(tmp_path / "pyproject.toml", "[tool.alignchar]\nposition = 40\n")
    assert [p.name for p in discover_config_files(tmp_path)] == [
        "pyproject.toml",
        "alignchar.toml",
    ]


def test_resolve_config_defaults_without_files(tmp_path: Path) -> None:
    """With nothing on disk the defaults apply."""
    assert resolve_config(root=tmp_path) == AlignConfig()


def test_resolve_config_precedence(tmp_path: Path) -> None:
    """pyproject < alignchar.toml < explicit files < arguments."""
    _write(
        tmp_path / "pyproject.toml",
        '[tool.alignchar]\nposition = 40\nfill = "."\ntab_width = 2\n',
    )
    _write(tmp_path / "alignchar.toml", 'position = 50\nfill = "-"\n')
    extra = _write(tmp_path / "extra.toml", "position = 60\n")

    cfg = resolve_config(
        args={"target_column": None, "target_char": b";"},
        config_files=[extra],
        root=tmp_path,
    )

    assert cfg.target_column == 60
    assert cfg.fill_char == b"-"
    assert cfg.tab_width == 2
    assert cfg.target_char == b";"


def test_resolve_config_no_config_skips_discovery(tmp_path: Path) -> None:
    """Discovery can be disabled; explicit files still apply."""
    _write(tmp_path / "alignchar.toml", "position = 50\n")
    extra = _write(tmp_path / "extra.toml", "tab_width = 8\n")

    cfg = resolve_config(config_files=[extra], no_config=True, root=tmp_path)

    assert cfg.target_column == 80
    assert cfg.tab_width == 8


def test_resolve_config_uses_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Without an explicit root the working directory is searched."""
    _write(tmp_path / "alignchar.toml", "position = 33\n")
    monkeypatch.chdir(tmp_path)
    assert resolve_config().target_column == 33


def test_resolve_config_rejects_invalid_result(tmp_path: Path) -> None:
    """A merged config that fails validation is rejected."""
    _write(tmp_path / "alignchar.toml", "position = 5\nbuffer_capacity = 6\n")
    with pytest.raises(AlignConfigError, match="between 1 and 4"):
        resolve_config(root=tmp_path)


def test_to_toml_round_trips_through_tomlkit() -> None:
    """The dumped config parses back to the same table."""
    table = AlignConfig(fill_char=b".").to_toml_dict()
    assert tomlkit.parse(to_toml(table)).unwrap() == table
