# topmark:header:start
#
#   project      : AlignChar
#   file         : io.py
#   file_relpath : src/alignchar/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Load AlignChar configuration from TOML sources.

Sources, lowest precedence first:
    1. built-in defaults (`alignchar.config.model.AlignConfig`),
    2. ``[tool.alignchar]`` in ``pyproject.toml`` in the working directory,
    3. ``alignchar.toml`` in the working directory,
    4. each explicitly given config file,
    5. command-line / API arguments.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from alignchar.config.keys import Toml
from alignchar.config.logging import get_logger
from alignchar.config.model import MutableAlignConfig
from alignchar.constants import ALIGNCHAR_TOML_NAME, PYPROJECT_TOML_NAME
from alignchar.core.errors import AlignConfigError

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from alignchar.config.logging import AlignCharLogger
    from alignchar.config.model import AlignConfig

logger: AlignCharLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Parse the TOML file at ``path`` into a plain dict.

    Args:
        path (Path): TOML file to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        AlignConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AlignConfigError(f"Cannot read config file {path}: {exc}") from exc
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise AlignConfigError(f"Invalid TOML in {path}: {exc}") from exc
    return doc.unwrap()


def extract_alignchar_table(path: Path, data: Mapping[str, Any]) -> TomlTable | None:
    """Return the AlignChar table from a parsed document.

    For ``pyproject.toml`` this is ``[tool.alignchar]`` (None if absent); for
    any other file it is the root table.

    Raises:
        AlignConfigError: If the ``[tool.alignchar]`` entry is not a table.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return dict(data)
    tool = data.get(Toml.SECTION_TOOL)
    if not isinstance(tool, dict):
        return None
    table = tool.get(Toml.SECTION_ALIGNCHAR)
    if table is None:
        return None
    if not isinstance(table, dict):
        raise AlignConfigError(f"[tool.{Toml.SECTION_ALIGNCHAR}] in {path} must be a table.")
    return table


def load_config_file(path: Path) -> MutableAlignConfig | None:
    """Load one config file into a builder (None for a pyproject without our table)."""
    table = extract_alignchar_table(path, load_toml_dict(path))
    if table is None:
        logger.debug("No [tool.%s] table in %s", Toml.SECTION_ALIGNCHAR, path)
        return None
    return MutableAlignConfig.from_toml_dict(table, source=path)


def discover_config_files(root: Path | None = None) -> list[Path]:
    """Return the config files present in ``root`` (default: CWD), lowest precedence first."""
    base = root or Path.cwd()
    found: list[Path] = []
    for name in (PYPROJECT_TOML_NAME, ALIGNCHAR_TOML_NAME):
        candidate = base / name
        if candidate.is_file():
            found.append(candidate)
    logger.debug("Discovered config files in %s: %s", base, found)
    return found


def resolve_config(
    *,
    args: Mapping[str, Any] | None = None,
    config_files: Iterable[Path | str] = (),
    no_config: bool = False,
    root: Path | None = None,
) -> AlignConfig:
    """Merge all configuration sources into a validated `AlignConfig`.

    Args:
        args (Mapping[str, Any] | None): CLI/API overrides (highest precedence).
        config_files (Iterable[Path | str]): Extra TOML files applied after discovery.
        no_config (bool): Skip discovery of ``pyproject.toml`` / ``alignchar.toml``.
        root (Path | None): Directory searched during discovery (default: CWD).

    Returns:
        AlignConfig: The frozen configuration.

    Raises:
        AlignConfigError: If a source is malformed or the result is invalid.
    """
    draft = MutableAlignConfig()

    sources: list[Path] = [] if no_config else discover_config_files(root)
    sources.extend(Path(p) for p in config_files)
    for path in sources:
        loaded = load_config_file(path)
        if loaded is not None:
            draft = draft.merge_with(loaded)

    if args:
        draft = draft.merge_with(MutableAlignConfig.from_args(args))

    config = draft.freeze()
    logger.debug("Resolved config (sources: %s): %s", draft.config_files, config)
    return config


def to_toml(table: Mapping[str, Any]) -> str:
    """Render a plain table as TOML text."""
    return tomlkit.dumps(dict(table))
