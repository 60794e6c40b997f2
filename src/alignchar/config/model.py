# topmark:header:start
#
#   project      : AlignChar
#   file         : model.py
#   file_relpath : src/alignchar/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `AlignConfig`: an immutable, validated snapshot handed to the engine.
    - `MutableAlignConfig`: a mutable builder used while merging defaults,
      config files and CLI options; it can be frozen into `AlignConfig` and
      thawed back for edits.

Scope:
    - *In scope*: data shapes, value coercion, merge policy
      (`MutableAlignConfig.merge_with`), validation and freeze/thaw mechanics.
    - *Out of scope*: filesystem discovery and TOML I/O, which live in
      `alignchar.config.io`.

Character values:
    The target and fill characters are single *bytes*. Builders accept a
    one-character ``str`` (encoded as latin-1, so any code point up to U+00FF
    maps to exactly one byte) or a one-byte ``bytes`` value.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from alignchar.config.keys import Toml
from alignchar.config.logging import get_logger
from alignchar.constants import (
    BUFFER_CAPACITY,
    BUFFER_OVERHEAD,
    DEFAULT_FILL_CHAR,
    DEFAULT_TAB_WIDTH,
    DEFAULT_TARGET_CHAR,
    DEFAULT_TARGET_COLUMN,
)
from alignchar.core.errors import AlignConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from alignchar.config.logging import AlignCharLogger

logger: AlignCharLogger = get_logger(__name__)


def to_single_byte(value: str | bytes, what: str) -> bytes:
    """Coerce ``value`` to a one-byte ``bytes`` object.

    Args:
        value (str | bytes): A one-character string or a one-byte bytes value.
        what (str): Human-readable name of the setting, used in error messages.

    Returns:
        bytes: The single byte.

    Raises:
        AlignConfigError: If ``value`` is not exactly one byte.
    """
    if isinstance(value, str):
        if len(value) != 1:
            raise AlignConfigError(f"Pass exactly one character for {what} (got {value!r}).")
        try:
            return value.encode("latin-1")
        except UnicodeEncodeError as exc:
            raise AlignConfigError(
                f"The {what} {value!r} is not a single-byte character."
            ) from exc
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 1:
            raise AlignConfigError(f"Pass exactly one byte for {what} (got {bytes(value)!r}).")
        return bytes(value)
    raise AlignConfigError(f"The {what} must be a string, got {type(value).__name__}.")


def to_int(value: object, what: str) -> int:
    """Coerce ``value`` to an int, rejecting bools and non-numeric strings.

    Raises:
        AlignConfigError: If ``value`` cannot be read as an integer.
    """
    if isinstance(value, bool):
        raise AlignConfigError(f"The {what} must be an integer, got a boolean.")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError as exc:
            raise AlignConfigError(f"Failed to parse {what} from {value!r}.") from exc
    raise AlignConfigError(f"The {what} must be an integer, got {type(value).__name__}.")


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class AlignConfig:
    """Immutable alignment settings for one run.

    Attributes:
        target_char (bytes): Byte that triggers alignment when it ends a line.
        target_column (int): Column (first column is 1) the target byte is moved to.
        fill_char (bytes): Byte used to pad lines.
        tab_width (int): Columns counted for each tab byte.
        buffer_capacity (int): Line buffer capacity in bytes; longer lines pass through.
    """

    target_char: bytes = DEFAULT_TARGET_CHAR
    target_column: int = DEFAULT_TARGET_COLUMN
    fill_char: bytes = DEFAULT_FILL_CHAR
    tab_width: int = DEFAULT_TAB_WIDTH
    buffer_capacity: int = BUFFER_CAPACITY

    @property
    def max_target_column(self) -> int:
        """Largest target column the line buffer can accommodate."""
        return self.buffer_capacity - BUFFER_OVERHEAD

    def validate(self) -> None:
        """Check the invariants the engine relies on.

        Raises:
            AlignConfigError: If any setting has the wrong type or is out of range.
        """
        for name in ("target_column", "tab_width", "buffer_capacity"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise AlignConfigError(
                    f"The {name} must be an integer, got {type(value).__name__}."
                )
        for name in ("target_char", "fill_char"):
            value = getattr(self, name)
            if not isinstance(value, bytes):
                raise AlignConfigError(
                    f"The {name} must be bytes, got {type(value).__name__} "
                    f"(use to_single_byte() to convert {value!r})."
                )
        if self.buffer_capacity <= 0:
            raise AlignConfigError("Zero-capacity buffer was given.")
        if self.buffer_capacity < BUFFER_OVERHEAD:
            raise AlignConfigError(
                f"Buffer capacity must be at least {BUFFER_OVERHEAD} (got {self.buffer_capacity})."
            )
        if not 1 <= self.target_column <= self.max_target_column:
            raise AlignConfigError(
                f"Column position must be between 1 and {self.max_target_column} "
                f"(got {self.target_column})."
            )
        if self.tab_width < 0:
            raise AlignConfigError(f"Tab width ({self.tab_width}) must not be negative.")
        if len(self.target_char) != 1:
            raise AlignConfigError(f"Target character must be one byte (got {self.target_char!r}).")
        if len(self.fill_char) != 1:
            raise AlignConfigError(f"Fill character must be one byte (got {self.fill_char!r}).")

    def thaw(self) -> MutableAlignConfig:
        """Return a mutable copy of this frozen config."""
        return MutableAlignConfig(
            target_char=self.target_char,
            target_column=self.target_column,
            fill_char=self.fill_char,
            tab_width=self.tab_width,
            buffer_capacity=self.buffer_capacity,
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Return this config as a TOML-compatible table (``alignchar.toml`` shape)."""
        return {
            Toml.KEY_CHAR: self.target_char.decode("latin-1"),
            Toml.KEY_POSITION: self.target_column,
            Toml.KEY_FILL: self.fill_char.decode("latin-1"),
            Toml.KEY_TAB_WIDTH: self.tab_width,
            Toml.KEY_BUFFER_CAPACITY: self.buffer_capacity,
        }


# -------------------------- Mutable builder --------------------------


@dataclass
class MutableAlignConfig:
    """Mutable configuration used while merging config sources.

    Every field is optional: ``None`` means "inherit" (from an earlier source,
    or ultimately from the defaults of `AlignConfig`).

    Attributes:
        target_char (bytes | None): Target byte.
        target_column (int | None): Target column (first column is 1).
        fill_char (bytes | None): Fill byte.
        tab_width (int | None): Tab width in columns.
        buffer_capacity (int | None): Line buffer capacity in bytes.
        config_files (list[Path | str]): Config sources applied, in order.
    """

    target_char: bytes | None = None
    target_column: int | None = None
    fill_char: bytes | None = None
    tab_width: int | None = None
    buffer_capacity: int | None = None

    # Provenance
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> AlignConfig:
        """Freeze this builder into a validated `AlignConfig`.

        Raises:
            AlignConfigError: If the merged settings are invalid.
        """
        defaults = AlignConfig()
        config = AlignConfig(
            target_char=defaults.target_char if self.target_char is None else self.target_char,
            target_column=(
                defaults.target_column if self.target_column is None else self.target_column
            ),
            fill_char=defaults.fill_char if self.fill_char is None else self.fill_char,
            tab_width=defaults.tab_width if self.tab_width is None else self.tab_width,
            buffer_capacity=(
                defaults.buffer_capacity if self.buffer_capacity is None else self.buffer_capacity
            ),
        )
        config.validate()
        return config

    # ---------------------------- Merging ----------------------------
    def merge_with(self, other: MutableAlignConfig) -> MutableAlignConfig:
        """Return a new builder where values set in ``other`` override ours.

        Args:
            other (MutableAlignConfig): The higher-precedence source.

        Returns:
            MutableAlignConfig: The merged builder; neither input is modified.
        """

        def pick(mine: Any, theirs: Any) -> Any:
            return mine if theirs is None else theirs

        return MutableAlignConfig(
            target_char=pick(self.target_char, other.target_char),
            target_column=pick(self.target_column, other.target_column),
            fill_char=pick(self.fill_char, other.fill_char),
            tab_width=pick(self.tab_width, other.tab_width),
            buffer_capacity=pick(self.buffer_capacity, other.buffer_capacity),
            config_files=[*self.config_files, *other.config_files],
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_toml_dict(
        cls,
        table: Mapping[str, Any],
        *,
        source: Path | str | None = None,
    ) -> MutableAlignConfig:
        """Build a builder from a parsed ``alignchar`` TOML table.

        Unknown keys are logged and ignored.

        Args:
            table (Mapping[str, Any]): The ``[tool.alignchar]`` table or the root
                table of ``alignchar.toml``.
            source (Path | str | None): Where the table came from (for provenance
                and messages).

        Returns:
            MutableAlignConfig: The builder.

        Raises:
            AlignConfigError: If a value has the wrong type or shape.
        """
        where = f" in {source}" if source is not None else ""
        for key in table:
            if key not in Toml.ALLOWED_KEYS:
                logger.warning("Ignoring unknown configuration key '%s'%s", key, where)

        draft = cls()
        if source is not None:
            draft.config_files.append(source)

        value = table.get(Toml.KEY_CHAR)
        if value is not None:
            draft.target_char = to_single_byte(_as_str(value, Toml.KEY_CHAR, where), "target char")
        value = table.get(Toml.KEY_FILL)
        if value is not None:
            draft.fill_char = to_single_byte(_as_str(value, Toml.KEY_FILL, where), "fill char")
        value = table.get(Toml.KEY_POSITION)
        if value is not None:
            draft.target_column = to_int(value, "column position")
        value = table.get(Toml.KEY_TAB_WIDTH)
        if value is not None:
            draft.tab_width = to_int(value, "tab width")
        value = table.get(Toml.KEY_BUFFER_CAPACITY)
        if value is not None:
            draft.buffer_capacity = to_int(value, "buffer capacity")

        logger.debug("Config from %s: %s", source or "<table>", draft)
        return draft

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> MutableAlignConfig:
        """Build a builder from CLI/API arguments.

        Recognized keys: ``target_char``, ``target_column``, ``fill_char``,
        ``tab_width``, ``buffer_capacity``. Missing or ``None`` values inherit.

        Args:
            args (Mapping[str, Any]): Argument mapping (e.g. Click params or a plain dict).

        Returns:
            MutableAlignConfig: The builder.
        """
        draft = cls()
        if args.get("target_char") is not None:
            draft.target_char = to_single_byte(args["target_char"], "target char")
        if args.get("fill_char") is not None:
            draft.fill_char = to_single_byte(args["fill_char"], "fill char")
        if args.get("target_column") is not None:
            draft.target_column = to_int(args["target_column"], "column position")
        if args.get("tab_width") is not None:
            draft.tab_width = to_int(args["tab_width"], "tab width")
        if args.get("buffer_capacity") is not None:
            draft.buffer_capacity = to_int(args["buffer_capacity"], "buffer capacity")
        return draft


def _as_str(value: object, key: str, where: str) -> str:
    if not isinstance(value, str):
        raise AlignConfigError(
            f"Configuration key '{key}'{where} must be a string, got {type(value).__name__}."
        )
    return value
