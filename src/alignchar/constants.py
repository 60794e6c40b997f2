# topmark:header:start
#
#   project      : AlignChar
#   file         : constants.py
#   file_relpath : src/alignchar/constants.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""AlignChar Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

ALIGNCHAR_VERSION: str = get_version("alignchar")

# Capacity of the line buffer. Lines too long to fit are left unchanged.
BUFFER_CAPACITY: Final[int] = 2048

# Bytes of the buffer not available for target columns (terminator + reserved slot).
BUFFER_OVERHEAD: Final[int] = 2

NEWLINE: Final[bytes] = b"\n"

DEFAULT_TARGET_CHAR: Final[bytes] = b"\\"
# First column is 1.
DEFAULT_TARGET_COLUMN: Final[int] = 80
DEFAULT_FILL_CHAR: Final[bytes] = b" "
DEFAULT_TAB_WIDTH: Final[int] = 4

# Name the input file is renamed to while it is being rewritten in place.
# Deleted only once the new output has been written successfully.
INPLACE_BACKUP_NAME: Final[str] = "~alignchar_input_file_backup!!!"

# Config discovery
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
ALIGNCHAR_TOML_NAME: Final[str] = "alignchar.toml"

LOG_LEVEL_ENV_VAR: Final[str] = "ALIGNCHAR_LOG_LEVEL"

STDIO_PATH: Final[str] = "-"
