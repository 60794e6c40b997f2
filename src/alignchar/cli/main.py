# topmark:header:start
#
#   project      : AlignChar
#   file         : main.py
#   file_relpath : src/alignchar/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 The AlignChar Authors
#
# topmark:header:end

"""AlignChar command line interface.

Usage examples::

    alignchar [options] -i <input file> -o <output file>
    alignchar [options] -i <input file> --in-place

Key ideas:
- Shared state (verbosity, color, console) is initialized once and placed into ``ctx.obj``.
- Option values are merged with config files into a frozen `AlignConfig` before
  any file is opened, so invalid settings never produce output.
- Library errors are translated into Click exceptions carrying sysexits-style
  exit codes (see `alignchar.cli.errors`).
"""

from __future__ import annotations

from contextlib import ExitStack
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO

import click

from alignchar.cli.console import ClickConsole
from alignchar.cli.errors import AlignCharUsageError, from_exception
from alignchar.cli.options import (
    SINGLE_CHAR,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from alignchar.config.io import resolve_config, to_toml
from alignchar.config.logging import get_logger, resolve_env_log_level, setup_logging
from alignchar.constants import ALIGNCHAR_VERSION, BUFFER_CAPACITY, STDIO_PATH
from alignchar.core.engine import process
from alignchar.core.errors import AlignCharError, AlignIOError
from alignchar.io.files import align_in_place, backup_path_for, same_file

if TYPE_CHECKING:
    from alignchar.config.logging import AlignCharLogger
    from alignchar.config.model import AlignConfig
    from alignchar.core.engine import ProcessResult

logger: AlignCharLogger = get_logger(__name__)

HELP_TEXT = f"""\
For the given input file, for each line that ends in the target character
(default: '\\'), align the target character to the target column position
(default: 80, first column is 1) using the fill character (default: ' ').

Non-matching lines, lines of length {BUFFER_CAPACITY} and greater, and lines
where the target character falls on or after the target column position are
unchanged.

\b
An input file must be specified (-i or --input).
Either an output file must be specified (-o or --output)
or --in-place must be specified, meaning modify the input file.
Use '-' for standard input/output.
"""


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> ClickConsole:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ClickConsole: The console stored in ``ctx.obj["console"]``.
    """
    ctx.ensure_object(dict)

    effective_color_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or "auto")
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    # Program-output verbosity; the environment may still force a log level.
    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity"] = verbose
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    return console


def _validate_output_mode(input_path: str | None, output_path: str | None, in_place: bool) -> None:
    if input_path is None:
        raise AlignCharUsageError("You need to specify the input file using -i or --input.")
    if output_path is not None and in_place:
        raise AlignCharUsageError(
            "Do not specify both --in-place and an output file (-o or --output). "
            "Instead, specify exactly one of them."
        )
    if output_path is None and not in_place:
        raise AlignCharUsageError(
            "You must either specify an output file (using -o or --output) "
            "or specify modifying the input file in-place (--in-place)."
        )
    if in_place and input_path == STDIO_PATH:
        raise AlignCharUsageError("--in-place cannot be used when reading from standard input.")
    if (
        output_path is not None
        and STDIO_PATH not in (input_path, output_path)
        and same_file(Path(input_path), Path(output_path))
    ):
        raise AlignCharUsageError(
            "Do NOT specify the same path for input and output (use --in-place instead)."
        )


def _run_streams(input_path: str, output_path: str, config: AlignConfig) -> ProcessResult:
    """Run the engine between two paths, either of which may be '-' (stdio)."""
    with ExitStack() as stack:
        src: BinaryIO
        dst: BinaryIO
        if input_path == STDIO_PATH:
            src = click.get_binary_stream("stdin")
        else:
            src = stack.enter_context(Path(input_path).open("rb"))
        if output_path == STDIO_PATH:
            dst = click.get_binary_stream("stdout")
        else:
            try:
                dst = stack.enter_context(Path(output_path).open("wb"))
            except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as exc:
                raise AlignIOError(
                    f"Cannot open output file {output_path}: {exc.strerror or exc}"
                ) from exc

        result = process(src, dst, config)
        dst.flush()
        return result


@click.command(
    name="alignchar",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=HELP_TEXT,
)
@click.option(
    "-i",
    "--input",
    "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Input file (required; '-' for standard input).",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default=None,
    help="Output file ('-' for standard output). Mutually exclusive with --in-place.",
)
@click.option(
    "--in-place",
    "in_place",
    is_flag=True,
    help="Modify the input file. Mutually exclusive with -o/--output.",
)
@click.option(
    "-c",
    "--char",
    "target_char",
    type=SINGLE_CHAR,
    default=None,
    help="Character to be aligned (default: '\\').",
)
@click.option(
    "-p",
    "--position",
    "target_column",
    type=click.IntRange(min=1),
    default=None,
    help="Column to align the character to (default: 80, first column is 1).",
)
@click.option(
    "-f",
    "--fill",
    "fill_char",
    type=SINGLE_CHAR,
    default=None,
    help="Fill character (default: ' ').",
)
@click.option(
    "-t",
    "--tab-width",
    "tab_width",
    type=click.IntRange(min=0),
    default=None,
    help="Tab width used when calculating line width (default: 4).",
)
@click.option(
    "--config",
    "config_files",
    multiple=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Extra TOML config file (may be repeated; later files win).",
)
@click.option(
    "--no-config",
    "no_config",
    is_flag=True,
    help="Do not read pyproject.toml / alignchar.toml from the working directory.",
)
@click.option(
    "--dump-config",
    "dump_config",
    is_flag=True,
    help="Print the resolved configuration as TOML and exit.",
)
@common_verbose_options
@common_color_options
@click.version_option(ALIGNCHAR_VERSION, "--version", prog_name="alignchar", message="%(version)s")
@click.pass_context
def cli(
    ctx: click.Context,
    *,
    input_path: str | None,
    output_path: str | None,
    in_place: bool,
    target_char: bytes | None,
    target_column: int | None,
    fill_char: bytes | None,
    tab_width: int | None,
    config_files: tuple[Path, ...],
    no_config: bool,
    dump_config: bool,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the AlignChar CLI."""
    console = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if not dump_config:
        _validate_output_mode(input_path, output_path, in_place)

    try:
        config = resolve_config(
            args={
                "target_char": target_char,
                "target_column": target_column,
                "fill_char": fill_char,
                "tab_width": tab_width,
            },
            config_files=config_files,
            no_config=no_config,
        )
    except AlignCharError as exc:
        raise from_exception(exc) from exc

    if dump_config:
        click.echo(to_toml(config.to_toml_dict()), nl=False)
        return

    # Validated above
    assert input_path is not None

    backup = backup_path_for(Path(input_path))
    had_backup = in_place and backup.exists()
    try:
        if in_place:
            result = align_in_place(Path(input_path), config)
        else:
            assert output_path is not None
            result = _run_streams(input_path, output_path, config)
    except (AlignCharError, OSError) as exc:
        logger.debug("Processing failed", exc_info=True)
        if in_place and not had_backup and backup.exists():
            console.warn(f"The original content of {input_path} was kept in {backup}.")
        raise from_exception(exc) from exc

    if verbose > 0:
        console.print(
            f"{input_path}: {result.lines} line(s), {result.aligned} aligned, "
            f"{result.overflowed} too long, {result.bytes_written} byte(s) written"
        )


if __name__ == "__main__":
    cli()
