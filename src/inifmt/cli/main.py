# topmark:header:start
#
#   project      : IniFmt
#   file         : main.py
#   file_relpath : src/inifmt/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The ``inifmt`` command.

Key ideas:
- Shared state (verbosity, colour, console) is initialized once and stored in
  ``ctx.obj`` so errors can render through the project console.
- Option conflicts are rejected as [`InifmtUsageError`][inifmt.cli.errors.InifmtUsageError]
  (exit 64), keeping exit code 2 reserved for ``--check``.
- The command body only wires config, I/O and the pure formatter together.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from inifmt.cli.console import ClickConsole
from inifmt.cli.errors import InifmtConfigError, InifmtUsageError
from inifmt.cli.exit_codes import ExitCode
from inifmt.cli.io import InputSource, join_lines, read_input, write_file
from inifmt.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_config_options,
    common_format_options,
    common_output_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from inifmt.config import Config, MutableConfig, TomlLoadError
from inifmt.config.logging import get_logger, resolve_env_log_level, setup_logging
from inifmt.constants import PACKAGE_NAME
from inifmt.core.diagnostics import DiagnosticLevel
from inifmt.formatter import format_lines
from inifmt.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from inifmt.cli.console_api import ConsoleLike
    from inifmt.config.logging import InifmtLogger

logger: InifmtLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Internal logging is driven by the environment only.
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    # The console exists before verbosity is validated so usage errors render through it.
    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    console.verbosity_level = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = console.verbosity_level


def validate_option_combinations(
    *,
    files: tuple[str, ...],
    per_section: bool,
    single_space: bool,
    include_comments: bool,
    write: bool,
    check: bool,
    diff: bool,
) -> None:
    """Reject argument combinations that have no meaning.

    Raises:
        InifmtUsageError: For more than one FILE, ``-u`` with an alignment option,
            or ``--write`` with ``--check``/``--diff``.
    """
    if len(files) > 1:
        raise InifmtUsageError(f"At most one FILE may be given (got {len(files)}).")
    if single_space and (per_section or include_comments):
        raise InifmtUsageError(
            "'--single-space' cannot be combined with '--per-section' or '--include-comments'."
        )
    if write and (check or diff):
        raise InifmtUsageError("'--write' cannot be combined with '--check' or '--diff'.")


def build_config(
    *,
    config_paths: tuple[str, ...],
    no_config: bool,
    per_section: bool,
    single_space: bool,
    include_comments: bool,
    write: bool,
    check: bool,
    diff: bool,
) -> Config:
    """Layer defaults, config files and CLI flags into a frozen `Config`.

    CLI flags can only switch options on, so ``False`` is passed on as "not set".

    Raises:
        InifmtConfigError: If a file named with ``--config`` cannot be loaded.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    except TomlLoadError as exc:
        raise InifmtConfigError(str(exc)) from exc

    draft.apply_args(
        {
            "per_section": per_section or None,
            "single_space": single_space or None,
            "include_comments": include_comments or None,
            "write": write or None,
            "check": check or None,
            "diff": diff or None,
        }
    )
    return draft.freeze()


def report_config(console: ConsoleLike, config: Config) -> None:
    """Show config warnings, and the config sources when running verbosely."""
    for diagnostic in config.diagnostics:
        if diagnostic.level == DiagnosticLevel.WARNING:
            console.warn(f"Warning: {diagnostic.message}")
    sources: list[str] = [str(p) for p in config.config_files]
    console.info(f"Config sources: {', '.join(sources)}")


@click.command(
    name=PACKAGE_NAME,
    context_settings=CONTEXT_SETTINGS,
    help=(
        "Align the '=' delimiter of INI-style FILE (or standard input) and print "
        "the result. Use --write to update FILE in place."
    ),
)
@click.argument("files", nargs=-1, metavar="[FILE]")
@common_format_options
@common_output_options
@common_config_options
@common_verbose_options
@common_color_options
@click.version_option(package_name=PACKAGE_NAME, prog_name=PACKAGE_NAME)
@click.pass_context
def cli(
    ctx: click.Context,
    files: tuple[str, ...],
    per_section: bool,
    single_space: bool,
    include_comments: bool,
    write: bool,
    check: bool,
    diff: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the IniFmt CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    validate_option_combinations(
        files=files,
        per_section=per_section,
        single_space=single_space,
        include_comments=include_comments,
        write=write,
        check=check,
        diff=diff,
    )
    config: Config = build_config(
        config_paths=config_paths,
        no_config=no_config,
        per_section=per_section,
        single_space=single_space,
        include_comments=include_comments,
        write=write,
        check=check,
        diff=diff,
    )
    report_config(console, config)
    logger.debug("Effective config: %s", config.to_toml_dict())

    source: InputSource = read_input(files[0] if files else None)
    formatted: list[str] = format_lines(source.lines, config.format_options)
    changed: bool = source.differs_from(formatted)

    if config.diff:
        patch: list[str] = unified_diff(source.lines, formatted, name=source.display_name)
        console.print(render_patch(patch, color=ctx.obj["color_enabled"]), nl=False)

    if config.check:
        if changed:
            console.warn(f"would reformat {source.display_name}")
            ctx.exit(ExitCode.WOULD_CHANGE)
        return

    if config.diff:
        return

    if config.write and not source.is_stdin:
        assert source.path is not None  # static type check
        if not changed:
            console.info(f"{source.display_name} already formatted; not writing")
            return
        write_file(source.path, formatted)
        console.info(f"reformatted {source.display_name}")
        return

    if config.write:
        console.warn("--write ignored when reading from stdin")
    console.print(join_lines(formatted), nl=False)


if __name__ == "__main__":
    cli()
