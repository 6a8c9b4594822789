"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from dominator_static.config import Settings, load_config
from dominator_static.core.markdown.parse import make_parser
from dominator_static.core.pipeline import render_file, run_convert
from dominator_static.errors import ConfigError, ConvertError


LOG_FORMAT = "[%(levelname)s] %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _configure_logging(settings: Settings, verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level)
    logging.basicConfig(format=LOG_FORMAT, level=level)


def build_cmd(
    path: Annotated[Path, typer.Argument(exists=True, help="File or directory to convert")],
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory (default: $OUT_DIR)")] = None,
    trim: Annotated[Optional[bool], typer.Option("--trim/--no-trim", help="Trim whitespace around text nodes")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    suffix: Annotated[Optional[str], typer.Option("--suffix", help="Extension for generated files")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output")] = False,
    ):
    """Convert every .html/.htm/.md file under PATH into builder code."""
    settings = _settings(overrides={
        "output_dir": out, "trim_whitespace": trim,
        "parser_config": parser, "output_suffix": suffix,
    })
    _configure_logging(settings, verbose)
    try:
        make_parser(settings.parser_config)
        out_dir = settings.resolve_output_dir()
    except ConfigError as e:
        _fail(str(e))

    report = run_convert(
        path, out_dir, settings.trim_whitespace,
        settings.parser_config, settings.output_suffix,
    )
    for src, dest in report.converted:
        typer.echo(f"  {src} -> {dest}")
    for src, err in report.failed:
        typer.echo(f"  FAILED {src}: {err}", err=True)
    typer.echo(
        f"Converted {len(report.converted)} file(s) to {out_dir}/ - "
        f"{len(report.skipped)} skipped, {len(report.failed)} failed"
    )
    if report.failed:
        raise typer.Exit(1)


def render_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, help="File to render")],
    trim: Annotated[Optional[bool], typer.Option("--trim/--no-trim", help="Trim whitespace around text nodes")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the builder code for a single file to stdout."""
    settings = _settings(overrides={"trim_whitespace": trim, "parser_config": parser})
    _configure_logging(settings)
    try:
        text = render_file(path, settings.trim_whitespace, settings.parser_config)
    except ConvertError as e:
        _fail(f"Could not render {path}", e)
    typer.echo(text, nl=False)
