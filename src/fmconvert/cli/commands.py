"""CLI command implementations"""

import logging
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from fmconvert.config import Settings, load_config
from fmconvert.core.errors import ConvertError
from fmconvert.core.pipeline import convert_lines


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
        _fail("Invalid configuration", e)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        stream=sys.stderr,
        level=getattr(logging, level),
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )


def convert_cmd(
    path: Annotated[Optional[Path], typer.Argument(help="Markdown file to read (default: stdin)")] = None,
    strict_dates: Annotated[Optional[bool], typer.Option("--strict-dates/--lenient-dates", help="Fail on unrecognized dates")] = None,
    require_date: Annotated[Optional[bool], typer.Option("--require-date/--optional-date", help="Fail when 'date' is missing or invalid")] = None,
    unknown_keys: Annotated[Optional[str], typer.Option("--unknown-keys", help="drop, extra or error")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level for stderr diagnostics")] = None,
    ):
    """Read a document and print its front matter as TOML between '+++' lines."""
    settings = _settings(overrides={
        "strict_dates": strict_dates, "require_date": require_date,
        "unknown_keys": unknown_keys, "log_level": log_level,
    })
    _configure_logging(settings.log_level)

    try:
        if path is None:
            lines = convert_lines(sys.stdin, settings)
        else:
            with path.open(encoding="utf-8") as fh:
                lines = convert_lines(fh, settings)
    except ConvertError as e:
        _fail(f"{e.stage} failed", e)
    except OSError as e:
        _fail(f"Cannot read {path}", e)

    typer.echo("\n".join(lines))
