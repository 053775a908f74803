"""CLI entry point. `errsync` and scripts/sync_errors.py resolve here."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from errsync import __version__
from errsync.cli._output import format_summary
from errsync.config import load_config
from errsync.errors import SyncError
from errsync.sync import run_sync


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.version_option(version=__version__, prog_name="errsync")
@click.option(
    "--local",
    "local_path",
    type=click.Path(path_type=Path),
    default=None,
    help="Read ERRORS.md from a local checkout (directory or file) instead of fetching it.",
)
@click.option("--url", default=None, envvar="ERRSYNC_SOURCE_URL", help="Upstream ERRORS.md URL.")
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    envvar="ERRSYNC_DATA_DIR",
    help="Directory holding error-enrichments.json and errors.json.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file (default: ./errsync.toml if present).",
)
@click.option("--check", is_flag=True, help="Don't write; exit 1 if errors.json is out of date.")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "text"]),
    default="text",
    help="Summary format.",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr.")
def main(
    local_path: Path | None,
    url: str | None,
    data_dir: Path | None,
    config_path: Path | None,
    check: bool,
    output_format: str,
    verbose: bool,
) -> None:
    """Sync ERRORS.md into errors.json for the error catalog site."""
    _configure_logging(verbose)
    try:
        config = load_config(config_path).with_overrides(source_url=url, data_dir=data_dir)
        result = run_sync(config, local_path=local_path, write=not check)
    except SyncError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1) from e

    click.echo(format_summary(result, output_format=output_format))
    if check and result.changed:
        raise SystemExit(1)
