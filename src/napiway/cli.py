"""CLI entry point for napiway."""

import sys
from pathlib import Path

import click

from napiway.config import load_config
from napiway.errors import NapiwayError
from napiway.generate import run_generation
from napiway.log import configure_logging
from napiway.version import VERSION


@click.group(invoke_without_command=True)
@click.option("--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="Config file to use (YAML only).")
@click.option("--workers", default=None, type=click.IntRange(min=1), help="Build endpoint IR with this many threads.")
@click.option("-v", "--verbose", is_flag=True, help="Log per-endpoint detail.")
@click.option("-q", "--quiet", is_flag=True, help="Only log warnings and errors.")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, workers: int | None, verbose: bool, quiet: bool):
    """napiway: server and SDK generator for declarative API specifications.

    Run as 'napiway --config <path-to-config-file>' to generate code.
    """
    if ctx.invoked_subcommand is not None:
        return
    if config_path is None:
        click.echo(ctx.get_help())
        return

    configure_logging(verbose=verbose, quiet=quiet)
    try:
        config = load_config(config_path)
        results = run_generation(config, max_workers=workers)
    except NapiwayError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for target, files in results.items():
        click.echo(f"{target} generated successfully ({len(files)} files).")


@main.command()
@click.option("-s", "--short", is_flag=True, help="Print only the version number without additional text.")
def version(short: bool):
    """Print the version of the napiway generator."""
    if short:
        click.echo(VERSION)
    else:
        click.echo(f"NApiWay Generator version: {VERSION}")
