#!/usr/bin/env python3
"""
Main CLI Entry Point for Frugeasy

Provides the command-line interface for the analysis tools.
"""

import logging
import os

import click

from ..core.config import get_config


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Frugeasy - Personal Finance Tracking

    Monthly summaries, spending pace and nudges from a transaction snapshot.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    # Set environment if specified
    if config_env:
        os.environ["FRUGEASY_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e)) from e

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("frugeasy").setLevel(logging.DEBUG)

    # Store global options
    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from frugeasy import __author__, __version__

    click.echo(f"Frugeasy v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Output Directory: {config_obj.output_dir}")
    click.echo(f"  Currency: {config_obj.analysis.currency}")
    click.echo(f"  Largest Transactions Shown: {config_obj.analysis.largest_limit}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


from .summary import summary  # noqa: E402

main.add_command(summary)


if __name__ == "__main__":
    main()
