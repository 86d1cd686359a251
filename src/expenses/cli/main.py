#!/usr/bin/env python3
"""
Main CLI Entry Point for the Expense Tracker

Provides the ``expenses`` command group with expense commands and utility
commands (version, config, info).
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..tracker.datastore import ExpenseStore
from .errors import reported_errors


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
    Expense Tracker - Personal expense tracking from the command line

    Records expenses in a local JSON file and reports monthly totals.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["EXPENSES_ENV"] = config_env
        config_obj = reload_config()
    else:
        config_obj = get_config()

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("expenses").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config_obj

    if verbose:
        click.echo(f"Environment: {config_obj.environment.value}")
        click.echo(f"Expense file: {config_obj.store_path}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from expenses import __author__, __version__

    click.echo(f"Expense Tracker v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Expense File: {config_obj.store_path}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show the state of the expense file."""
    store = ExpenseStore(ctx.obj["config"].store_path)

    click.echo(f"Expense file: {store.path}")
    if not store.exists():
        click.echo("  Status: not created yet")
        return

    with reported_errors():
        summary_text = store.summary_text()

    click.echo(f"  {summary_text}")
    click.echo(f"  Size: {store.size_bytes()} bytes")
    click.echo(f"  Last modified: {store.last_modified():%Y-%m-%d %H:%M:%S} ({store.age_days()} days ago)")


# Register expense commands
from .expense import commands  # noqa: E402

for command in commands:
    main.add_command(command)


if __name__ == "__main__":
    main()
