"""Command line interface for the slime bot."""

import sys
from typing import Optional

import click

from .config import load_logging_settings, load_settings
from .exceptions import ConfigError
from .main import sync_main

LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help="Override the log level (defaults to DEBUG in development, INFO in production).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Slime Discord Bot CLI."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.upper() if log_level else None


@cli.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Run the Discord bot."""
    click.echo("🤖 Starting slime bot...")
    sync_main(ctx.obj["log_level"])


@cli.command()
@click.pass_context
def check_config(ctx: click.Context) -> None:
    """Check configuration without connecting to Discord."""
    click.echo("🔍 Checking configuration...")

    logging_settings = load_logging_settings()
    level = ctx.obj["log_level"] or logging_settings.effective_log_level
    click.echo(f"✅ Environment: {logging_settings.environment}")
    click.echo(f"✅ Log level: {level}")

    try:
        load_settings()
    except ConfigError as e:
        click.echo(f"❌ DISCORD_TOKEN not usable: {e.cause}", err=True)
        sys.exit(1)

    click.echo("✅ Discord token configured")
    click.echo("\n✅ Configuration looks good!")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
