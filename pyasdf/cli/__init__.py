"""pyasdf CLI - Inspect asdf paths, settings and hooks."""

import json
import logging
import sys

import click
import structlog

from pyasdf.__version__ import __version__
from pyasdf.config import AsdfConfigError, Config, load_config

# Configure structlog for CLI
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(),
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


@click.group()
@click.version_option(version=__version__, prog_name="pyasdf")
@click.option("--debug/--no-debug", default=False, help="Enable debug output")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """pyasdf - Runtime configuration for the asdf version manager."""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    if debug:
        logging.basicConfig(level=logging.DEBUG)


def _config() -> Config:
    try:
        return load_config()
    except AsdfConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def paths(json_output: bool) -> None:
    """Show the resolved asdf directories and files.

    Example:
        ASDF_DATA_DIR=~/tools/asdf pyasdf paths
    """
    config = _config()
    resolved = {
        "home": config.home,
        "data_dir": config.data_dir,
        "config_file": config.config_file,
        "default_tool_versions_filename": config.default_tool_versions_filename,
    }

    if json_output:
        click.echo(json.dumps(resolved, indent=2))
        return

    for key, value in resolved.items():
        click.echo(f"{key}: {value}")


@cli.command()
@click.option("--json-output", "-j", is_flag=True, help="Output as JSON")
def settings(json_output: bool) -> None:
    """Show the effective settings from the asdfrc file."""
    config = _config()

    try:
        current = config.settings()
    except AsdfConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if json_output:
        click.echo(json.dumps(current.model_dump(), indent=2))
        return

    duration = current.plugin_repository_last_check_duration
    click.echo(f"\n⚙️  Settings ({config.config_file})")
    click.echo(f"{'=' * 40}")
    click.echo(f"Loaded: {current.loaded}")
    click.echo(f"Legacy version file: {current.legacy_version_file}")
    click.echo(f"Always keep download: {current.always_keep_download}")
    click.echo(
        "Disable plugin short name repository: "
        f"{current.disable_plugin_short_name_repository}"
    )
    click.echo(f"Concurrency: {current.concurrency}")
    if duration.never:
        click.echo("Plugin repository check: never")
    else:
        click.echo(f"Plugin repository check: every {duration.every} minutes")
    if current.hooks:
        click.echo("Hooks:")
        for name, command in current.hooks.items():
            click.echo(f"  {name} = {command}")


@cli.command()
@click.argument("name")
def hook(name: str) -> None:
    """Print the command configured for a hook.

    Exits with status 1 when the hook is not defined.

    Example:
        pyasdf hook pre_asdf_plugin_add
    """
    config = _config()

    try:
        command = config.get_hook(name)
    except AsdfConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not command:
        click.echo(f"Hook not defined: {name}", err=True)
        sys.exit(1)

    click.echo(command)


def main() -> None:
    """Main entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
