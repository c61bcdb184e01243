"""
pexelkit CLI - browse the Pexels photo and video API from a terminal
"""

import logging
from typing import Optional

import click

from pexelkit import __version__
from pexelkit.core.logger import set_level

from .commands import config, photos, videos


@click.group()
@click.version_option(version=__version__, prog_name="pexelkit")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to a pexelkit.toml file",
)
@click.option(
    "--token",
    envvar="PEXELS_API_KEY",
    default=None,
    help="Pexels API key (default: $PEXELS_API_KEY or [api] token)",
)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    token: Optional[str],
    as_json: bool,
    verbose: bool,
) -> None:
    """pexelkit - Pexels photo & video API client

    Use 'pexelkit COMMAND --help' for more information on a command.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["token"] = token
    ctx.obj["json"] = as_json

    if verbose:
        set_level(logging.DEBUG)
    else:
        _apply_configured_log_level(config_path)


def _apply_configured_log_level(config_path: Optional[str]) -> None:
    from pexelkit.core.config import load_config
    from pexelkit.core.exceptions import ConfigurationError

    try:
        level = load_config(config_path).get("logging", "level", "WARNING")
    except (ConfigurationError, OSError):
        # Reported by the command that actually needs the configuration.
        return
    set_level(level)


# Register command groups
cli.add_command(photos)
cli.add_command(videos)
cli.add_command(config)


if __name__ == "__main__":
    cli()
