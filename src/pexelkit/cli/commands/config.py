"""Configuration management commands."""

from pathlib import Path
from typing import Optional

import click


@click.group()
def config() -> None:
    """Configuration commands."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current configuration (the token is masked)."""
    from rich.markup import escape

    from pexelkit.cli.helpers import console, handle_errors
    from pexelkit.core.config import load_config

    with handle_errors():
        config_obj = load_config((ctx.obj or {}).get("config_path"))

    console.print("\n[bold]Current Configuration[/bold]")
    if config_obj.source:
        console.print(f"[dim]Source: {escape(config_obj.source)}[/dim]\n")
    else:
        console.print("[dim]Source: defaults (no config file found)[/dim]\n")

    for section, values in config_obj.to_dict().items():
        console.print(f"[bold]{escape(f'[{section}]')}[/bold]")
        for key, value in values.items():
            if key == "token" and value:
                value = _mask(value)
            console.print(f"  {key} = {escape(repr(value))}")
        console.print()


@config.command("init")
@click.argument("path", required=False, default=None)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def config_init(path: Optional[str], force: bool) -> None:
    """Write a default configuration file (default: ./pexelkit.toml)."""
    from pexelkit.core.config import create_default_config_file

    target = Path(path or "pexelkit.toml")
    if target.exists() and not force:
        raise click.ClickException(f"{target} already exists (use --force to overwrite)")

    written = create_default_config_file(str(target))
    click.echo(f"Created {written}")


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"
