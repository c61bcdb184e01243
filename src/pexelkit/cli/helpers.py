"""
CLI Helpers
===========

Shared plumbing for pexelkit CLI commands:
1. Build (or inject) the APIClient used by a command
2. Turn library errors into consistent click errors
3. Render photos, videos and pages with Rich

Usage:
    from pexelkit.cli.helpers import client_from_context, handle_errors

    with handle_errors():
        client = client_from_context(ctx)
        result = client.curated_photos(15, 1)
"""

import json
from contextlib import contextmanager
from typing import Any, Callable, Dict, Iterator, Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pexelkit.client import APIClient
from pexelkit.core.exceptions import PexelkitError
from pexelkit.models import Photo, PhotoSearchResult, Video, VideoSearchResult

# Global console instance
console = Console()

ClientFactory = Callable[[Dict[str, Any]], APIClient]

_client_factory: Optional[ClientFactory] = None


def _default_client_factory(options: Dict[str, Any]) -> APIClient:
    from pexelkit.core.config import load_config

    config = load_config(options.get("config_path"))
    return APIClient.from_config(config, token=options.get("token"))


def set_client_factory(factory: Optional[ClientFactory]) -> None:
    """
    Replace how commands build their APIClient.

    Primarily useful for testing; pass None to restore the default, which
    loads configuration and resolves the token.
    """
    global _client_factory
    _client_factory = factory


def client_from_context(ctx: click.Context) -> APIClient:
    """Build the APIClient for the current command from root options."""
    factory = _client_factory or _default_client_factory
    return factory(ctx.obj or {})


@contextmanager
def handle_errors() -> Iterator[None]:
    """Report library errors as click errors (exit code 1)."""
    try:
        yield
    except PexelkitError as e:
        raise click.ClickException(str(e)) from e


def wants_json(ctx: click.Context) -> bool:
    return bool((ctx.obj or {}).get("json"))


def echo_json(data: Any) -> None:
    click.echo(json.dumps(data, indent=2))


def print_quota(client: APIClient) -> None:
    console.print(f"[dim]Requests remaining: {client.get_remaining_quota()}[/dim]")


def print_photo_page(result: PhotoSearchResult, title: str) -> None:
    """Render a page of photos as a table."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Size", no_wrap=True)
    table.add_column("Photographer")
    table.add_column("Medium URL", overflow="fold")

    for photo in result.photos:
        table.add_row(
            str(photo.id),
            f"{photo.width}x{photo.height}",
            escape(photo.photographer_name),
            escape(photo.sources.medium),
        )

    console.print(table)
    _print_page_footer(result.page, result.per_page, result.total_results, result.has_next)


def print_video_page(result: VideoSearchResult, title: str) -> None:
    """Render a page of videos as a table."""
    table = Table(title=title, show_header=True)
    table.add_column("ID", no_wrap=True)
    table.add_column("Size", no_wrap=True)
    table.add_column("Duration", no_wrap=True)
    table.add_column("Files", no_wrap=True)
    table.add_column("Page URL", overflow="fold")

    for video in result.videos:
        table.add_row(
            str(video.id),
            f"{video.width}x{video.height}",
            f"{video.duration_seconds:g}s",
            str(len(video.files)),
            escape(video.page_url),
        )

    console.print(table)
    _print_page_footer(result.page, result.per_page, result.total_results, result.has_next)


def print_photo(photo: Photo) -> None:
    """Print the details of one photo."""
    console.print(f"\n[bold]Photo {photo.id}[/bold]  {photo.width}x{photo.height}")
    console.print(f"  Photographer: {escape(photo.photographer_name)} ({escape(photo.photographer_url)})")
    console.print(f"  Page:         {escape(photo.page_url)}")
    if photo.alt:
        console.print(f"  Alt:          {escape(photo.alt)}")
    console.print("  Sources:")
    for size, url in photo.sources.items():
        console.print(f"    {size:<10} {escape(url)}")


def print_video(video: Video) -> None:
    """Print the details of one video."""
    console.print(
        f"\n[bold]Video {video.id}[/bold]  {video.width}x{video.height}, {video.duration_seconds:g}s"
    )
    console.print(f"  Page:    {escape(video.page_url)}")
    console.print(f"  Preview: {escape(video.preview_image_url)}")

    best = video.best_file()
    if best is not None:
        console.print(
            f"  Best:    {escape(best.quality)} {best.width}x{best.height} {escape(best.download_url)}"
        )

    console.print(f"  Files ({len(video.files)}):")
    for rendition in video.files:
        console.print(
            f"    {rendition.id:<10} {escape(rendition.quality):<5} {escape(rendition.file_type):<10} "
            f"{rendition.width}x{rendition.height}"
        )


def _print_page_footer(page: int, per_page: int, total_results: int, has_next: bool) -> None:
    parts = [f"Page {page}", f"{per_page} per page"]
    if total_results:
        parts.append(f"{total_results} total")
    if has_next:
        parts.append("more available")
    console.print(f"[dim]{', '.join(parts)}[/dim]")
