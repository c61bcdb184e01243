"""Photo commands: search, curated feed, lookup by ID and random pick."""

import click
from rich.markup import escape

from pexelkit.cli.helpers import (
    client_from_context,
    echo_json,
    handle_errors,
    print_photo,
    print_photo_page,
    print_quota,
    wants_json,
)


@click.group()
def photos() -> None:
    """Search and browse Pexels photos."""
    pass


@photos.command("search")
@click.argument("query")
@click.option("--per-page", type=click.IntRange(min=1), default=15, help="Results per page")
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.pass_context
def photos_search(ctx: click.Context, query: str, per_page: int, page: int) -> None:
    """Search photos matching QUERY."""
    with handle_errors(), client_from_context(ctx) as client:
        result = client.search_photos(query, per_page, page)

    if wants_json(ctx):
        echo_json(result.to_dict())
        return

    if not result.photos:
        click.echo(f"No photos found for '{query}'.")
    else:
        print_photo_page(result, title=f"Photos matching '{escape(query)}'")
    print_quota(client)


@photos.command("curated")
@click.option("--per-page", type=click.IntRange(min=1), default=15, help="Results per page")
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.pass_context
def photos_curated(ctx: click.Context, per_page: int, page: int) -> None:
    """List curated photos."""
    with handle_errors(), client_from_context(ctx) as client:
        result = client.curated_photos(per_page, page)

    if wants_json(ctx):
        echo_json(result.to_dict())
        return

    print_photo_page(result, title="Curated photos")
    print_quota(client)


@photos.command("get")
@click.argument("photo_id", type=int)
@click.pass_context
def photos_get(ctx: click.Context, photo_id: int) -> None:
    """Show the photo with PHOTO_ID."""
    with handle_errors(), client_from_context(ctx) as client:
        photo = client.get_photo(photo_id)

    if wants_json(ctx):
        echo_json(photo.to_dict())
        return

    print_photo(photo)
    print_quota(client)


@photos.command("random")
@click.pass_context
def photos_random(ctx: click.Context) -> None:
    """Show a random curated photo."""
    with handle_errors(), client_from_context(ctx) as client:
        photo = client.get_random_photo()

    if wants_json(ctx):
        echo_json(photo.to_dict())
        return

    print_photo(photo)
    print_quota(client)
