"""Video commands: search, popular feed, lookup by ID and random pick."""

import click
from rich.markup import escape

from pexelkit.cli.helpers import (
    client_from_context,
    echo_json,
    handle_errors,
    print_quota,
    print_video,
    print_video_page,
    wants_json,
)


@click.group()
def videos() -> None:
    """Search and browse Pexels videos."""
    pass


@videos.command("search")
@click.argument("query")
@click.option("--per-page", type=click.IntRange(min=1), default=15, help="Results per page")
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.pass_context
def videos_search(ctx: click.Context, query: str, per_page: int, page: int) -> None:
    """Search videos matching QUERY."""
    with handle_errors(), client_from_context(ctx) as client:
        result = client.search_videos(query, per_page, page)

    if wants_json(ctx):
        echo_json(result.to_dict())
        return

    if not result.videos:
        click.echo(f"No videos found for '{query}'.")
    else:
        print_video_page(result, title=f"Videos matching '{escape(query)}'")
    print_quota(client)


@videos.command("popular")
@click.option("--per-page", type=click.IntRange(min=1), default=15, help="Results per page")
@click.option("--page", type=click.IntRange(min=1), default=1, help="Page number")
@click.pass_context
def videos_popular(ctx: click.Context, per_page: int, page: int) -> None:
    """List popular videos."""
    with handle_errors(), client_from_context(ctx) as client:
        result = client.popular_videos(per_page, page)

    if wants_json(ctx):
        echo_json(result.to_dict())
        return

    print_video_page(result, title="Popular videos")
    print_quota(client)


@videos.command("get")
@click.argument("video_id", type=int)
@click.pass_context
def videos_get(ctx: click.Context, video_id: int) -> None:
    """Show the video with VIDEO_ID."""
    with handle_errors(), client_from_context(ctx) as client:
        video = client.get_video(video_id)

    if wants_json(ctx):
        echo_json(video.to_dict())
        return

    print_video(video)
    print_quota(client)


@videos.command("random")
@click.pass_context
def videos_random(ctx: click.Context) -> None:
    """Show a random popular video."""
    with handle_errors(), client_from_context(ctx) as client:
        video = client.get_random_video()

    if wants_json(ctx):
        echo_json(video.to_dict())
        return

    print_video(video)
    print_quota(client)
