"""Audia CLI entry points.
This module exposes monitor commands for the play-log feed.
It maps argparse commands onto SDK calls.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from dataclasses import replace
from typing import Any, Sequence

from core.config import AudiaConfig
from core.constants import ALL_HOURS, ANY_VALUE, DEFAULT_HISTORY_LIMIT
from core.errors import AudiaExportError
from core.types import DashboardView, FilterCriteria, GenreStat
from serve.refresh_loop import run_refresh_loop
from store.feed_sdk import AudiaClient
from store.playlist_export import format_track_line


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="audia", description="Radio play-log monitor")
    parser.add_argument("--feed-url", help="Override AUDIA_FEED_URL for this command")
    parser.add_argument("--source", help="Local CSV export to read instead of the feed URL")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_now_command(subparsers)
    _add_genres_command(subparsers)
    _add_dates_command(subparsers)
    _add_export_command(subparsers)
    _add_watch_command(subparsers)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the Audia CLI.

    Args:
        argv: Optional argument vector.

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    client = _build_client(args)
    if args.command == "watch":
        return _run_watch_command(client, args)
    if not client.refresh(args.source):
        print(f"Could not load feed: {client.state.last_error}", file=sys.stderr)
        return 1
    if args.command == "now":
        return _run_now_command(client, args)
    if args.command == "genres":
        return _run_genres_command(client)
    if args.command == "dates":
        return _run_dates_command(client)
    if args.command == "export":
        return _run_export_command(client, args)
    parser.error(f"Unsupported command: {args.command}")
    return 2


def _build_client(args: argparse.Namespace) -> AudiaClient:
    """Build SDK client with optional feed override and initial criteria.

    Args:
        args: Parsed CLI args.

    Returns:
        Configured SDK client.
    """
    config = AudiaConfig.from_env()
    if args.feed_url:
        config = replace(config, feed_url=args.feed_url)
    client = AudiaClient(config)
    client.state.replace_criteria(_build_criteria(args, config))
    return client


def _build_criteria(args: argparse.Namespace, config: AudiaConfig) -> FilterCriteria:
    """Translate filter flags into criteria.

    Args:
        args: Parsed CLI args.
        config: Runtime config providing the default station.

    Returns:
        Criteria; date stays None so the newest date is picked after loading.
    """
    hour = args.hour
    if hour is not None and hour != ALL_HOURS:
        hour = hour.zfill(2)
    return FilterCriteria(
        station=args.station or config.default_station,
        date=args.date,
        hour_bucket=hour,
        search_term=args.search or "",
        genre=args.genre,
    )


def _run_now_command(client: AudiaClient, args: argparse.Namespace) -> int:
    """Handle now command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    view = client.dashboard(history_limit=args.limit)
    _print_criteria(view)
    if view.now_playing is None:
        print("No tracks match the current filters.")
        return 0
    print(f"ON AIR\t{format_track_line(view.now_playing)}")
    for track in view.recent_history:
        print(f"\t{format_track_line(track)}")
    remaining = len(view.display_view) - 1 - len(view.recent_history)
    if remaining > 0:
        print(f"... {remaining} more")
    return 0


def _run_genres_command(client: AudiaClient) -> int:
    """Handle genres command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    stats = client.genre_stats()
    if not stats:
        print("No genre data for the current filters.")
        return 0
    for stat in stats:
        print(_format_genre_stat(stat))
    return 0


def _run_dates_command(client: AudiaClient) -> int:
    """Handle dates command.

    Args:
        client: SDK client.

    Returns:
        Exit code.
    """
    for date in client.dashboard().available_dates:
        print(date)
    return 0


def _run_export_command(client: AudiaClient, args: argparse.Namespace) -> int:
    """Handle export command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """
    try:
        document_path = client.export_pdf(args.output_dir)
    except AudiaExportError as error:
        print(str(error), file=sys.stderr)
        return 1
    print(document_path)
    return 0


def _run_watch_command(client: AudiaClient, args: argparse.Namespace) -> int:
    """Handle watch command.

    Args:
        client: SDK client.
        args: Parsed CLI args.

    Returns:
        Exit code.
    """

    def _print_update(updated_client: AudiaClient, applied: bool) -> None:
        if not applied:
            print(f"refresh failed: {updated_client.state.last_error}", file=sys.stderr)
        current = updated_client.dashboard().now_playing
        print(format_track_line(current) if current else "-", flush=True)

    try:
        asyncio.run(
            run_refresh_loop(
                client,
                args.interval,
                source=args.source,
                iterations=args.iterations,
                on_update=_print_update,
            )
        )
    except KeyboardInterrupt:
        return 130
    return 0


def _print_criteria(view: DashboardView) -> None:
    criteria = view.criteria
    print(
        f"{criteria.station or ANY_VALUE}\t"
        f"{criteria.date or ANY_VALUE}\t"
        f"{criteria.hour_bucket or ALL_HOURS}\t"
        f"{len(view.display_view)} tracks"
    )


def _format_genre_stat(stat: GenreStat) -> str:
    line = f"{stat.name}\t{stat.count}\t{stat.percentage}%"
    if stat.merged_names:
        line += f"\t{', '.join(stat.merged_names)}"
    return line


def _add_filter_arguments(parser: Any) -> None:
    """Register the shared filter flags."""
    parser.add_argument("--station", help="Station label, or 'any'")
    parser.add_argument("--date", help="Play date YYYY-MM-DD, or 'any'; defaults to newest")
    parser.add_argument("--hour", help="Hour bucket 00-23, or 'all'")
    parser.add_argument("--search", help="Case-insensitive artist/title search")
    parser.add_argument("--genre", help="Exact genre, or 'any'")


def _add_now_command(subparsers: Any) -> None:
    """Register now subcommand."""
    parser = subparsers.add_parser("now", help="Show the track on air and recent history")
    _add_filter_arguments(parser)
    parser.add_argument(
        "--limit",
        type=int,
        default=DEFAULT_HISTORY_LIMIT,
        help="Visible entries including the track on air",
    )


def _add_genres_command(subparsers: Any) -> None:
    """Register genres subcommand."""
    parser = subparsers.add_parser("genres", help="Show the genre distribution")
    _add_filter_arguments(parser)


def _add_dates_command(subparsers: Any) -> None:
    """Register dates subcommand."""
    parser = subparsers.add_parser("dates", help="List play dates for the station")
    _add_filter_arguments(parser)


def _add_export_command(subparsers: Any) -> None:
    """Register export subcommand."""
    parser = subparsers.add_parser("export", help="Export the filtered playlist as PDF")
    _add_filter_arguments(parser)
    parser.add_argument("--output-dir", required=True, help="Directory for the PDF report")


def _add_watch_command(subparsers: Any) -> None:
    """Register watch subcommand."""
    parser = subparsers.add_parser("watch", help="Refresh periodically and print the track on air")
    _add_filter_arguments(parser)
    parser.add_argument("--interval", type=float, help="Seconds between refreshes")
    parser.add_argument("--iterations", type=int, help="Stop after this many refreshes")
