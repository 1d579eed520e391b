"""
Command-line interface for Actor Search.

Provides commands for:
- search: Search people by name and optionally open one result's details
- details: Show the profile and filmography of a person by name
- test: Check the connection to TMDB
"""

import argparse
import sys
from typing import Optional

from .client import TMDBClient
from .config import Config
from .detail import DetailPipeline
from .presentation import ConsolePresenter
from .search import SearchPipeline
from .utils import get_user_choice, print_header


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with all commands."""
    parser = argparse.ArgumentParser(
        prog="actor_search",
        description="Actor Search - Find actors on TMDB and browse their filmography",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Search and pick a result interactively
  python -m actor_search search "Tom Hanks"

  # Search and open the second result directly
  python -m actor_search search "Tom Hanks" --select 2

  # Show details for a name
  python -m actor_search details "Meryl Streep"

  # Check API connectivity
  python -m actor_search test
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    search_parser = subparsers.add_parser(
        "search",
        help="Search TMDB for people by name",
    )
    search_parser.add_argument(
        "query",
        help="Actor or actress name",
    )
    selection = search_parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--select",
        type=int,
        metavar="N",
        help="Show details for result N (1-based) without prompting",
    )
    selection.add_argument(
        "--no-prompt",
        action="store_true",
        help="Only list results, do not ask for a selection",
    )

    details_parser = subparsers.add_parser(
        "details",
        help="Show a person's profile and filmography",
    )
    details_parser.add_argument(
        "name",
        help="Exact name as shown in search results",
    )

    subparsers.add_parser(
        "test",
        help="Test TMDB API connection",
    )

    return parser


def cmd_search(
    search_pipeline: SearchPipeline,
    detail_pipeline: DetailPipeline,
    presenter: ConsolePresenter,
    args,
) -> int:
    """Run search command."""
    result_set = search_pipeline.search(args.query)
    view = presenter.render_result_set(result_set)

    if result_set.error is not None:
        return 1
    if not view.cards or args.no_prompt:
        return 0

    if args.select is not None:
        idx = args.select - 1
        if not 0 <= idx < len(view.cards):
            print(f"\n--select must be between 1 and {len(view.cards)}")
            return 1
    else:
        idx = get_user_choice(
            "Select a person to see details:",
            [card.name for card in view.cards],
        )
        if idx is None:
            print("Cancelled.")
            return 0

    outcome = detail_pipeline.load(view.cards[idx].name)
    detail_view = presenter.render_person_detail(outcome)
    return 0 if detail_view.found else 1


def cmd_details(detail_pipeline: DetailPipeline, presenter: ConsolePresenter, args) -> int:
    """Run details command."""
    print_header("Actor Details")
    outcome = detail_pipeline.load(args.name)
    view = presenter.render_person_detail(outcome)
    return 0 if view.found else 1


def cmd_test(client: TMDBClient) -> int:
    """Run API connection test."""
    print_header("TMDB Connection Test")
    if client.test_connection():
        print("\nConnection OK")
        return 0
    print("\nConnection FAILED (check API_KEY and BASE_URL)")
    return 1


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 0

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}")
        print("\nMake sure your .env file contains:")
        print("  API_KEY=<your_tmdb_api_key>")
        print("  REQUEST_TIMEOUT=<seconds> (optional)")
        return 1

    client = TMDBClient(config)
    presenter = ConsolePresenter(config)
    search_pipeline = SearchPipeline(client, config)
    detail_pipeline = DetailPipeline(client, config)

    try:
        if parsed_args.command == "search":
            return cmd_search(search_pipeline, detail_pipeline, presenter, parsed_args)
        elif parsed_args.command == "details":
            return cmd_details(detail_pipeline, presenter, parsed_args)
        elif parsed_args.command == "test":
            return cmd_test(client)
        else:
            parser.print_help()
            return 0

    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
