#!/usr/bin/env python3
"""Command-line interface for idea-scout competitor discovery.

Usage:
    # Ranked competitors for an idea
    python -m idea_scout "AI-powered study app for college students"

    # JSON output
    python -m idea_scout --format json "Social network for dog owners"

    # Show the prompt block the analysis step would receive
    python -m idea_scout --format prompt "Meal planning app for busy parents"
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import TextIO

from idea_scout import __version__
from idea_scout.pipeline import extract_keywords, find_competitors
from idea_scout.prompts import format_competitor_context
from idea_scout.types.competitor import Competitor

# =============================================================================
# Output Formatting
# =============================================================================


class Colors:
    """ANSI color codes for terminal output."""

    BLUE = "\033[94m"
    CYAN = "\033[96m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BOLD = "\033[1m"
    DIM = "\033[2m"
    RESET = "\033[0m"


def supports_color() -> bool:
    """Check if terminal supports colors."""
    return (
        hasattr(sys.stdout, "isatty")
        and sys.stdout.isatty()
        and os.environ.get("TERM") != "dumb"
        and os.environ.get("NO_COLOR") is None
    )


def colorize(text: str, color: str) -> str:
    """Apply color if supported."""
    if supports_color():
        return f"{color}{text}{Colors.RESET}"
    return text


def score_color(score: int) -> str:
    if score >= 80:
        return Colors.GREEN
    if score >= 60:
        return Colors.YELLOW
    return Colors.RED


def format_competitors_pretty(
    competitors: list[Competitor], query: str, file: TextIO | None = None
) -> None:
    """Format competitors for human-readable terminal output."""
    file = file or sys.stdout
    print(colorize("=" * 60, Colors.DIM), file=file)
    print(colorize(f"Query: {query or '(none)'}", Colors.BOLD), file=file)
    print(colorize("=" * 60, Colors.DIM), file=file)
    print(file=file)

    if not competitors:
        print(colorize("No competitors found.", Colors.YELLOW), file=file)
        print(file=file)
        print(colorize("=" * 60, Colors.DIM), file=file)
        return

    for i, competitor in enumerate(competitors, start=1):
        score = colorize(f"{competitor.relevance_score}/100", score_color(competitor.relevance_score))
        print(f"{i}. {colorize(competitor.name, Colors.CYAN + Colors.BOLD)} ({score})", file=file)
        print(f"   {competitor.description}", file=file)
        print(colorize(f"   {competitor.url}", Colors.DIM), file=file)
        print(file=file)

    print(colorize("=" * 60, Colors.DIM), file=file)


def format_competitors_json(
    competitors: list[Competitor], query: str, file: TextIO | None = None
) -> None:
    """Format competitors as JSON."""
    file = file or sys.stdout
    payload = {
        "query": query,
        "competitors": [c.model_dump(by_alias=True) for c in competitors],
    }
    print(json.dumps(payload, indent=2), file=file)


# =============================================================================
# Main Entry Point
# =============================================================================


def run_search(idea: str, output_format: str = "pretty") -> int:
    """Search competitors for one idea and print them.

    Returns:
        Exit code (0 for success, 130 if interrupted).
    """
    try:
        query = extract_keywords(idea)
        competitors = find_competitors(idea)
    except KeyboardInterrupt:
        print("\n\nInterrupted.", file=sys.stderr)
        return 130

    if output_format == "json":
        format_competitors_json(competitors, query)
    elif output_format == "prompt":
        print(format_competitor_context(competitors))
    else:
        format_competitors_pretty(competitors, query)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code.
    """
    parser = argparse.ArgumentParser(
        prog="idea-scout",
        description="idea-scout: find real competitors for a product idea",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s "AI-powered study app for college students"
  %(prog)s --format json "Social network for dog owners" > competitors.json
  %(prog)s --show-query "Meal planning app for busy parents"
        """,
    )

    parser.add_argument(
        "idea",
        nargs="?",
        help="Product idea description",
    )

    parser.add_argument(
        "-f",
        "--format",
        choices=["pretty", "json", "prompt"],
        default="pretty",
        help="Output format (default: pretty)",
    )

    parser.add_argument(
        "--show-query",
        action="store_true",
        help="Only print the search query extracted from the idea",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"idea-scout {__version__}",
    )

    args = parser.parse_args(argv)

    if not args.idea:
        parser.print_help()
        return 0

    if args.show_query:
        print(extract_keywords(args.idea))
        return 0

    return run_search(args.idea, output_format=args.format)


if __name__ == "__main__":
    sys.exit(main())
