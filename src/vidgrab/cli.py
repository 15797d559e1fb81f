"""
Command-line interface for vidgrab.

Usage:
  vidgrab "https://youtube.com/watch?v=xxx"          # Default mode
  vidgrab -q "https://youtube.com/watch?v=xxx"       # One-line summary
  vidgrab --json "https://x.com/user/status/123"     # JSON output
  vidgrab -o result.json "https://vimeo.com/123"     # Save JSON report
  vidgrab --open 1 "https://youtube.com/watch?v=xxx" # Open option 1 in a browser
  vidgrab --providers                                # Show provider order
"""

from __future__ import annotations

import argparse
import logging
import sys

from vidgrab._version import __version__
from vidgrab.config import get_config
from vidgrab.delivery import deliver
from vidgrab.errors import ValidationError
from vidgrab.formatters import format_default, format_json, format_quiet, to_view_model
from vidgrab.formatters.default import PLACEHOLDER_NOTICE
from vidgrab.models import RenditionView
from vidgrab.providers import print_provider_status
from vidgrab.resolve import resolve_sync


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vidgrab",
        description="Find downloadable renditions of a social/video platform URL.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (default)    Video details and every download option
  --json       Render model as JSON
  -q/--quiet   Quick summary only

Downloads:
  --open N     Open download option N with the system browser

Utilities:
  --providers  Show provider order and enabled status

Configuration:
  VIDGRAB_TIMEOUT     Seconds allowed per provider (default 15)
  VIDGRAB_PROVIDERS   Comma separated provider names to enable
  ~/.vidgrab/config.yaml
        """,
    )
    parser.add_argument("url", nargs="?", help="Video page URL")
    parser.add_argument("-o", "--output", help="Save render model to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--open",
        metavar="N",
        type=int,
        help="Open download option N (1-based) with the system browser",
    )
    parser.add_argument(
        "--timeout",
        metavar="SECONDS",
        type=float,
        help="Seconds allowed per provider attempt",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log provider attempts")

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--json", action="store_true", help="Print JSON output")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument(
        "--providers",
        action="store_true",
        help="Show provider order and enabled status",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point for vidgrab CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Handle --providers mode (no URL required)
    if args.providers:
        print_provider_status(get_config())
        return 0

    if args.url is None:
        parser.error("the following arguments are required: url")

    try:
        record = resolve_sync(args.url, timeout=args.timeout)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    view = to_view_model(record, args.url.strip())

    if args.json:
        print(format_json(view))
    elif args.quiet:
        print(format_quiet(view))
    else:
        print(format_default(view))

    if view.is_placeholder and (args.json or args.quiet):
        print(f"Note: {PLACEHOLDER_NOTICE}", file=sys.stderr)

    # JSON export
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json(view))
        print(f"Report saved to: {args.output}")

    if args.open is not None:
        return open_option(view.renditions, args.open)

    return 0


def open_option(options: list[RenditionView], number: int) -> int:
    """Deliver the 1-based download option; return the exit code."""
    if not 1 <= number <= len(options):
        print(f"Error: no download option {number} (1-{len(options)})", file=sys.stderr)
        return 1

    option = options[number - 1]
    result = deliver(option.source_url, option.filename)
    if not result.ok:
        print(f"Error: {result.message}", file=sys.stderr)
        return 1

    print(f"Opened {option.label} ({option.format_label}) as {result.filename}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
