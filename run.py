"""Generate heat pump quotes for the configured houses. Loads .env from project root."""

import argparse
import logging
import os
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), ".env"))

from heatquote import HeatQuote
from heatquote.config import load_settings


def confirm(message: str, default: bool = True) -> bool:
    """Ask a yes/no question on stdin. EOF or Ctrl-C counts as no."""
    suffix = " [Y/n] " if default else " [y/N] "
    try:
        answer = input(message + suffix).strip().lower()
    except (EOFError, KeyboardInterrupt):
        print()
        return False
    if not answer:
        return default
    return answer in ("y", "yes")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Heat Pump Quote Generator")
    parser.add_argument("--yes", "-y", action="store_true", help="Skip the confirmation prompt")
    parser.add_argument("--houses", help="Path to the houses JSON file")
    parser.add_argument("--heat-pumps", help="Path to the heat pumps JSON file")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    print("Heat Pump Quote Generator")
    if not args.yes and not confirm("Let's generate pump quotes!"):
        return 0

    try:
        settings = load_settings()
        if args.houses:
            settings = replace(settings, houses_file=Path(args.houses))
        if args.heat_pumps:
            settings = replace(settings, heat_pumps_file=Path(args.heat_pumps))
        app = HeatQuote(settings)
        quotes = app.generate()
    except Exception as e:
        print(f"Error generating quotes: {e}", file=sys.stderr)
        return 1

    app.print_display(quotes)
    return 0


if __name__ == "__main__":
    sys.exit(main())
