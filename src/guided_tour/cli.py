"""Console entry point for running the tour pages."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from guided_tour.config import load_config
from guided_tour.console import configure_logging, heading
from guided_tour.exceptions import TourError
from guided_tour.pages import PAGES, get_page

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="guided-tour",
        description="Run the generics and protocols tour pages.",
    )
    parser.add_argument(
        "pages",
        nargs="*",
        metavar="PAGE",
        help="pages to run, in order (default: every page)",
    )
    parser.add_argument("--list", action="store_true", help="list page names and exit")
    parser.add_argument(
        "--no-color",
        dest="color",
        action="store_false",
        default=None,
        help="print headings without colour",
    )
    parser.add_argument("--log-level", help="logging level for the tour logger")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the selected pages and return the process exit status."""

    args = build_parser().parse_args(list(argv) if argv is not None else sys.argv[1:])

    try:
        config = load_config().with_overrides(color=args.color, log_level=args.log_level)
        configure_logging(config.log_level)

        if args.list:
            for name, _ in PAGES:
                print(name)
            return 0

        selected = [(name, get_page(name)) for name in args.pages] or list(PAGES)
    except TourError as exc:
        print(f"guided-tour: error: {exc}", file=sys.stderr)
        return 2

    for name, runner in selected:
        logger.debug("starting page %s", name)
        print(heading(name, color=config.color))
        runner()
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI passthrough only
    sys.exit(main())
