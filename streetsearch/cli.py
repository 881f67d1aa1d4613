"""Command line entry for the street searcher.

Loads a road network file, prints the load summary, then prints the
shortest route between two endpoints:

    streetsearch roads.txt 1-1 4-4 --dot network.dot
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import get_config
from .container import Container
from .domain.errors import (
    InvalidWeightError,
    NetworkLoadError,
    RenderingError,
    UnknownEndpointError,
)
from .observability import configure_logging
from .services import StreetSearcherService

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streetsearch",
        description="Find the shortest route between two endpoints of a road network.",
    )
    parser.add_argument("network", type=Path, help="road network file")
    parser.add_argument("start", help="departure endpoint name")
    parser.add_argument("end", help="arrival endpoint name")
    parser.add_argument(
        "--dot",
        type=Path,
        default=None,
        metavar="PATH",
        help="also write the network as a Graphviz DOT file",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="override the configured log level",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    configure_logging(config.observability, level=args.log_level)

    container = Container.create_default(config, network_path=args.network)
    searcher: StreetSearcherService = container.resolve(StreetSearcherService)

    try:
        summary = searcher.load_network()
        print(searcher.format_summary(summary))

        result = searcher.find_shortest_path(args.start, args.end)
        print(searcher.format_result(result))

        if args.dot is not None:
            searcher.render_dot(args.dot)
            print(f"Network saved to: {args.dot}")
    except UnknownEndpointError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2
    except (NetworkLoadError, RenderingError, InvalidWeightError) as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
