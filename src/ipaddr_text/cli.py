"""CLI entry point for ipaddr-text."""

import argparse
import logging
import sys

from dotenv import load_dotenv

from ipaddr_text import __version__
from ipaddr_text.config import Config
from ipaddr_text.errors import ParseError
from ipaddr_text.query.engine import QueryEngine
from ipaddr_text.report import format_diagnostics

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        argv: Argument list to parse (defaults to sys.argv[1:]).
    """
    parser = argparse.ArgumentParser(
        prog="ipaddr-text",
        description="Parse an IPv4 or IPv6 address and publish a query record",
    )
    parser.add_argument(
        "address",
        help="IP address in dotted-quad or colon-hex notation",
    )
    parser.add_argument(
        "--no-publish",
        action="store_true",
        help="Do not send the query record even if a collector is configured",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for ipaddr-text CLI."""
    args = parse_args(argv)

    load_dotenv()

    try:
        config = Config.from_env()
    except ValueError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(1)

    config.setup_logging()
    logger.debug("Config: %s", config)

    engine = QueryEngine(config, publish=not args.no_publish)

    try:
        outcome = engine.run(args.address)
    except ParseError as exc:
        print(format_diagnostics(exc.text, exc.diagnostics), file=sys.stderr)
        sys.exit(1)
    finally:
        engine.close()

    print(f"{outcome.timestamp} {outcome.address} {outcome.address.hex()}")
