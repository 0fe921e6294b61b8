# main.py

"""Entry point for the QuickFind backend (API server or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("quickfind.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="quickfind",
        description="Product search backend scraping Daraz listings.",
        epilog="With no options the HTTP API server is started.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--search",
        default=None,
        metavar="QUERY",
        help="Run one search and print the results.",
    )
    mode.add_argument(
        "--product",
        default=None,
        metavar="ID",
        help="Fetch one product's details and print them.",
    )
    mode.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Run a connectivity health check on the store.",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --search/--product (default: json).",
    )
    parser.add_argument(
        "--host",
        default=Settings.HOST,
        help=f"Bind address for the server (default: {Settings.HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Settings.PORT,
        help=f"Port for the server (default: {Settings.PORT}, env PORT).",
    )
    return parser


def _run_server(host: str, port: int) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    from src.api.app import app

    logger.info("Starting server on %s:%d", host, port)
    try:
        uvicorn.run(
            app,
            host=host,
            port=port,
            log_level=Settings.LOG_LEVEL,
            log_config=None,
            timeout_keep_alive=Settings.KEEP_ALIVE_TIMEOUT,
        )
    except Exception:
        logger.critical("Fatal error while serving", exc_info=True)
        raise
    finally:
        logger.info("QuickFind server shutting down")


def _run_search(args: argparse.Namespace) -> None:
    from src.cli.runner import cli_search

    sys.exit(cli_search(args.search, args.output_format))


def _run_product(args: argparse.Namespace) -> None:
    from src.cli.runner import cli_product

    sys.exit(cli_product(args.product, args.output_format))


def _run_health_check() -> None:
    """Run store connectivity health check."""
    from src.cli.runner import run_health_check

    exit_code = asyncio.run(run_health_check())
    sys.exit(exit_code)


def main() -> None:
    """Route to the API server (no mode flag) or a headless command."""
    parser = _build_parser()
    args = parser.parse_args()

    headless = (
        args.search is not None or args.product is not None or args.health
    )
    log_file = setup_logging(
        logging.WARNING if headless else logging.INFO
    )
    logger.info("QuickFind starting, log file: %s", log_file)

    if args.health:
        _run_health_check()
    elif args.search is not None:
        _run_search(args)
    elif args.product is not None:
        _run_product(args)
    else:
        _run_server(args.host, args.port)


if __name__ == "__main__":
    main()
