"""Command-line interface for vapisim.

Provides the main entry point for serving the simulated appliance API
and for listing the resource paths it serves.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="vapisim",
        description="Simulated appliance management API",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: config/vapisim.yaml)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    serve_parser = subparsers.add_parser("serve", help="Start the simulator HTTP server")
    serve_parser.add_argument(
        "--host", type=str, default=None,
        help="Interface to bind (overrides server.host)",
    )
    serve_parser.add_argument(
        "--port", type=int, default=None,
        help="Port to listen on (overrides server.port)",
    )

    subparsers.add_parser("routes", help="List the simulated resource paths")

    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the vapisim CLI."""
    args = parse_args(argv)

    if args.command is None:
        parse_args(["--help"])
        return

    from vapisim.config.settings import load_settings
    from vapisim.simulator import create_app
    from vapisim.utils.logging import setup_logging

    settings = load_settings(args.config)

    if args.verbose:
        settings.logging.level = "DEBUG"

    setup_logging(settings.logging)

    if args.command == "serve":
        import uvicorn

        host = args.host if args.host is not None else settings.server.host
        port = args.port if args.port is not None else settings.server.port
        logger.info("Starting simulator on %s:%d", host, port)
        app = create_app(settings)
        uvicorn.run(app, host=host, port=port)

    elif args.command == "routes":
        app = create_app(settings)
        for path in app.state.service.paths:
            print(path)


if __name__ == "__main__":
    main()
