"""
Command line entry point for the Luhn Validation Server.

Usage:
    python -m luhn_server [--host HOST] [--port PORT] [--log-level LEVEL]
"""

import argparse
from typing import List, Optional

import uvicorn

from .config import Settings
from .main import create_app


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line overrides for the server settings."""
    parser = argparse.ArgumentParser(
        prog="luhn_server",
        description="Serve the Luhn card number validation endpoint."
    )
    parser.add_argument("--host", help="Address to bind (default: SERVER_HOST)")
    parser.add_argument("--port", type=int, help="TCP port to listen on (default: SERVER_PORT)")
    parser.add_argument("--log-level", help="Logging level (default: LOG_LEVEL)")
    return parser.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Load settings from the environment, applying command line overrides."""
    overrides = {}
    if args.host is not None:
        overrides["server_host"] = args.host
    if args.port is not None:
        overrides["server_port"] = args.port
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return Settings(**overrides)


def main(argv: Optional[List[str]] = None) -> None:
    """Build the app and serve it until interrupted."""
    settings = build_settings(parse_args(argv))
    app = create_app(settings)

    uvicorn.run(
        app,
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
