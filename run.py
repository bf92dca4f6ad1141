"""Entry point for the Review Board API.

This script builds the FastAPI application and serves it with
Uvicorn.  It is intended to be executed from the project root, for
example under Docker, where you only specify a single Python file to
run.

Configuration is read from environment variables (see
``review_board_api.app.core.config``).  Command-line options take
precedence over the environment.

Usage:
    python run.py --port 8080 --reviews-file ./reviews.json
"""
import argparse
import asyncio
import dataclasses
import logging
import sys
from typing import List, Optional

from uvicorn import Config, Server

from review_board_api.app.core.config import Settings, settings as env_settings
from review_board_api.app.main import create_app


logger = logging.getLogger(__name__)

# Exit status when the application cannot start (uvicorn uses the same).
STARTUP_FAILURE = 3


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Serve the Review Board API.")
    ap.add_argument("--host", help=f"Interface to bind (default: {env_settings.host})")
    ap.add_argument("--port", type=int, help=f"Port to listen on (default: {env_settings.port})")
    ap.add_argument("--reviews-file", help=f"JSON file holding the reviews (default: {env_settings.reviews_file})")
    ap.add_argument("--log-level", help=f"Logging level (default: {env_settings.log_level})")
    return ap.parse_args(argv)


def build_settings(args: argparse.Namespace) -> Settings:
    """Overlay command-line options on the environment settings."""
    overrides = {
        "host": args.host,
        "port": args.port,
        "reviews_file": args.reviews_file,
        "log_level": args.log_level,
    }
    return dataclasses.replace(
        env_settings, **{key: value for key, value in overrides.items() if value is not None}
    )


async def serve(settings: Settings) -> bool:
    """Serve the API until interrupted.

    Returns ``False`` if the server never started.  Depending on its
    version, uvicorn reports a failed application startup either that
    way or by raising ``SystemExit``.
    """
    app = create_app(settings)
    config = Config(app=app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    server = Server(config)
    logger.info("Server is listening on port %s...", settings.port)
    await server.serve()
    return server.started


def main(argv: Optional[List[str]] = None) -> int:
    settings = build_settings(parse_args(argv))
    try:
        started = asyncio.run(serve(settings))
    except KeyboardInterrupt:
        return 0
    except SystemExit as e:
        logger.error("Server startup failed (exit status %s)", e.code)
        return e.code if isinstance(e.code, int) and e.code else STARTUP_FAILURE
    return 0 if started else STARTUP_FAILURE


if __name__ == "__main__":
    sys.exit(main())
