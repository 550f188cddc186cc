#!/usr/bin/env python
"""
Run the DonorLink API server.

Command line flags override the matching settings from the environment
or `.env`. A `--log-level` override is exported as LOG_LEVEL so the app
(and reload workers, which re-read the environment) log at that level too.

Usage:
    python run_api.py
    python run_api.py --reload --log-level debug  # Development mode
    python run_api.py --host 127.0.0.1 --port 9000
"""

import argparse
import os
from typing import Any, Optional, Sequence

import uvicorn

from shared.config import Settings, get_settings

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run DonorLink API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        help="Log level for the server and the app (default: LOG_LEVEL setting)",
    )
    return parser


def server_options(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    """Merge parsed flags over settings into uvicorn.run keyword arguments."""
    return {
        "host": args.host or settings.host,
        "port": args.port if args.port is not None else settings.port,
        "reload": args.reload or settings.reload,
        "log_level": (args.log_level or settings.log_level).lower(),
    }


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if args.log_level:
        os.environ["LOG_LEVEL"] = args.log_level.upper()
        get_settings.cache_clear()

    uvicorn.run("api:app", **server_options(args, get_settings()))


if __name__ == "__main__":
    main()
