"""
Command line entry point.

Usage:
    python -m api                      # listen on $PORT (default 3000)
    python -m api --port 8080 --log-level debug

uvicorn owns signal handling: on SIGTERM/SIGINT it stops accepting new
connections, lets in-flight requests finish, runs the lifespan shutdown and
exits.  Startup failures such as a port already in use exit non-zero.
"""
from __future__ import annotations

import argparse
from typing import Optional, Sequence

import uvicorn

from .config import Settings
from .main import create_app


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cicd-demo", description="Run the CI/CD demo API server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="TCP port (default: %(default)s)")
    parser.add_argument("--log-level", default=settings.log_level, help="Log level (default: %(default)s)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    settings = settings.model_copy(
        update={"host": args.host, "port": args.port, "log_level": args.log_level}
    )
    uvicorn.run(
        create_app(settings),
        host=args.host,
        port=args.port,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
