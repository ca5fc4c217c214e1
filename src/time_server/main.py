"""Entrypoint: serve over HTTP for online deployment, stdio otherwise."""

from __future__ import annotations

import argparse
import asyncio
import os

from .logging import configure_logging
from .settings import TimeServerSettings, get_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the MCP time server")
    parser.add_argument("--http", action="store_true", help="Serve HTTP instead of stdio")
    parser.add_argument("--host", default=None, help="HTTP bind host")
    parser.add_argument("--port", type=int, default=None, help="HTTP bind port")
    return parser


def use_http(args: argparse.Namespace, settings: TimeServerSettings) -> bool:
    # Hosting platforms signal an online deployment by setting PORT.
    return args.http or settings.http_mode or "PORT" in os.environ


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if use_http(args, settings):
        import uvicorn

        uvicorn.run(
            "time_server.server:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
            reload=False,
        )
        return

    from .stdio import run

    asyncio.run(run())


if __name__ == "__main__":
    main()
