"""Convenience entrypoint to run the relay over stdio."""

from __future__ import annotations

import asyncio

from time_server.logging import configure_logging

from .server import run
from .settings import get_settings


def main() -> None:
    configure_logging(get_settings().log_level)
    asyncio.run(run())


if __name__ == "__main__":
    main()
