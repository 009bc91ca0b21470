from __future__ import annotations

import logging
import os
import sys

import uvicorn

from checkout_api.adapters.inbound.cli import run_cli
from checkout_api.bootstrap import build_place_checkout

LOG_LEVEL_ENV = "CHECKOUT_API_LOG_LEVEL"


def _configure_logging(default: str) -> None:
    logging.basicConfig(
        level=os.environ.get(LOG_LEVEL_ENV, default).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    argv = argv or sys.argv[1:]
    if not argv:
        print("usage: checkout-cli '<json>'")
        return 2

    _configure_logging("WARNING")
    svc = build_place_checkout()
    return run_cli(svc, argv[0])


def serve() -> None:
    _configure_logging("INFO")
    uvicorn.run(
        "checkout_api.asgi:app",
        host=os.environ.get("CHECKOUT_API_HOST", "0.0.0.0"),
        port=int(os.environ.get("CHECKOUT_API_PORT", "8000")),
        reload=False,
    )


if __name__ == "__main__":
    raise SystemExit(main())
