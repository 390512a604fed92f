"""Run the HTTP app: ``python -m rustlabs.web``."""

from __future__ import annotations

import uvicorn

from rustlabs.data import ServiceConfig
from rustlabs.web.main import app


def main() -> None:
    config = ServiceConfig()
    uvicorn.run(app, host=config.host, port=config.port, log_level="info")


if __name__ == "__main__":
    main()
