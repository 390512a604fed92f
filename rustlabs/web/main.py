"""HTTP application entrypoint (composition-only)."""

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rustlabs.data import ServiceConfig
from rustlabs.web.routers import labs_router, system_router

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = FastAPI(title="Rust Labs")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ServiceConfig().cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(system_router)
app.include_router(labs_router)

__all__ = ["app"]
