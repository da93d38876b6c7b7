"""FastAPI application -- protolint entrypoint."""

from __future__ import annotations

import json
import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import protolint.deps as deps
from protolint.api.catalog import router as catalog_router
from protolint.api.format import router as format_router
from protolint.api.validate import router as validate_router

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_BYTES = 1024 * 1024


def _load_options() -> dict[str, Any]:
    """Load options from PROTOLINT_OPTIONS_PATH or fall back to env vars."""
    opts_path = os.environ.get("PROTOLINT_OPTIONS_PATH", "/data/options.json")
    defaults: dict[str, Any] = {
        "max_content_bytes": int(
            os.environ.get("PROTOLINT_MAX_CONTENT_BYTES", str(DEFAULT_MAX_CONTENT_BYTES))
        ),
        "cors_allow_origins": [
            origin.strip()
            for origin in os.environ.get("PROTOLINT_CORS_ALLOW_ORIGINS", "*").split(",")
            if origin.strip()
        ]
        or ["*"],
    }
    if Path(opts_path).exists():
        defaults.update(json.loads(Path(opts_path).read_text()))
    return defaults


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: configure logging and publish options."""
    log_level = logging.DEBUG if os.environ.get("PROTOLINT_DEV_MODE") else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    deps._options = _options
    logger.info("protolint starting with options: %s", _options)

    yield

    deps._options = None


_options = _load_options()

app = FastAPI(
    title="protolint",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(_options["cors_allow_origins"]),
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(validate_router)
app.include_router(format_router)
app.include_router(catalog_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
