"""PokeServe — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PokeServeError → HTML error fragments
    - PokeAPI client created on startup and always closed on shutdown via lifespan
    - /static and /dist mounted only when the directories exist

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from pokeserve import __version__
from pokeserve.api.dependencies import (
    build_pokeapi_client,
    close_pokeapi_client,
    set_pokeapi_client,
)
from pokeserve.api.error_handlers import register_error_handlers
from pokeserve.api.routes import health, pages, pokemon, toggle
from pokeserve.config import Settings, get_settings
from pokeserve.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    set_pokeapi_client(build_pokeapi_client())
    logger.info("PokeServe started")
    try:
        yield
    finally:
        await close_pokeapi_client()
        logger.info("PokeServe shutting down")


def mount_static(app: FastAPI, settings: Settings) -> list[str]:
    """Mount /static and /dist for the directories that exist. Returns mounted paths."""
    mounted = []
    for mount_path, directory in (
        ("/static", settings.static_dir),
        ("/dist", settings.dist_dir),
    ):
        if not os.path.isdir(directory):
            logger.info(f"Skipping {mount_path}: {directory} not found")
            continue
        app.mount(
            mount_path, StaticFiles(directory=directory),
            name=mount_path.strip("/"),
        )
        mounted.append(mount_path)
    return mounted


app = FastAPI(title="PokeServe", version=__version__, lifespan=lifespan)

app.include_router(pages.router)
app.include_router(toggle.router)
app.include_router(pokemon.router)
app.include_router(health.router)

register_error_handlers(app)

mount_static(app, get_settings())
