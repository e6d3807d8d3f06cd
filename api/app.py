"""FastAPI application factory."""
import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.config import CATALOG_PATH
from api.routes import session, tests
from api.services.session_service import SessionStore
from catalog import load_catalog
from models import TestCatalog

logger = logging.getLogger(__name__)


def create_app(
    catalog: TestCatalog | None = None,
    catalog_path: Path | None = None,
) -> FastAPI:
    """
    Build the application around one session store.

    The catalog is loaded eagerly so a broken catalog file stops startup.
    """
    if catalog is None:
        catalog = load_catalog(catalog_path or CATALOG_PATH)

    app = FastAPI(title="Quiz Pager API")
    app.state.session_store = SessionStore(catalog)

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(tests.router)
    app.include_router(session.router)

    logger.info("Session started on test %r", catalog.first.id)
    return app
