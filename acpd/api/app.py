"""FastAPI application factory for acpd.

Creates and configures the FastAPI app with CORS and all route modules
registered. The snapshot store and primer engine are built by the caller
and shared through ``app.state``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..core.config import Settings
from ..core.primer import PrimerEngine
from ..core.snapshot import SnapshotStore

logger = logging.getLogger(__name__)


def create_app(
    snapshot_store: SnapshotStore,
    primer_engine: PrimerEngine,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        snapshot_store: Loaded SnapshotStore
        primer_engine: PrimerEngine over a validated catalog
        settings: Resolved Settings (defaults for the store's project root if None)

    Returns:
        Configured FastAPI application
    """
    if settings is None:
        settings = Settings(project_root=snapshot_store.project_root)

    app = FastAPI(
        title="acpd API",
        description="Read-only code intelligence daemon",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store shared dependencies on app state
    app.state.snapshot_store = snapshot_store
    app.state.primer_engine = primer_engine
    app.state.settings = settings

    # Register routers
    from .routes.primer import router as primer_router
    from .routes.symbols import router as symbols_router
    from .routes.files import router as files_router
    from .routes.graph import router as graph_router
    from .routes.domains import router as domains_router
    from .routes.stats import router as stats_router

    app.include_router(primer_router)
    app.include_router(symbols_router)
    app.include_router(files_router)
    app.include_router(graph_router)
    app.include_router(domains_router)
    app.include_router(stats_router)

    logger.info("FastAPI app created with all routes registered")
    return app
