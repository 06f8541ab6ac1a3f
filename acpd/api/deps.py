"""FastAPI dependencies for acpd.

Provides the shared snapshot, primer engine and settings via FastAPI's
Depends() injection system.
"""

import logging
from typing import Optional

from fastapi import Depends, Request

from ..core.config import Settings
from ..core.primer import PrimerEngine
from ..core.snapshot import Snapshot, SnapshotStore, VarsFile

logger = logging.getLogger(__name__)


async def get_snapshot_store(request: Request) -> SnapshotStore:
    """Get SnapshotStore from app state."""
    return request.app.state.snapshot_store


async def get_snapshot(store: SnapshotStore = Depends(get_snapshot_store)) -> Snapshot:
    """Current snapshot reference for the duration of one request."""
    return store.snapshot


async def get_vars(store: SnapshotStore = Depends(get_snapshot_store)) -> Optional[VarsFile]:
    return store.vars


async def get_primer_engine(request: Request) -> PrimerEngine:
    """Get PrimerEngine from app state."""
    return request.app.state.primer_engine


async def get_settings(request: Request) -> Settings:
    """Get resolved Settings from app state."""
    return request.app.state.settings
