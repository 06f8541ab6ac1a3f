"""File query routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_snapshot
from ..schemas.queries import FileListResponse
from ...core.snapshot import FileEntry
from ...core.snapshot import queries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["files"])


@router.get("", response_model=FileListResponse)
async def list_files(
    language: Optional[str] = Query(default=None),
    domain: Optional[str] = Query(default=None, description="Substring of a file domain"),
    layer: Optional[str] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=0),
    snapshot=Depends(get_snapshot),
):
    """List files with optional filtering."""
    files, total = queries.list_files(
        snapshot, language=language, domain=domain, layer=layer, limit=limit,
    )
    return FileListResponse(files=files, total=total)


@router.get("/{path:path}", response_model=FileEntry)
async def get_file(path: str, snapshot=Depends(get_snapshot)):
    """Get a file by path (exact, then suffix match)."""
    entry = queries.find_file(snapshot, path)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"File not found: {path}")
    return entry
