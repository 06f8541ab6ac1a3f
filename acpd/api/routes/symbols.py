"""Symbol query routes."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_snapshot
from ..schemas.queries import SymbolListResponse
from ...core.snapshot import SymbolEntry
from ...core.snapshot import queries

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/symbols", tags=["symbols"])


@router.get("", response_model=SymbolListResponse)
async def list_symbols(
    file: Optional[str] = Query(default=None, description="Substring of the defining file path"),
    symbol_type: Optional[str] = Query(default=None, alias="type", description="Symbol type, case-insensitive"),
    exported: Optional[bool] = Query(default=None),
    limit: Optional[int] = Query(default=None, ge=0),
    snapshot=Depends(get_snapshot),
):
    """List symbols with optional filtering."""
    symbols, total = queries.list_symbols(
        snapshot, file=file, symbol_type=symbol_type, exported=exported, limit=limit,
    )
    return SymbolListResponse(symbols=symbols, total=total)


@router.get("/{name}", response_model=SymbolEntry)
async def get_symbol(name: str, snapshot=Depends(get_snapshot)):
    """Get a specific symbol by name."""
    symbol = queries.get_symbol(snapshot, name)
    if symbol is None:
        raise HTTPException(status_code=404, detail=f"Symbol not found: {name}")
    return symbol
