"""Graph API routes: callers and callees from the snapshot call graph."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_snapshot
from ..schemas.queries import GraphResponse
from ...core.snapshot import queries

logger = logging.getLogger(__name__)

router = APIRouter(tags=["graph"])


@router.get("/callers/{symbol}", response_model=GraphResponse)
async def get_callers(symbol: str, snapshot=Depends(get_snapshot)):
    """Get symbols that call the given symbol (reverse graph)."""
    callers = queries.get_callers(snapshot, symbol)
    if callers is None:
        raise HTTPException(status_code=404, detail=f"Symbol not found: {symbol}")
    return GraphResponse(symbol=symbol, relationships=callers, count=len(callers))


@router.get("/callees/{symbol}", response_model=GraphResponse)
async def get_callees(symbol: str, snapshot=Depends(get_snapshot)):
    """Get symbols the given symbol calls (forward graph)."""
    callees = queries.get_callees(snapshot, symbol)
    if callees is None:
        raise HTTPException(status_code=404, detail=f"Symbol not found: {symbol}")
    return GraphResponse(symbol=symbol, relationships=callees, count=len(callees))
