"""Aggregate routes: project stats, directory map and variable expansion."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from ..deps import get_snapshot, get_vars
from ..schemas.queries import ExpandedVariable, MapResponse, StatsResponse
from ...core.constants import DEFAULT_MAP_DEPTH
from ...core.snapshot import queries

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(snapshot=Depends(get_snapshot)):
    """Get project statistics."""
    return StatsResponse(**queries.get_stats(snapshot))


@router.get("/map", response_model=MapResponse)
async def get_map(
    depth: int = Query(default=DEFAULT_MAP_DEPTH, ge=0),
    snapshot=Depends(get_snapshot),
):
    """Get the directory structure, ``depth`` levels deep."""
    return MapResponse(**queries.build_map(snapshot, max_depth=depth))


@router.get("/vars/{name}/expand", response_model=ExpandedVariable)
async def expand_variable(name: str, vars_file=Depends(get_vars)):
    """Return the definition behind a ``$variable`` reference.

    The stored value is returned as is; references to other variables
    inside it are not expanded.
    """
    var = queries.get_variable(vars_file, name)
    if var is None:
        raise HTTPException(status_code=404, detail=f"Variable not found: {name}")

    return ExpandedVariable(
        name=name,
        expanded=var.value,
        description=var.description,
        source=var.source,
        lines=var.lines,
    )
