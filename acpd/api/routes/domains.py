"""Domain and constraint query routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..deps import get_snapshot
from ..schemas.queries import ConstraintResponse, DomainListResponse
from ...core.snapshot import DomainEntry
from ...core.snapshot import queries

logger = logging.getLogger(__name__)

router = APIRouter(tags=["domains"])


@router.get("/domains", response_model=DomainListResponse)
async def list_domains(snapshot=Depends(get_snapshot)):
    """List all domains."""
    domains = list(snapshot.domains.values())
    return DomainListResponse(domains=domains, total=len(domains))


@router.get("/domains/{name}", response_model=DomainEntry)
async def get_domain(name: str, snapshot=Depends(get_snapshot)):
    domain = queries.get_domain(snapshot, name)
    if domain is None:
        raise HTTPException(status_code=404, detail=f"Domain not found: {name}")
    return domain


@router.get("/constraints/{path:path}", response_model=ConstraintResponse)
async def get_constraints(path: str, snapshot=Depends(get_snapshot)):
    """Get constraints and lock level for a file path.

    Unknown paths are not an error: they simply carry no constraints.
    """
    normalized, constraints, lock_level = queries.get_constraints(snapshot, path)
    return ConstraintResponse(path=normalized, constraints=constraints, lock_level=lock_level)
