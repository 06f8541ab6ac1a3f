"""Primer API route.

``GET /primer`` returns a budget-constrained briefing for an agent about
to work on the project. Query parameters are normalized rather than
rejected: a missing, non-integer or negative budget falls back to the
configured default, and an empty capability list means "unrestricted".
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_primer_engine, get_settings, get_snapshot
from ..schemas.primer import PrimerResponse
from ...core.primer import parse_capabilities

logger = logging.getLogger(__name__)

router = APIRouter(tags=["primer"])


def _normalize_budget(raw: Optional[str], default: int) -> int:
    if raw is None:
        return default
    try:
        budget = int(raw.strip())
    except ValueError:
        logger.debug(f"Ignoring non-integer primer budget {raw!r}")
        return default
    return budget if budget >= 0 else default


@router.get("/primer", response_model=PrimerResponse)
async def get_primer(
    budget: Optional[str] = Query(default=None, description="Token budget (default 200)"),
    capabilities: Optional[str] = Query(default=None, description="Comma-separated, e.g. shell,mcp"),
    snapshot=Depends(get_snapshot),
    engine=Depends(get_primer_engine),
    settings=Depends(get_settings),
):
    """Assemble the AI bootstrap primer within a token budget."""
    result = engine.build(
        snapshot,
        budget=_normalize_budget(budget, settings.default_budget),
        capabilities=parse_capabilities(capabilities),
    )
    return PrimerResponse(
        total_tokens=result.total_tokens,
        tier=result.tier.value,
        commands_included=result.commands_included,
        content=result.content,
    )
