"""acpd Primer - budget-constrained agent briefing.

Public API:
    load_catalog(path=None) -> Catalog
    PrimerEngine(catalog).build(snapshot, budget, capabilities) -> PrimerResult
"""

from .catalog import DEFAULT_CATALOG_PATH, build_catalog, load_catalog
from .engine import PrimerEngine, parse_capabilities, select_tier
from .models import (
    AdvisoryEntry,
    BootstrapBlock,
    Catalog,
    ContentTier,
    PrimerResult,
    Tier,
)

__all__ = [
    "AdvisoryEntry",
    "BootstrapBlock",
    "Catalog",
    "ContentTier",
    "DEFAULT_CATALOG_PATH",
    "PrimerEngine",
    "PrimerResult",
    "Tier",
    "build_catalog",
    "load_catalog",
    "parse_capabilities",
    "select_tier",
]
