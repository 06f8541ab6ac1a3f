"""Primer catalog loading and validation.

The catalog is plain data (``catalog.yaml`` next to this module, or a file
named in the daemon settings). It is parsed into frozen records and
validated once at startup; any violation raises ``CatalogError`` so the
daemon refuses to start rather than serve a broken primer.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from ..exceptions import CatalogError
from .models import AdvisoryEntry, BootstrapBlock, Catalog, ContentTier, Tier

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent / "catalog.yaml"

_BOOTSTRAP_LINES = ("awareness", "workflow", "expansion")


def _require_count(value: Any, what: str) -> int:
    # bool is an int subclass; YAML "true" must not pass as a cost
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise CatalogError(f"{what} must be a non-negative integer, got {value!r}")
    return value


def _require_text(value: Any, what: str) -> str:
    if not isinstance(value, str):
        raise CatalogError(f"{what} must be a string, got {value!r}")
    return value


def _parse_bootstrap(raw: Any) -> BootstrapBlock:
    if not isinstance(raw, dict):
        raise CatalogError("Catalog 'bootstrap' must be a mapping")

    lines = {}
    for key in _BOOTSTRAP_LINES:
        if key not in raw:
            raise CatalogError(f"Bootstrap block is missing '{key}'")
        lines[key] = _require_text(raw[key], f"bootstrap.{key}")

    return BootstrapBlock(
        token_cost=_require_count(raw.get("tokens"), "bootstrap.tokens"),
        **lines,
    )


def _parse_entry(raw: Any, index: int) -> AdvisoryEntry:
    if not isinstance(raw, dict):
        raise CatalogError(f"Catalog entry #{index} must be a mapping")

    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        raise CatalogError(f"Catalog entry #{index} needs a non-empty name")

    critical = raw.get("critical", False)
    if not isinstance(critical, bool):
        raise CatalogError(f"Entry '{name}': critical must be true or false")

    capabilities = raw.get("capabilities") or []
    if not isinstance(capabilities, list) or not all(isinstance(c, str) for c in capabilities):
        raise CatalogError(f"Entry '{name}': capabilities must be a list of strings")

    raw_tiers = raw.get("tiers")
    if not isinstance(raw_tiers, dict):
        raise CatalogError(f"Entry '{name}': tiers must be a mapping")

    tiers: Dict[Tier, ContentTier] = {}
    for tier_name, content in raw_tiers.items():
        try:
            tier = Tier(tier_name)
        except ValueError:
            raise CatalogError(f"Entry '{name}': unknown tier '{tier_name}'") from None
        if not isinstance(content, dict):
            raise CatalogError(f"Entry '{name}': tier '{tier_name}' must be a mapping")
        tiers[tier] = ContentTier(
            token_cost=_require_count(content.get("tokens"), f"Entry '{name}' {tier_name}.tokens"),
            text=_require_text(content.get("text"), f"Entry '{name}' {tier_name}.text"),
        )

    if Tier.MINIMAL not in tiers:
        raise CatalogError(f"Entry '{name}' has no minimal tier")

    return AdvisoryEntry(
        name=name,
        critical=critical,
        priority=_require_count(raw.get("priority"), f"Entry '{name}' priority"),
        capabilities=frozenset(c.strip() for c in capabilities if c.strip()),
        tiers=tiers,
    )


def build_catalog(data: Any, source: Optional[str] = None) -> Catalog:
    """Validate raw catalog data and build the immutable Catalog.

    Args:
        data: Parsed mapping with ``bootstrap`` and ``entries`` keys
        source: Where the data came from, for log and error messages

    Returns:
        Catalog with entries in their declared order

    Raises:
        CatalogError: On any structural or invariant violation
    """
    if not isinstance(data, dict):
        raise CatalogError(f"Catalog must be a mapping (source: {source or '<data>'})")

    bootstrap = _parse_bootstrap(data.get("bootstrap"))

    raw_entries = data.get("entries")
    if not isinstance(raw_entries, list):
        raise CatalogError("Catalog 'entries' must be a list")

    entries: List[AdvisoryEntry] = []
    seen = set()
    for index, raw in enumerate(raw_entries):
        entry = _parse_entry(raw, index)
        if entry.name in seen:
            raise CatalogError(f"Duplicate catalog entry name: '{entry.name}'")
        seen.add(entry.name)
        entries.append(entry)

    return Catalog(bootstrap=bootstrap, entries=tuple(entries), source=source)


def load_catalog(path: Optional[Union[str, Path]] = None) -> Catalog:
    """Load and validate a catalog file (the bundled one by default)."""
    catalog_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH

    try:
        with open(catalog_path, "r") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {e}") from e

    catalog = build_catalog(data, source=str(catalog_path))
    critical = sum(1 for e in catalog.entries if e.critical)
    logger.info(
        f"Loaded primer catalog {catalog_path}: "
        f"{len(catalog.entries)} entries ({critical} critical)"
    )
    return catalog
