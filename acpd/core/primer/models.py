"""Data contracts for the primer engine.

Catalog records are frozen dataclasses so a loaded catalog can be shared
across concurrent requests without copying.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Tuple


class Tier(str, Enum):
    """Detail level for the whole primer and for each rendered entry."""
    MINIMAL = "minimal"
    STANDARD = "standard"
    FULL = "full"


# Lookup order per requested tier; Minimal is always present
TIER_FALLBACKS: Dict[Tier, Tuple[Tier, ...]] = {
    Tier.MINIMAL: (Tier.MINIMAL,),
    Tier.STANDARD: (Tier.STANDARD, Tier.MINIMAL),
    Tier.FULL: (Tier.FULL, Tier.STANDARD, Tier.MINIMAL),
}


@dataclass(frozen=True)
class ContentTier:
    """Rendered snippet plus its fixed token estimate."""
    token_cost: int
    text: str


@dataclass(frozen=True)
class AdvisoryEntry:
    """One catalog entry: a command or practice worth telling an agent about.

    ``capabilities`` empty means the entry applies under any filter.
    ``tiers`` is copied into a read-only mapping.
    """
    name: str
    critical: bool
    priority: int
    capabilities: FrozenSet[str]
    tiers: Mapping[Tier, ContentTier]

    def __post_init__(self):
        object.__setattr__(self, "tiers", MappingProxyType(dict(self.tiers)))

    def content_for(self, tier: Tier) -> ContentTier:
        """Return the content for ``tier``, falling back to lower tiers."""
        for candidate in TIER_FALLBACKS[tier]:
            content = self.tiers.get(candidate)
            if content is not None:
                return content
        raise KeyError(f"Entry '{self.name}' has no minimal tier")


@dataclass(frozen=True)
class BootstrapBlock:
    """Preamble emitted before every primer."""
    awareness: str
    workflow: str
    expansion: str
    token_cost: int

    @property
    def lines(self) -> Tuple[str, str, str]:
        return (self.awareness, self.workflow, self.expansion)


@dataclass(frozen=True)
class Catalog:
    """Bootstrap block plus advisory entries in catalog order."""
    bootstrap: BootstrapBlock
    entries: Tuple[AdvisoryEntry, ...]
    source: Optional[str] = None


@dataclass
class SelectionResult:
    """Entries admitted by packing, with the running token total."""
    selected: List[Tuple[AdvisoryEntry, ContentTier]] = field(default_factory=list)
    used_tokens: int = 0


@dataclass(frozen=True)
class ConstraintWarning:
    """A frozen/restricted symbol surfaced at the end of the primer."""
    symbol_name: str
    lock_level: str
    directive_excerpt: str

    def render(self) -> str:
        return f"{self.symbol_name}: {self.lock_level} ({self.directive_excerpt})"


@dataclass
class PrimerResult:
    """Final primer returned to the API layer."""
    total_tokens: int
    tier: Tier
    commands_included: int
    content: str
