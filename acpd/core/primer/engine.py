"""Budget-constrained primer assembly.

Steps for one request:
  1. Reserve the bootstrap block's fixed cost
  2. Pick the global tier from the budget left after bootstrap
  3. Filter catalog entries by capability, order by (critical, priority)
  4. Greedily admit entries at their tier-appropriate cost; critical
     entries are admitted even past the budget
  5. If headroom remains, append up to three frozen/restricted symbol
     warnings from the snapshot
  6. Render text and report tier, entry count and estimated tokens

Token costs are the catalog's fixed estimates, never counted from text.
The engine holds no state beyond the catalog and never mutates the
snapshot, so one instance serves concurrent requests.
"""

import logging
from typing import FrozenSet, Iterable, Iterator, List, Optional, Sequence, Tuple

from ..constants import (
    FULL_TIER_MIN,
    MAX_WARNINGS,
    STANDARD_TIER_MIN,
    WARNING_DIRECTIVE_CHARS,
    WARNING_HEADROOM,
    WARNING_LINE_TOKENS,
    WARNING_LOCK_LEVELS,
)
from ..snapshot.models import Snapshot
from .models import (
    AdvisoryEntry,
    BootstrapBlock,
    Catalog,
    ConstraintWarning,
    PrimerResult,
    SelectionResult,
    Tier,
)

logger = logging.getLogger(__name__)

WARNINGS_HEADING = "Project Warnings"


def parse_capabilities(raw: Optional[str]) -> FrozenSet[str]:
    """Split a comma-separated capability list; blanks are dropped."""
    if not raw:
        return frozenset()
    return frozenset(part.strip() for part in raw.split(",") if part.strip())


def remaining_budget(budget: int, bootstrap_cost: int) -> int:
    """Budget left after the bootstrap block, floored at zero."""
    return max(0, budget - bootstrap_cost)


def select_tier(remaining: int) -> Tier:
    """Map the post-bootstrap budget to a global tier."""
    if remaining < STANDARD_TIER_MIN:
        return Tier.MINIMAL
    elif remaining < FULL_TIER_MIN:
        return Tier.STANDARD
    else:
        return Tier.FULL


def filter_entries(
    entries: Iterable[AdvisoryEntry],
    capabilities: FrozenSet[str],
) -> List[AdvisoryEntry]:
    """Keep entries matching the requested capabilities.

    Open on both sides: no requested capabilities matches every entry, and
    an entry without capability tags matches every request.
    """
    if not capabilities:
        return list(entries)
    return [
        entry for entry in entries
        if not entry.capabilities or entry.capabilities & capabilities
    ]


def order_entries(entries: Iterable[AdvisoryEntry]) -> List[AdvisoryEntry]:
    """Critical first, then ascending priority; ties keep catalog order."""
    return sorted(entries, key=lambda entry: (not entry.critical, entry.priority))


def pack_entries(
    candidates: Sequence[AdvisoryEntry],
    budget: int,
    bootstrap_cost: int,
    tier: Tier,
) -> SelectionResult:
    """Admit candidates in order while they fit the budget.

    Each entry is tested on its own: a skipped expensive entry does not
    stop a later cheaper one. Critical entries are always admitted, so
    ``used_tokens`` may end above ``budget``.
    """
    result = SelectionResult(used_tokens=bootstrap_cost)

    for entry in candidates:
        content = entry.content_for(tier)
        if entry.critical or result.used_tokens + content.token_cost <= budget:
            result.selected.append((entry, content))
            result.used_tokens += content.token_cost

    return result


def iter_constraint_warnings(snapshot: Snapshot) -> Iterator[ConstraintWarning]:
    """Yield a warning per frozen/restricted symbol, ordered by symbol name."""
    for name in sorted(snapshot.symbols):
        constraints = snapshot.symbols[name].constraints
        if constraints is None or constraints.level not in WARNING_LOCK_LEVELS:
            continue
        yield ConstraintWarning(
            symbol_name=name,
            lock_level=constraints.level,
            directive_excerpt=constraints.directive[:WARNING_DIRECTIVE_CHARS],
        )


def synthesize_warnings(
    used: int,
    budget: int,
    snapshot: Snapshot,
) -> Tuple[List[str], int]:
    """Render up to three warning lines if the budget has headroom.

    Returns:
        (warning lines, token total after the warnings)
    """
    lines: List[str] = []
    if used + WARNING_HEADROOM >= budget:
        return lines, used

    for warning in iter_constraint_warnings(snapshot):
        if len(lines) >= MAX_WARNINGS:
            break
        lines.append(warning.render())
        used += WARNING_LINE_TOKENS
        # The line that reaches the budget is kept; only the next is dropped
        if used >= budget:
            break

    return lines, used


def render(
    bootstrap: BootstrapBlock,
    selection: SelectionResult,
    warnings: Sequence[str],
) -> str:
    """Assemble the primer text."""
    parts = [f"{line}\n" for line in bootstrap.lines]
    parts.append("\n")

    for entry, content in selection.selected:
        parts.append(f"{entry.name}\n{content.text}\n\n")

    if warnings:
        parts.append(f"{WARNINGS_HEADING}\n")
        parts.extend(f"  - {warning}\n" for warning in warnings)

    return "".join(parts).strip()


class PrimerEngine:
    """Build primers from a validated catalog.

    Args:
        catalog: Catalog loaded by ``load_catalog`` (validated, immutable)
    """

    def __init__(self, catalog: Catalog):
        self._catalog = catalog

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def build(
        self,
        snapshot: Snapshot,
        budget: int,
        capabilities: FrozenSet[str] = frozenset(),
    ) -> PrimerResult:
        """Assemble a primer for ``budget`` tokens.

        Args:
            snapshot: Current snapshot, scanned for constrained symbols
            budget: Caller's token budget (non-negative)
            capabilities: Requested capability tags; empty = unrestricted

        Returns:
            PrimerResult with rendered content and token accounting
        """
        bootstrap = self._catalog.bootstrap
        tier = select_tier(remaining_budget(budget, bootstrap.token_cost))

        candidates = order_entries(filter_entries(self._catalog.entries, capabilities))
        selection = pack_entries(candidates, budget, bootstrap.token_cost, tier)

        warnings, used = synthesize_warnings(selection.used_tokens, budget, snapshot)
        content = render(bootstrap, selection, warnings)

        logger.debug(
            f"Primer budget={budget} caps={sorted(capabilities)}: tier={tier.value}, "
            f"{len(selection.selected)}/{len(candidates)} entries, "
            f"{len(warnings)} warnings, {used} tokens"
        )

        return PrimerResult(
            total_tokens=used,
            tier=tier,
            commands_included=len(selection.selected),
            content=content,
        )
