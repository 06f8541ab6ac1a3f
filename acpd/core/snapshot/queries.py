"""Lookups and filters over the snapshot.

Pure functions used by the API routes. ``None`` means "not found"; the
route layer turns that into a 404.
"""

from typing import Any, Dict, List, Optional, Tuple

from ..constants import DEFAULT_MAP_DEPTH
from .models import DomainEntry, FileEntry, Snapshot, SymbolEntry, VarEntry, VarsFile


def _truncate(items: list, limit: Optional[int]) -> Tuple[list, int]:
    total = len(items)
    if limit is not None:
        items = items[:max(limit, 0)]
    return items, total


# =============================================================================
# Symbols
# =============================================================================


def list_symbols(
    snapshot: Snapshot,
    file: Optional[str] = None,
    symbol_type: Optional[str] = None,
    exported: Optional[bool] = None,
    limit: Optional[int] = None,
) -> Tuple[List[SymbolEntry], int]:
    """Filter symbols. Returns (symbols, total before ``limit``)."""
    wanted_type = symbol_type.lower() if symbol_type else None
    matches = [
        s for s in snapshot.symbols.values()
        if (file is None or file in s.file)
        and (wanted_type is None or s.symbol_type.lower() == wanted_type)
        and (exported is None or s.exported == exported)
    ]
    return _truncate(matches, limit)


def get_symbol(snapshot: Snapshot, name: str) -> Optional[SymbolEntry]:
    return snapshot.symbols.get(name)


# =============================================================================
# Files
# =============================================================================


def list_files(
    snapshot: Snapshot,
    language: Optional[str] = None,
    domain: Optional[str] = None,
    layer: Optional[str] = None,
    limit: Optional[int] = None,
) -> Tuple[List[FileEntry], int]:
    """Filter files. Returns (files, total before ``limit``).

    ``language`` is case-insensitive, ``domain`` is a substring match
    against any of the file's domains, ``layer`` is exact.
    """
    wanted_language = language.lower() if language else None
    matches = [
        f for f in snapshot.files.values()
        if (wanted_language is None or (f.language or "").lower() == wanted_language)
        and (domain is None or any(domain in d for d in f.domains))
        and (layer is None or f.layer == layer)
    ]
    return _truncate(matches, limit)


def find_file(snapshot: Snapshot, path: str) -> Optional[FileEntry]:
    """Exact path, then without leading slash, then suffix match."""
    entry = snapshot.files.get(path)
    if entry is not None:
        return entry

    stripped = path.lstrip("/")
    entry = snapshot.files.get(stripped)
    if entry is not None:
        return entry

    for file_path, entry in snapshot.files.items():
        if file_path.endswith(path) or file_path.endswith(stripped):
            return entry
    return None


# =============================================================================
# Call graph
# =============================================================================


def _relationships(snapshot: Snapshot, symbol: str, reverse: bool) -> Optional[List[str]]:
    if snapshot.graph is not None:
        edges = snapshot.graph.reverse if reverse else snapshot.graph.forward
        if symbol in edges:
            return list(edges[symbol])

    # Known symbol with no edges in this direction
    if symbol in snapshot.symbols:
        return []
    return None


def get_callers(snapshot: Snapshot, symbol: str) -> Optional[List[str]]:
    return _relationships(snapshot, symbol, reverse=True)


def get_callees(snapshot: Snapshot, symbol: str) -> Optional[List[str]]:
    return _relationships(snapshot, symbol, reverse=False)


# =============================================================================
# Domains, constraints, variables
# =============================================================================


def get_domain(snapshot: Snapshot, name: str) -> Optional[DomainEntry]:
    return snapshot.domains.get(name)


def get_constraints(snapshot: Snapshot, path: str) -> Tuple[str, Optional[Dict[str, Any]], Optional[str]]:
    """Return (normalized path, file constraints, lock level).

    Lock level is ``frozen`` if the file is listed as frozen, else
    ``restricted`` if listed as restricted, else None.
    """
    normalized = path.lstrip("/")
    index = snapshot.constraints
    if index is None:
        return normalized, None, None

    lock_level = None
    for level in ("frozen", "restricted"):
        if normalized in index.by_lock_level.get(level, []):
            lock_level = level
            break

    return normalized, index.by_file.get(normalized), lock_level


def get_variable(vars_file: Optional[VarsFile], name: str) -> Optional[VarEntry]:
    if vars_file is None:
        return None
    return vars_file.variables.get(name)


# =============================================================================
# Stats and map
# =============================================================================


def get_stats(snapshot: Snapshot) -> Dict[str, Any]:
    return {
        "files": snapshot.stats.files,
        "symbols": snapshot.stats.symbols,
        "lines": snapshot.stats.lines,
        "annotation_coverage": snapshot.stats.annotation_coverage,
        "domains": len(snapshot.domains),
    }


def build_map(snapshot: Snapshot, max_depth: int = DEFAULT_MAP_DEPTH) -> Dict[str, Any]:
    """Build a directory tree from snapshot file paths.

    Files report their export count as ``symbols``. Directories deeper
    than ``max_depth`` are listed without children.
    """
    dir_tree: Dict[str, set] = {}
    file_symbols: Dict[str, int] = {}

    for path, entry in snapshot.files.items():
        file_symbols[path] = len(entry.exports)

        parts = path.split("/")
        for i in range(len(parts)):
            dir_path = "." if i == 0 else "/".join(parts[:i])
            child = path if i + 1 == len(parts) else "/".join(parts[:i + 1])
            dir_tree.setdefault(dir_path, set()).add(child)

    def _node(name: str, path: str, depth: int) -> Dict[str, Any]:
        if path in file_symbols:
            return {"name": name, "type": "file", "symbols": file_symbols[path]}

        if path in dir_tree:
            node: Dict[str, Any] = {"name": name, "type": "directory"}
            if depth < max_depth:
                node["children"] = [
                    _node(child.rsplit("/", 1)[-1], child, depth + 1)
                    for child in sorted(dir_tree[path])
                ]
            return node

        return {"name": name, "type": "unknown"}

    return {
        "tree": _node(".", ".", 0),
        "total_files": len(snapshot.files),
        "total_dirs": len(dir_tree),
    }
