"""Read-only code intelligence snapshot: models, loading and queries."""

from .models import (
    CallGraph,
    ConstraintIndex,
    DomainEntry,
    FileEntry,
    Snapshot,
    SnapshotStats,
    SymbolConstraints,
    SymbolEntry,
    VarEntry,
    VarsFile,
)
from .store import SnapshotStore

__all__ = [
    "CallGraph",
    "ConstraintIndex",
    "DomainEntry",
    "FileEntry",
    "Snapshot",
    "SnapshotStats",
    "SnapshotStore",
    "SymbolConstraints",
    "SymbolEntry",
    "VarEntry",
    "VarsFile",
]
