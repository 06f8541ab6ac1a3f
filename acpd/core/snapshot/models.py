"""Pydantic models for the code intelligence snapshot.

The snapshot is produced by the indexer and only read here. Models are
frozen and keep unknown keys (``extra="allow"``) so that fields added by
newer indexers still round-trip through the query endpoints.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _SnapshotModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class SymbolConstraints(_SnapshotModel):
    """Lock level and directive attached to a symbol."""
    level: str = Field(..., description="frozen | restricted | normal")
    directive: str = Field("", description="Instruction for anyone editing the symbol")


class SymbolEntry(_SnapshotModel):
    name: str
    qualified_name: Optional[str] = None
    symbol_type: str = Field("function", alias="type")
    file: str = ""
    lines: Optional[List[int]] = None
    exported: bool = False
    signature: Optional[str] = None
    purpose: Optional[str] = None
    constraints: Optional[SymbolConstraints] = None


class FileEntry(_SnapshotModel):
    path: str
    language: Optional[str] = None
    lines: int = 0
    domains: List[str] = Field(default_factory=list)
    layer: Optional[str] = None
    exports: List[str] = Field(default_factory=list)
    imports: List[str] = Field(default_factory=list)
    purpose: Optional[str] = None


class DomainEntry(_SnapshotModel):
    name: str
    files: List[str] = Field(default_factory=list)
    symbols: List[str] = Field(default_factory=list)
    description: Optional[str] = None


class CallGraph(_SnapshotModel):
    """Forward (caller -> callees) and reverse (callee -> callers) edges."""
    forward: Dict[str, List[str]] = Field(default_factory=dict)
    reverse: Dict[str, List[str]] = Field(default_factory=dict)


class ConstraintIndex(_SnapshotModel):
    by_file: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    by_lock_level: Dict[str, List[str]] = Field(default_factory=dict)


class SnapshotStats(_SnapshotModel):
    files: int = 0
    symbols: int = 0
    lines: int = 0
    annotation_coverage: float = 0.0


class Snapshot(_SnapshotModel):
    """Point-in-time view of the indexed project."""
    version: Any = None
    generated_at: Optional[str] = None
    project: Dict[str, Any] = Field(default_factory=dict)
    stats: SnapshotStats = Field(default_factory=SnapshotStats)
    files: Dict[str, FileEntry] = Field(default_factory=dict)
    symbols: Dict[str, SymbolEntry] = Field(default_factory=dict)
    graph: Optional[CallGraph] = None
    domains: Dict[str, DomainEntry] = Field(default_factory=dict)
    constraints: Optional[ConstraintIndex] = None


class VarEntry(_SnapshotModel):
    value: str
    var_type: Optional[str] = Field(None, alias="type")
    description: Optional[str] = None
    source: Optional[str] = None
    lines: Optional[List[int]] = None


class VarsFile(_SnapshotModel):
    version: Any = None
    variables: Dict[str, VarEntry] = Field(default_factory=dict)
