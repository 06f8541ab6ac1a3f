"""Query endpoint request/response schemas."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from ...core.snapshot.models import DomainEntry, FileEntry, SymbolEntry


class SymbolListResponse(BaseModel):
    symbols: List[SymbolEntry] = Field(default_factory=list)
    total: int = Field(0, description="Matches before limit was applied")


class FileListResponse(BaseModel):
    files: List[FileEntry] = Field(default_factory=list)
    total: int = Field(0, description="Matches before limit was applied")


class DomainListResponse(BaseModel):
    domains: List[DomainEntry] = Field(default_factory=list)
    total: int = 0


class GraphResponse(BaseModel):
    """Callers or callees of one symbol."""
    symbol: str
    relationships: List[str] = Field(default_factory=list)
    count: int = 0


class ConstraintResponse(BaseModel):
    path: str
    constraints: Optional[Dict[str, Any]] = None
    lock_level: Optional[str] = Field(None, description="frozen | restricted | null")


class ExpandedVariable(BaseModel):
    name: str
    expanded: str
    description: Optional[str] = None
    source: Optional[str] = None
    lines: Optional[List[int]] = None


class StatsResponse(BaseModel):
    files: int
    symbols: int
    lines: int
    annotation_coverage: float
    domains: int


class MapResponse(BaseModel):
    tree: Dict[str, Any] = Field(..., description="Nested {name, type, children?, symbols?} nodes")
    total_files: int
    total_dirs: int
