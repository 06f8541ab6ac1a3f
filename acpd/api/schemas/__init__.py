"""Pydantic schemas for API request/response models."""

from .primer import PrimerResponse
from .queries import (
    ConstraintResponse,
    DomainListResponse,
    ExpandedVariable,
    FileListResponse,
    GraphResponse,
    MapResponse,
    StatsResponse,
    SymbolListResponse,
)

__all__ = [
    'PrimerResponse',
    'ConstraintResponse',
    'DomainListResponse',
    'ExpandedVariable',
    'FileListResponse',
    'GraphResponse',
    'MapResponse',
    'StatsResponse',
    'SymbolListResponse',
]
