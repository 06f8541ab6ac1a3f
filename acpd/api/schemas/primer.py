"""Primer response schema."""

from typing import Literal

from pydantic import BaseModel, Field


class PrimerResponse(BaseModel):
    """Assembled primer."""
    total_tokens: int = Field(..., description="Estimated tokens, including bootstrap and warnings")
    tier: Literal["minimal", "standard", "full"] = Field(..., description="Global detail tier")
    commands_included: int = Field(..., description="Catalog entries included (warnings not counted)")
    content: str = Field(..., description="Rendered primer text")
