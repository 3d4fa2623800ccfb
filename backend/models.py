"""
Pydantic models for request/response validation.
"""
from pydantic import BaseModel, Field

from utils.enum_options import EnumOption


# ── Option Models ───────────────────────────────────────────────────

class EnumOptionOut(BaseModel):
    """One entry of an enum's drop-down option list."""
    value: str = Field(..., description="Member name, submitted by the form")
    label: str = Field(..., description="Display label shown to users")
    selected: bool = Field(False, description="Whether this is the current selection")

    @classmethod
    def from_option(cls, option: EnumOption) -> "EnumOptionOut":
        return cls(value=option.value, label=option.label, selected=option.selected)


class OptionEnumSummary(BaseModel):
    """A registered enum available under /options/{key}."""
    key: str = Field(..., description="Registry key used in the URL")
    name: str = Field(..., description="Python enum class name")
    count: int = Field(..., ge=0, description="Number of members")


# ── Health ──────────────────────────────────────────────────────────

class HealthResponse(BaseModel):
    """Response model for the health check."""
    status: str
    environment: str
    version: str
    timestamp: str
