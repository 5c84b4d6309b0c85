"""SLO schemas"""
from typing import Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null

SliType = Literal["availability", "latency", "error_rate"]
SloStatus = Literal["healthy", "at_risk", "breached"]


class SloBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    service_id: str = Field(..., min_length=1, max_length=100)
    sli_type: SliType
    target_percentage: int = Field(..., gt=0, description="Scaled integer, 999 = 99.9%")
    window_days: int = Field(30, gt=0)
    current_value: Optional[int] = None
    error_budget_remaining: Optional[int] = None
    status: SloStatus = "healthy"


class SloCreate(SloBase):
    pass


class SloUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    service_id: Optional[str] = Field(None, min_length=1, max_length=100)
    sli_type: Optional[SliType] = None
    target_percentage: Optional[int] = Field(None, gt=0)
    window_days: Optional[int] = Field(None, gt=0)
    current_value: Optional[int] = None
    error_budget_remaining: Optional[int] = None
    status: Optional[SloStatus] = None

    @field_validator(
        "name", "service_id", "sli_type", "target_percentage", "window_days", "status"
    )
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class SloResponse(SloBase):
    id: int
    created_at: datetime
