"""Alert schemas"""
from typing import Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, to_naive_utc

AlertSeverity = Literal["critical", "warning", "info"]
AlertStatus = Literal["active", "resolved"]


class AlertBase(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    severity: AlertSeverity
    status: AlertStatus = "active"
    threshold_value: Optional[float] = None
    current_value: Optional[float] = None


class AlertCreate(AlertBase):
    """Used by the seed routine, alerts are not created over HTTP"""
    pass


class AlertStatusUpdate(CamelModel):
    """Request body for PATCH /api/alerts/:id"""
    status: AlertStatus
    resolved_at: Optional[datetime] = Field(None, description="Defaults to now when resolving")

    @field_validator("resolved_at")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class AlertResponse(AlertBase):
    id: int
    created_at: datetime
    resolved_at: Optional[datetime] = None
