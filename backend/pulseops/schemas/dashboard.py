"""Dashboard schemas"""
from typing import Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null


class DashboardBase(CamelModel):
    """Dashboard base schema"""
    title: str = Field(..., min_length=1, max_length=255, description="Dashboard title")
    description: Optional[str] = Field(None, max_length=2000, description="Dashboard description")
    is_favorite: bool = Field(False, description="Pinned to favorites")


class DashboardCreate(DashboardBase):
    """Request body for POST /api/dashboards"""
    pass


class DashboardUpdate(CamelModel):
    """Request body for PUT /api/dashboards/:id, every field optional"""
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = Field(None, max_length=2000)
    is_favorite: Optional[bool] = None

    @field_validator("title", "is_favorite")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class DashboardResponse(DashboardBase):
    id: int
    created_at: datetime
    updated_at: Optional[datetime] = None
