"""Dashboard share schemas"""
from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from pulseops.schemas.base import CamelModel, to_naive_utc
from pulseops.schemas.dashboard import DashboardResponse
from pulseops.schemas.panel import PanelResponse


class ShareCreateRequest(CamelModel):
    """Request body for POST /api/dashboards/:dashboardId/shares"""
    expires_at: Optional[datetime] = Field(None, description="No expiry when omitted")

    @field_validator("expires_at")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class ShareCreate(CamelModel):
    dashboard_id: int
    share_token: str
    expires_at: Optional[datetime] = None
    is_active: bool = True


class ShareResponse(CamelModel):
    id: int
    dashboard_id: int
    share_token: str
    expires_at: Optional[datetime] = None
    is_active: bool
    created_at: datetime


class SharedDashboardResponse(BaseModel):
    """Payload behind a public share link"""
    dashboard: DashboardResponse
    panels: List[PanelResponse]
