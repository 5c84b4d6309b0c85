"""Integration schemas

The API key only appears on the connect request; none of the stored or
returned shapes carry it.
"""
from typing import Literal, Optional
from datetime import datetime
from pydantic import Field

from pulseops.schemas.base import CamelModel

IntegrationStatus = Literal["connected", "disconnected"]


class IntegrationConnectRequest(CamelModel):
    """Request body for POST /api/integrations/connect"""
    service_id: str = Field(..., min_length=1, max_length=100)
    service_name: str = Field(..., min_length=1, max_length=255)
    category: str = Field(..., min_length=1, max_length=50)
    api_key: str = Field(..., description="Checked for shape only, never stored")


class IntegrationUpsert(CamelModel):
    """Row written by the connect flow"""
    service_id: str
    service_name: str
    category: str
    status: IntegrationStatus = "connected"
    last_validated_at: Optional[datetime] = None


class IntegrationResponse(CamelModel):
    id: int
    service_id: str
    service_name: str
    category: str
    status: IntegrationStatus
    last_validated_at: Optional[datetime] = None
    created_at: datetime
