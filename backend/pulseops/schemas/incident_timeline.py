from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import Field

from pulseops.schemas.base import CamelModel


class TimelineEventCreate(CamelModel):
    """Body of POST /api/incidents/:incidentId/timeline, the incident comes from the path"""
    event_type: str = Field(..., min_length=1, max_length=50)
    event_data: Dict[str, Any] = Field(default_factory=dict)
    user_id: Optional[str] = Field(None, max_length=100)
    user_name: Optional[str] = Field(None, max_length=255)


class TimelineEventResponse(TimelineEventCreate):
    id: int
    incident_id: str
    timestamp: datetime
