from typing import Any, Dict, Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null

ChannelType = Literal["email", "slack", "pagerduty", "webhook", "sms"]


class NotificationChannelBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: ChannelType
    config: Dict[str, Any] = Field(default_factory=dict, description="Per-type delivery settings")
    is_default: bool = False
    is_active: bool = True


class NotificationChannelCreate(NotificationChannelBase):
    pass


class NotificationChannelUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[ChannelType] = None
    config: Optional[Dict[str, Any]] = None
    is_default: Optional[bool] = None
    is_active: Optional[bool] = None

    @field_validator("name", "type", "config", "is_default", "is_active")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class NotificationChannelResponse(NotificationChannelBase):
    id: int
    created_at: datetime
