from typing import List, Literal, Optional
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null

WebhookType = Literal["slack", "discord", "pagerduty", "teams", "generic"]

URL_PATTERN = r"^https?://\S+$"


class WebhookBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., max_length=2048, pattern=URL_PATTERN)
    type: WebhookType = "generic"
    events: List[str] = Field(default_factory=list, description="e.g. alert.triggered")
    is_active: bool = True


class WebhookCreate(WebhookBase):
    pass


class WebhookUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    url: Optional[str] = Field(None, max_length=2048, pattern=URL_PATTERN)
    type: Optional[WebhookType] = None
    events: Optional[List[str]] = None
    is_active: Optional[bool] = None

    @field_validator("name", "url", "type", "events", "is_active")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class WebhookResponse(WebhookBase):
    id: int
    failure_count: int
    last_triggered_at: Optional[datetime] = None
    created_at: datetime


class WebhookTestResponse(BaseModel):
    success: bool
    message: str
