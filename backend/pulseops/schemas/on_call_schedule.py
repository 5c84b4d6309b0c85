from typing import List, Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null, to_naive_utc

RotationType = Literal["daily", "weekly", "custom"]


class OnCallScheduleBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    rotation_type: RotationType = "weekly"
    timezone: str = Field("UTC", min_length=1, max_length=64)
    members: List[str] = Field(default_factory=list)
    current_on_call: Optional[str] = Field(None, max_length=255)
    start_date: Optional[datetime] = None

    @field_validator("start_date")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class OnCallScheduleCreate(OnCallScheduleBase):
    pass


class OnCallScheduleUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    rotation_type: Optional[RotationType] = None
    timezone: Optional[str] = Field(None, min_length=1, max_length=64)
    members: Optional[List[str]] = None
    current_on_call: Optional[str] = Field(None, max_length=255)
    start_date: Optional[datetime] = None

    @field_validator("name", "rotation_type", "timezone", "members")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator("start_date")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class OnCallScheduleResponse(OnCallScheduleBase):
    id: int
    created_at: datetime
