from typing import List, Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import MAX_ID, CamelModel, reject_null, to_naive_utc

ReportFrequency = Literal["daily", "weekly", "monthly"]
ReportFormat = Literal["pdf", "csv", "png"]


class ReportScheduleBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    dashboard_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    frequency: ReportFrequency = "weekly"
    format: ReportFormat = "pdf"
    recipients: List[str] = Field(default_factory=list)
    is_active: bool = True
    next_run_at: Optional[datetime] = None

    @field_validator("next_run_at")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class ReportScheduleCreate(ReportScheduleBase):
    pass


class ReportScheduleUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    dashboard_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    frequency: Optional[ReportFrequency] = None
    format: Optional[ReportFormat] = None
    recipients: Optional[List[str]] = None
    is_active: Optional[bool] = None
    next_run_at: Optional[datetime] = None

    @field_validator("name", "frequency", "format", "recipients", "is_active")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)

    @field_validator("next_run_at")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class ReportScheduleResponse(ReportScheduleBase):
    id: int
    last_sent_at: Optional[datetime] = None
    created_at: datetime
