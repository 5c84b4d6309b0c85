"""Trace and span schemas"""
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from pydantic import AliasChoices, Field, field_validator

from pulseops.schemas.base import CamelModel, to_naive_utc

SpanStatus = Literal["ok", "error"]


class TraceBase(CamelModel):
    trace_id: str = Field(..., min_length=1, max_length=100)
    root_span_id: Optional[str] = Field(None, max_length=100)
    service_name: str = Field(..., min_length=1, max_length=255)
    operation_name: str = Field(..., min_length=1, max_length=255)
    duration: int = Field(..., ge=0, description="Milliseconds")
    status: SpanStatus = "ok"
    start_time: datetime
    end_time: Optional[datetime] = None

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class TraceCreate(TraceBase):
    trace_metadata: Dict[str, Any] = Field(default_factory=dict, alias="metadata")


class TraceResponse(TraceBase):
    id: int
    # Wire name is "metadata"; ORM rows carry it as trace_metadata
    trace_metadata: Dict[str, Any] = Field(
        default_factory=dict,
        validation_alias=AliasChoices("trace_metadata", "metadata"),
        serialization_alias="metadata",
    )
    created_at: datetime


class SpanBase(CamelModel):
    span_id: str = Field(..., min_length=1, max_length=100)
    trace_id: str = Field(..., min_length=1, max_length=100)
    parent_span_id: Optional[str] = Field(None, max_length=100)
    service_name: str = Field(..., min_length=1, max_length=255)
    operation_name: str = Field(..., min_length=1, max_length=255)
    duration: int = Field(..., ge=0)
    status: SpanStatus = "ok"
    start_time: datetime
    end_time: Optional[datetime] = None
    tags: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("start_time", "end_time")
    @classmethod
    def normalize_timezone(cls, v):
        return to_naive_utc(v)


class SpanCreate(SpanBase):
    pass


class SpanResponse(SpanBase):
    id: int
    created_at: datetime


class TraceDetailResponse(CamelModel):
    """GET /api/traces/:traceId"""
    trace: TraceResponse
    spans: List[SpanResponse]
