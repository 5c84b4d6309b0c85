"""Signal correlation schemas"""
from typing import Any, List, Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.alert import AlertSeverity
from pulseops.schemas.base import CamelModel, reject_null

CorrelationStatus = Literal["active", "investigating", "resolved"]


class CorrelationBase(CamelModel):
    correlation_id: str = Field(..., min_length=1, max_length=100)
    alert_ids: List[Any] = Field(default_factory=list)
    log_patterns: List[str] = Field(default_factory=list)
    metric_anomalies: List[str] = Field(default_factory=list)
    trace_ids: List[str] = Field(default_factory=list)
    service_ids: List[str] = Field(default_factory=list)
    severity: AlertSeverity
    status: CorrelationStatus = "active"
    ai_analysis: Optional[str] = None
    suggested_cause: Optional[str] = None
    confidence: Optional[int] = Field(None, ge=0, le=100)


class CorrelationCreate(CorrelationBase):
    pass


class CorrelationUpdate(CamelModel):
    """correlationId is the lookup key and cannot be changed"""
    alert_ids: Optional[List[Any]] = None
    log_patterns: Optional[List[str]] = None
    metric_anomalies: Optional[List[str]] = None
    trace_ids: Optional[List[str]] = None
    service_ids: Optional[List[str]] = None
    severity: Optional[AlertSeverity] = None
    status: Optional[CorrelationStatus] = None
    ai_analysis: Optional[str] = None
    suggested_cause: Optional[str] = None
    confidence: Optional[int] = Field(None, ge=0, le=100)

    @field_validator(
        "alert_ids", "log_patterns", "metric_anomalies", "trace_ids", "service_ids",
        "severity", "status",
    )
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class CorrelationResponse(CorrelationBase):
    id: int
    created_at: datetime
    updated_at: datetime
