"""Postmortem schemas"""
from typing import Any, Dict, List, Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null

PostmortemStatus = Literal["draft", "review", "published"]


class PostmortemBase(CamelModel):
    incident_id: str = Field(..., min_length=1, max_length=100)
    title: str = Field(..., min_length=1, max_length=255)
    summary: Optional[str] = None
    impact: Optional[str] = None
    root_cause: Optional[str] = None
    status: PostmortemStatus = "draft"
    ai_generated: bool = False
    participants: List[Dict[str, Any]] = Field(default_factory=list)
    lessons_learned: List[str] = Field(default_factory=list)
    action_items: List[Dict[str, Any]] = Field(
        default_factory=list, description="[{title, assignee, status}]"
    )
    timeline: List[Any] = Field(default_factory=list)


class PostmortemCreate(PostmortemBase):
    pass


class PostmortemUpdate(CamelModel):
    incident_id: Optional[str] = Field(None, min_length=1, max_length=100)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    summary: Optional[str] = None
    impact: Optional[str] = None
    root_cause: Optional[str] = None
    status: Optional[PostmortemStatus] = None
    ai_generated: Optional[bool] = None
    participants: Optional[List[Dict[str, Any]]] = None
    lessons_learned: Optional[List[str]] = None
    action_items: Optional[List[Dict[str, Any]]] = None
    timeline: Optional[List[Any]] = None

    @field_validator(
        "incident_id", "title", "status", "ai_generated",
        "participants", "lessons_learned", "action_items", "timeline",
    )
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class PostmortemResponse(PostmortemBase):
    id: int
    created_at: datetime
    updated_at: datetime
