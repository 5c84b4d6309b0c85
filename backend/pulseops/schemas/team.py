"""Team and team member schemas"""
from typing import Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null

TeamRole = Literal["admin", "editor", "viewer"]

# Lowercase words joined by single hyphens
SLUG_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"


class TeamBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    slug: str = Field(..., min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None


class TeamCreate(TeamBase):
    pass


class TeamUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    slug: Optional[str] = Field(None, min_length=1, max_length=100, pattern=SLUG_PATTERN)
    description: Optional[str] = None

    @field_validator("name", "slug")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class TeamResponse(TeamBase):
    id: int
    created_at: datetime


class TeamMemberCreate(CamelModel):
    """Body of POST /api/teams/:teamId/members"""
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: Optional[str] = Field(None, max_length=255)
    role: TeamRole = "viewer"


class TeamMemberUpdate(CamelModel):
    email: Optional[str] = Field(None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    name: Optional[str] = Field(None, max_length=255)
    role: Optional[TeamRole] = None

    @field_validator("email", "role")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class TeamMemberResponse(TeamMemberCreate):
    id: int
    team_id: int
    created_at: datetime
