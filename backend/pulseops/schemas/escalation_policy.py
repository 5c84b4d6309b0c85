from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import CamelModel, reject_null


class EscalationPolicyBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    rules: List[Dict[str, Any]] = Field(
        default_factory=list, description="[{level, escalateAfter, target}]"
    )
    is_default: bool = False


class EscalationPolicyCreate(EscalationPolicyBase):
    pass


class EscalationPolicyUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    rules: Optional[List[Dict[str, Any]]] = None
    is_default: Optional[bool] = None

    @field_validator("name", "rules", "is_default")
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class EscalationPolicyResponse(EscalationPolicyBase):
    id: int
    created_at: datetime
