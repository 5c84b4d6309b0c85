from typing import Any, Dict, Optional
from datetime import datetime
from pydantic import Field

from pulseops.schemas.alert import AlertSeverity
from pulseops.schemas.base import CamelModel


class AlertTemplateBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    category: str = Field(..., min_length=1, max_length=50)
    severity: AlertSeverity
    condition: Dict[str, Any] = Field(..., description="{metric, operator, threshold}")
    is_built_in: bool = False


class AlertTemplateCreate(AlertTemplateBase):
    pass


class AlertTemplateResponse(AlertTemplateBase):
    id: int
    created_at: datetime
