from typing import Literal, Optional
from datetime import datetime
from pydantic import Field

from pulseops.schemas.base import CamelModel, JSONBlob

QueryType = Literal["metrics", "logs", "traces"]


class SavedQueryBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    query_type: QueryType = "metrics"
    query: JSONBlob
    is_public: bool = False


class SavedQueryCreate(SavedQueryBase):
    pass


class SavedQueryResponse(SavedQueryBase):
    id: int
    created_at: datetime
