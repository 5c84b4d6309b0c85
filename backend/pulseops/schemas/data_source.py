from typing import Literal
from datetime import datetime
from pydantic import Field

from pulseops.schemas.base import CamelModel, JSONBlob

DataSourceType = Literal["postgres", "mysql", "rest_api", "mock"]


class DataSourceBase(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    type: DataSourceType
    config: JSONBlob = Field(..., description="Connection details")


class DataSourceCreate(DataSourceBase):
    pass


class DataSourceResponse(DataSourceBase):
    id: int
    created_at: datetime
