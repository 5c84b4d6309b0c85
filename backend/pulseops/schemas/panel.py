"""Panel schemas"""
from typing import Literal, Optional
from datetime import datetime
from pydantic import Field, field_validator

from pulseops.schemas.base import MAX_ID, CamelModel, JSONBlob, reject_null

PanelType = Literal["line", "bar", "area", "pie", "stat"]


class PanelBase(CamelModel):
    dashboard_id: int = Field(..., ge=1, le=MAX_ID, description="Owning dashboard")
    title: str = Field(..., min_length=1, max_length=255)
    type: PanelType = Field(..., description="Visualization: line/bar/area/pie/stat")
    data_config: JSONBlob = Field(..., description="Series data or query definition")
    layout_config: JSONBlob = Field(default_factory=dict, description="Grid position {x, y, w, h}")


class PanelCreate(PanelBase):
    """Request body for POST /api/panels"""
    pass


class PanelUpdate(CamelModel):
    """Request body for PUT /api/panels/:id, every field optional"""
    dashboard_id: Optional[int] = Field(None, ge=1, le=MAX_ID)
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    type: Optional[PanelType] = None
    data_config: Optional[JSONBlob] = None
    layout_config: Optional[JSONBlob] = None

    @field_validator(
        "dashboard_id", "title", "type", "data_config", "layout_config"
    )
    @classmethod
    def not_null(cls, v, info):
        return reject_null(v, info)


class PanelResponse(PanelBase):
    id: int
    created_at: datetime
