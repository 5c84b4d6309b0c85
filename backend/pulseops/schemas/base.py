"""Shared pydantic bases for request/response schemas"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

# Opaque JSON payloads (chart series, grid layout, connection details)
JSONBlob = Union[Dict[str, Any], List[Any]]

# Largest value a BIGINT primary key can hold
MAX_ID = 2 ** 63 - 1


class CamelModel(BaseModel):
    """snake_case attributes, camelCase on the wire"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


def reject_null(value: Any, info) -> Any:
    """Used by partial-update schemas: a field may be omitted but not nulled
    when its column is NOT NULL."""
    if value is None:
        raise ValueError(f"{info.field_name} may not be null")
    return value


def to_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Timestamps are stored as naive UTC"""
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value
