"""Incident timeline API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.schemas.incident_timeline import TimelineEventCreate

router = APIRouter()

routes = api["incidentTimeline"]


@contract_route(router, routes["list"])
def get_incident_timeline(
    *,
    db: Session = Depends(deps.get_db),
    incident_id: str,
) -> Any:
    """Events of an incident in the order they happened, empty for unknown incidents"""
    return crud.incident_timeline.get_by_incident(db, incident_id=incident_id)


@contract_route(router, routes["create"])
def add_timeline_event(
    *,
    db: Session = Depends(deps.get_db),
    incident_id: str,
    event_in: TimelineEventCreate,
) -> Any:
    return crud.incident_timeline.add_event(db, incident_id=incident_id, obj_in=event_in)
