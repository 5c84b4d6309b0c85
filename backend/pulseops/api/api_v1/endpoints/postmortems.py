"""Postmortem API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.postmortem import PostmortemCreate, PostmortemUpdate

router = APIRouter()

routes = api["postmortems"]


@contract_route(router, routes["list"])
def list_postmortems(*, db: Session = Depends(deps.get_db)) -> Any:
    """Newest first"""
    return crud.postmortem.list(db)


@contract_route(router, routes["get"])
def get_postmortem(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    postmortem = crud.postmortem.get(db, deps.parse_id(id))
    if not postmortem:
        raise not_found("Postmortem")
    return postmortem


@contract_route(router, routes["getByIncident"])
def get_incident_postmortem(
    *,
    db: Session = Depends(deps.get_db),
    incident_id: str,
) -> Any:
    """Latest postmortem of an incident"""
    postmortem = crud.postmortem.get_by_incident(db, incident_id=incident_id)
    if not postmortem:
        raise not_found("Postmortem")
    return postmortem


@contract_route(router, routes["create"])
def create_postmortem(
    *,
    db: Session = Depends(deps.get_db),
    postmortem_in: PostmortemCreate,
) -> Any:
    return crud.postmortem.create(db, obj_in=postmortem_in)


@contract_route(router, routes["update"])
def update_postmortem(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    postmortem_in: PostmortemUpdate,
) -> Any:
    postmortem = crud.postmortem.update_by_id(db, id=deps.parse_id(id), obj_in=postmortem_in)
    if not postmortem:
        raise not_found("Postmortem")
    return postmortem
