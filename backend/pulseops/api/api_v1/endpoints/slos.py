"""SLO API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.slo import SloCreate, SloUpdate

router = APIRouter()

routes = api["slos"]


@contract_route(router, routes["list"])
def list_slos(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.slo.list(db)


@contract_route(router, routes["get"])
def get_slo(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    slo = crud.slo.get(db, deps.parse_id(id))
    if not slo:
        raise not_found("SLO")
    return slo


@contract_route(router, routes["create"])
def create_slo(
    *,
    db: Session = Depends(deps.get_db),
    slo_in: SloCreate,
) -> Any:
    return crud.slo.create(db, obj_in=slo_in)


@contract_route(router, routes["update"])
def update_slo(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    slo_in: SloUpdate,
) -> Any:
    slo = crud.slo.update_by_id(db, id=deps.parse_id(id), obj_in=slo_in)
    if not slo:
        raise not_found("SLO")
    return slo


@contract_route(router, routes["delete"])
def delete_slo(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.slo.remove(db, id=deps.parse_id(id)):
        raise not_found("SLO")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
