from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.on_call_schedule import OnCallScheduleCreate, OnCallScheduleUpdate

router = APIRouter()

routes = api["onCall"]


@contract_route(router, routes["list"])
def list_schedules(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.on_call_schedule.list(db)


@contract_route(router, routes["get"])
def get_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    schedule = crud.on_call_schedule.get(db, deps.parse_id(id))
    if not schedule:
        raise not_found("Schedule")
    return schedule


@contract_route(router, routes["create"])
def create_schedule(
    *,
    db: Session = Depends(deps.get_db),
    schedule_in: OnCallScheduleCreate,
) -> Any:
    return crud.on_call_schedule.create(db, obj_in=schedule_in)


@contract_route(router, routes["update"])
def update_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    schedule_in: OnCallScheduleUpdate,
) -> Any:
    schedule = crud.on_call_schedule.update_by_id(db, id=deps.parse_id(id), obj_in=schedule_in)
    if not schedule:
        raise not_found("Schedule")
    return schedule


@contract_route(router, routes["delete"])
def delete_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.on_call_schedule.remove(db, id=deps.parse_id(id)):
        raise not_found("Schedule")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
