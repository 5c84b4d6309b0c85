"""Report schedule API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found, validation_error
from pulseops.schemas.report_schedule import ReportScheduleCreate, ReportScheduleUpdate

router = APIRouter()

routes = api["reportSchedules"]


@contract_route(router, routes["list"])
def list_report_schedules(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.report_schedule.list(db)


@contract_route(router, routes["get"])
def get_report_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    schedule = crud.report_schedule.get(db, deps.parse_id(id))
    if not schedule:
        raise not_found("Report schedule")
    return schedule


@contract_route(router, routes["create"])
def create_report_schedule(
    *,
    db: Session = Depends(deps.get_db),
    schedule_in: ReportScheduleCreate,
) -> Any:
    """Schedule a report, optionally bound to a dashboard"""
    if schedule_in.dashboard_id is not None and not crud.dashboard.get(db, schedule_in.dashboard_id):
        raise not_found("Dashboard")
    try:
        return crud.report_schedule.create(db, obj_in=schedule_in)
    except IntegrityError:
        raise validation_error("Dashboard does not exist", field="dashboardId")


@contract_route(router, routes["update"])
def update_report_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    schedule_in: ReportScheduleUpdate,
) -> Any:
    if schedule_in.dashboard_id is not None and not crud.dashboard.get(db, schedule_in.dashboard_id):
        raise validation_error("Dashboard does not exist", field="dashboardId")
    try:
        schedule = crud.report_schedule.update_by_id(db, id=deps.parse_id(id), obj_in=schedule_in)
    except IntegrityError:
        raise validation_error("Dashboard does not exist", field="dashboardId")
    if not schedule:
        raise not_found("Report schedule")
    return schedule


@contract_route(router, routes["delete"])
def delete_report_schedule(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.report_schedule.remove(db, id=deps.parse_id(id)):
        raise not_found("Report schedule")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
