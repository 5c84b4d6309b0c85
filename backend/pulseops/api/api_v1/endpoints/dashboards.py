"""Dashboard API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.dashboard import DashboardCreate, DashboardUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["dashboards"]


@contract_route(router, routes["list"])
def list_dashboards(
    *,
    db: Session = Depends(deps.get_db),
) -> Any:
    """All dashboards, oldest first"""
    return crud.dashboard.list(db)


@contract_route(router, routes["get"])
def get_dashboard(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    """Dashboard by id"""
    dashboard = crud.dashboard.get(db, deps.parse_id(id))
    if not dashboard:
        raise not_found("Dashboard")
    return dashboard


@contract_route(router, routes["create"])
def create_dashboard(
    *,
    db: Session = Depends(deps.get_db),
    dashboard_in: DashboardCreate,
) -> Any:
    """Create a dashboard"""
    dashboard = crud.dashboard.create(db, obj_in=dashboard_in)
    logger.info(f"Created dashboard {dashboard.id}")
    return dashboard


@contract_route(router, routes["update"])
def update_dashboard(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    dashboard_in: DashboardUpdate,
) -> Any:
    """Partial update, fields left out of the body keep their value"""
    dashboard = crud.dashboard.update_by_id(db, id=deps.parse_id(id), obj_in=dashboard_in)
    if not dashboard:
        raise not_found("Dashboard")
    return dashboard


@contract_route(router, routes["delete"])
def delete_dashboard(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    """Delete a dashboard together with its panels and share links"""
    removed = crud.dashboard.remove(db, id=deps.parse_id(id))
    if not removed:
        raise not_found("Dashboard")
    logger.info(f"Deleted dashboard {id}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
