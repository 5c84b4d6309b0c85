"""Panel API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found, validation_error
from pulseops.schemas.panel import PanelCreate, PanelUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["panels"]


@contract_route(router, routes["list"])
def list_panels(
    *,
    db: Session = Depends(deps.get_db),
    dashboard_id: str,
) -> Any:
    """Panels of a dashboard, empty for unknown dashboards"""
    dashboard_pk = deps.parse_id(dashboard_id)
    if dashboard_pk is None:
        return []
    return crud.panel.get_by_dashboard(db, dashboard_id=dashboard_pk)


@contract_route(router, routes["create"])
def create_panel(
    *,
    db: Session = Depends(deps.get_db),
    panel_in: PanelCreate,
) -> Any:
    """Add a panel to a dashboard"""
    if not crud.dashboard.get(db, panel_in.dashboard_id):
        raise not_found("Dashboard")

    try:
        panel = crud.panel.create(db, obj_in=panel_in)
    except IntegrityError:
        # Dashboard removed between the check and the insert
        logger.warning(f"Panel insert rejected for dashboard {panel_in.dashboard_id}")
        raise validation_error("Dashboard does not exist", field="dashboardId")
    return panel


@contract_route(router, routes["update"])
def update_panel(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    panel_in: PanelUpdate,
) -> Any:
    """Partial update of a panel"""
    if panel_in.dashboard_id is not None and not crud.dashboard.get(db, panel_in.dashboard_id):
        raise validation_error("Dashboard does not exist", field="dashboardId")

    try:
        panel = crud.panel.update_by_id(db, id=deps.parse_id(id), obj_in=panel_in)
    except IntegrityError:
        raise validation_error("Dashboard does not exist", field="dashboardId")
    if not panel:
        raise not_found("Panel")
    return panel


@contract_route(router, routes["delete"])
def delete_panel(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    """Delete a panel"""
    if not crud.panel.remove(db, id=deps.parse_id(id)):
        raise not_found("Panel")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
