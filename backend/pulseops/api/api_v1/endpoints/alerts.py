"""Alert API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.alert import AlertStatusUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["alerts"]


@contract_route(router, routes["list"])
def list_alerts(*, db: Session = Depends(deps.get_db)) -> Any:
    """All alerts, newest first"""
    return crud.alert.list(db)


@contract_route(router, routes["update"])
def update_alert_status(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    status_in: AlertStatusUpdate,
) -> Any:
    """Resolve an alert

    Transitions only go active -> resolved. Resolving twice just moves
    resolvedAt, asking to reopen a resolved alert is a 409.
    """
    alert = crud.alert.get(db, deps.parse_id(id))
    if not alert:
        raise not_found("Alert")

    if alert.status == "resolved" and status_in.status == "active":
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Resolved alerts cannot be reopened",
        )

    alert = crud.alert.update_status(
        db, id=alert.id, status=status_in.status, resolved_at=status_in.resolved_at
    )
    logger.info(f"Alert {alert.id} is {alert.status}")
    return alert
