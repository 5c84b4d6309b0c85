"""Dashboard share link API endpoints"""
from datetime import datetime
from typing import Any, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas import DashboardResponse, PanelResponse
from pulseops.schemas.dashboard_share import ShareCreateRequest, SharedDashboardResponse

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["shares"]


def _get_dashboard_or_404(db: Session, dashboard_id: str):
    dashboard = crud.dashboard.get(db, deps.parse_id(dashboard_id))
    if not dashboard:
        raise not_found("Dashboard")
    return dashboard


@contract_route(router, routes["list"])
def list_shares(
    *,
    db: Session = Depends(deps.get_db),
    dashboard_id: str,
) -> Any:
    dashboard = _get_dashboard_or_404(db, dashboard_id)
    return crud.dashboard_share.get_by_dashboard(db, dashboard_id=dashboard.id)


@contract_route(router, routes["create"])
def create_share(
    *,
    db: Session = Depends(deps.get_db),
    dashboard_id: str,
    share_in: Optional[ShareCreateRequest] = None,
) -> Any:
    """Create a public link, optionally expiring at expiresAt"""
    dashboard = _get_dashboard_or_404(db, dashboard_id)
    share = crud.dashboard_share.create_for_dashboard(
        db,
        dashboard_id=dashboard.id,
        expires_at=share_in.expires_at if share_in else None,
    )
    logger.info(f"Created share link {share.id} for dashboard {dashboard.id}")
    return share


@contract_route(router, routes["resolve"])
def resolve_share(
    *,
    db: Session = Depends(deps.get_db),
    token: str,
) -> Any:
    """Dashboard and panels behind a share token

    Unknown or deactivated tokens are 404, expired ones 410.
    """
    share = crud.dashboard_share.get_by_token(db, token=token)
    if not share or not share.is_active:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Share link not found or expired")
    if share.expires_at and share.expires_at < datetime.utcnow():
        raise HTTPException(status_code=status.HTTP_410_GONE, detail="Share link has expired")

    panels = crud.panel.get_by_dashboard(db, dashboard_id=share.dashboard_id)
    return SharedDashboardResponse(
        dashboard=DashboardResponse.model_validate(share.dashboard),
        panels=[PanelResponse.model_validate(panel) for panel in panels],
    )


@contract_route(router, routes["delete"])
def delete_share(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.dashboard_share.remove(db, id=deps.parse_id(id)):
        raise not_found("Share link")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
