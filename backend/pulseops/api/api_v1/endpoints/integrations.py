"""Integration API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import CredentialErrorPayload, not_found
from pulseops.schemas.integration import IntegrationConnectRequest
from pulseops.services.integration_service import integration_service

router = APIRouter()

routes = api["integrations"]


@contract_route(router, routes["list"])
def list_integrations(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.integration.list(db)


@contract_route(router, routes["connect"])
def connect_integration(
    *,
    db: Session = Depends(deps.get_db),
    connect_in: IntegrationConnectRequest,
) -> Any:
    """Validate an API key and mark the service connected

    Connecting an already connected service refreshes its row.
    """
    integration = integration_service.connect(db, request=connect_in)
    if not integration:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=CredentialErrorPayload(
                message="Invalid API key. Please check your key and try again."
            ).model_dump(),
        )
    return integration


@contract_route(router, routes["disconnect"])
def disconnect_integration(
    *,
    db: Session = Depends(deps.get_db),
    service_id: str,
) -> Any:
    if not integration_service.disconnect(db, service_id=service_id):
        raise not_found("Integration")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
