"""Signal correlation API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import conflict, not_found
from pulseops.schemas.signal_correlation import CorrelationCreate, CorrelationUpdate

router = APIRouter()

routes = api["correlations"]


@contract_route(router, routes["list"])
def list_correlations(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.signal_correlation.list(db)


@contract_route(router, routes["get"])
def get_correlation(
    *,
    db: Session = Depends(deps.get_db),
    correlation_id: str,
) -> Any:
    correlation = crud.signal_correlation.get_by_correlation_id(db, correlation_id=correlation_id)
    if not correlation:
        raise not_found("Correlation")
    return correlation


@contract_route(router, routes["create"])
def create_correlation(
    *,
    db: Session = Depends(deps.get_db),
    correlation_in: CorrelationCreate,
) -> Any:
    message = f"Correlation {correlation_in.correlation_id} already exists"
    if crud.signal_correlation.get_by_correlation_id(db, correlation_id=correlation_in.correlation_id):
        raise conflict(message)
    try:
        return crud.signal_correlation.create(db, obj_in=correlation_in)
    except IntegrityError:
        raise conflict(message)


@contract_route(router, routes["update"])
def update_correlation(
    *,
    db: Session = Depends(deps.get_db),
    correlation_id: str,
    correlation_in: CorrelationUpdate,
) -> Any:
    """Partial update, e.g. moving a correlation to investigating or resolved"""
    correlation = crud.signal_correlation.update_by_correlation_id(
        db, correlation_id=correlation_id, obj_in=correlation_in
    )
    if not correlation:
        raise not_found("Correlation")
    return correlation
