"""Trace and span API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import conflict, not_found
from pulseops.schemas.trace import SpanCreate, TraceCreate

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["traces"]
span_routes = api["spans"]


@contract_route(router, routes["list"])
def list_traces(*, db: Session = Depends(deps.get_db)) -> Any:
    """All traces, most recent first"""
    return crud.trace.list(db)


@contract_route(router, routes["get"])
def get_trace(
    *,
    db: Session = Depends(deps.get_db),
    trace_id: str,
) -> Any:
    """A trace together with its spans"""
    trace = crud.trace.get_by_trace_id(db, trace_id=trace_id)
    if not trace:
        raise not_found("Trace")
    spans = crud.span.get_by_trace_id(db, trace_id=trace_id)
    return {"trace": trace, "spans": spans}


@contract_route(router, routes["create"])
def create_trace(
    *,
    db: Session = Depends(deps.get_db),
    trace_in: TraceCreate,
) -> Any:
    if crud.trace.get_by_trace_id(db, trace_id=trace_in.trace_id):
        raise conflict(f"Trace {trace_in.trace_id} already exists")
    try:
        return crud.trace.create(db, obj_in=trace_in)
    except IntegrityError:
        logger.warning(f"Duplicate trace id {trace_in.trace_id}")
        raise conflict(f"Trace {trace_in.trace_id} already exists")


@contract_route(router, span_routes["create"])
def create_span(
    *,
    db: Session = Depends(deps.get_db),
    span_in: SpanCreate,
) -> Any:
    """Attach a span to an existing trace"""
    if not crud.trace.get_by_trace_id(db, trace_id=span_in.trace_id):
        raise not_found("Trace")
    if crud.span.get_by_span_id(db, span_id=span_in.span_id):
        raise conflict(f"Span {span_in.span_id} already exists")
    try:
        return crud.span.create(db, obj_in=span_in)
    except IntegrityError:
        logger.warning(f"Duplicate span id {span_in.span_id}")
        raise conflict(f"Span {span_in.span_id} already exists")
