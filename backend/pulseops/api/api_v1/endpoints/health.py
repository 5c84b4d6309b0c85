from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from pulseops.api import deps
from pulseops.api.contract import api, contract_route

router = APIRouter()
logger = logging.getLogger(__name__)


@contract_route(router, api["health"]["get"])
def health_check(*, db: Session = Depends(deps.get_db)) -> Any:
    """Liveness plus a trivial database round trip"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Health check database error: {e}")
        database = "unavailable"
    return {"status": "ok" if database == "ok" else "degraded", "database": database}
