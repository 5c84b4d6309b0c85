"""Data source API endpoints

Connection details are stored as given, no connection is attempted.
"""
from typing import Any
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.schemas.data_source import DataSourceCreate

router = APIRouter()

routes = api["dataSources"]


@contract_route(router, routes["list"])
def list_data_sources(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.data_source.list(db)


@contract_route(router, routes["create"])
def create_data_source(
    *,
    db: Session = Depends(deps.get_db),
    data_source_in: DataSourceCreate,
) -> Any:
    return crud.data_source.create(db, obj_in=data_source_in)
