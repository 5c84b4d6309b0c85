from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.saved_query import SavedQueryCreate

router = APIRouter()

routes = api["savedQueries"]


@contract_route(router, routes["list"])
def list_saved_queries(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.saved_query.list(db)


@contract_route(router, routes["create"])
def create_saved_query(
    *,
    db: Session = Depends(deps.get_db),
    query_in: SavedQueryCreate,
) -> Any:
    return crud.saved_query.create(db, obj_in=query_in)


@contract_route(router, routes["delete"])
def delete_saved_query(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.saved_query.remove(db, id=deps.parse_id(id)):
        raise not_found("Saved query")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
