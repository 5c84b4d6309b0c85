from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.alert_template import AlertTemplateCreate

router = APIRouter()

routes = api["alertTemplates"]


@contract_route(router, routes["list"])
def list_alert_templates(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.alert_template.list(db)


@contract_route(router, routes["create"])
def create_alert_template(
    *,
    db: Session = Depends(deps.get_db),
    template_in: AlertTemplateCreate,
) -> Any:
    return crud.alert_template.create(db, obj_in=template_in)


@contract_route(router, routes["delete"])
def delete_alert_template(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.alert_template.remove(db, id=deps.parse_id(id)):
        raise not_found("Alert template")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
