from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.notification_channel import NotificationChannelCreate, NotificationChannelUpdate

router = APIRouter()

routes = api["notificationChannels"]


@contract_route(router, routes["list"])
def list_channels(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.notification_channel.list(db)


@contract_route(router, routes["get"])
def get_channel(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    channel = crud.notification_channel.get(db, deps.parse_id(id))
    if not channel:
        raise not_found("Notification channel")
    return channel


@contract_route(router, routes["create"])
def create_channel(
    *,
    db: Session = Depends(deps.get_db),
    channel_in: NotificationChannelCreate,
) -> Any:
    return crud.notification_channel.create(db, obj_in=channel_in)


@contract_route(router, routes["update"])
def update_channel(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    channel_in: NotificationChannelUpdate,
) -> Any:
    channel = crud.notification_channel.update_by_id(db, id=deps.parse_id(id), obj_in=channel_in)
    if not channel:
        raise not_found("Notification channel")
    return channel


@contract_route(router, routes["delete"])
def delete_channel(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.notification_channel.remove(db, id=deps.parse_id(id)):
        raise not_found("Notification channel")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
