"""Webhook API endpoints"""
from typing import Any
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
import logging

from pulseops import crud
from pulseops.api import deps
from pulseops.api.contract import api, contract_route
from pulseops.core.errors import not_found
from pulseops.schemas.webhook import WebhookCreate, WebhookTestResponse, WebhookUpdate

router = APIRouter()
logger = logging.getLogger(__name__)

routes = api["webhooks"]


@contract_route(router, routes["list"])
def list_webhooks(*, db: Session = Depends(deps.get_db)) -> Any:
    return crud.webhook.list(db)


@contract_route(router, routes["get"])
def get_webhook(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    webhook = crud.webhook.get(db, deps.parse_id(id))
    if not webhook:
        raise not_found("Webhook")
    return webhook


@contract_route(router, routes["create"])
def create_webhook(
    *,
    db: Session = Depends(deps.get_db),
    webhook_in: WebhookCreate,
) -> Any:
    return crud.webhook.create(db, obj_in=webhook_in)


@contract_route(router, routes["update"])
def update_webhook(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
    webhook_in: WebhookUpdate,
) -> Any:
    webhook = crud.webhook.update_by_id(db, id=deps.parse_id(id), obj_in=webhook_in)
    if not webhook:
        raise not_found("Webhook")
    return webhook


@contract_route(router, routes["delete"])
def delete_webhook(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    if not crud.webhook.remove(db, id=deps.parse_id(id)):
        raise not_found("Webhook")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@contract_route(router, routes["test"])
def send_test_payload(
    *,
    db: Session = Depends(deps.get_db),
    id: str,
) -> Any:
    """Simulated delivery: nothing is sent and the webhook row is left unchanged"""
    webhook = crud.webhook.get(db, deps.parse_id(id))
    if not webhook:
        raise not_found("Webhook")
    logger.info(f"Test payload for webhook {webhook.id} ({webhook.type})")
    return WebhookTestResponse(success=True, message="Test payload sent successfully")
