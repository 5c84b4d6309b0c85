from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.webhook import Webhook
from pulseops.schemas.webhook import WebhookCreate, WebhookUpdate


class CRUDWebhook(CRUDBase[Webhook, WebhookCreate, WebhookUpdate]):
    def list(self, db: Session) -> List[Webhook]:
        return db.query(Webhook).order_by(Webhook.created_at, Webhook.id).all()


webhook = CRUDWebhook(Webhook)
