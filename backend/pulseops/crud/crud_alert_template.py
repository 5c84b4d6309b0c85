from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.alert_template import AlertTemplate
from pulseops.schemas.alert_template import AlertTemplateCreate


class CRUDAlertTemplate(CRUDBase[AlertTemplate, AlertTemplateCreate, AlertTemplateCreate]):
    def list(self, db: Session) -> List[AlertTemplate]:
        return db.query(AlertTemplate).order_by(AlertTemplate.created_at, AlertTemplate.id).all()

    def count(self, db: Session) -> int:
        return db.query(AlertTemplate).count()


alert_template = CRUDAlertTemplate(AlertTemplate)
