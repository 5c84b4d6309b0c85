from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.slo import Slo
from pulseops.schemas.slo import SloCreate, SloUpdate


class CRUDSlo(CRUDBase[Slo, SloCreate, SloUpdate]):
    def list(self, db: Session) -> List[Slo]:
        return db.query(Slo).order_by(Slo.created_at, Slo.id).all()

    def count(self, db: Session) -> int:
        return db.query(Slo).count()


slo = CRUDSlo(Slo)
