from typing import Any, Dict, List, Optional, Union
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.signal_correlation import SignalCorrelation
from pulseops.schemas.signal_correlation import CorrelationCreate, CorrelationUpdate


class CRUDSignalCorrelation(CRUDBase[SignalCorrelation, CorrelationCreate, CorrelationUpdate]):
    def list(self, db: Session) -> List[SignalCorrelation]:
        return (
            db.query(SignalCorrelation)
            .order_by(SignalCorrelation.created_at.desc(), SignalCorrelation.id.desc())
            .all()
        )

    def get_by_correlation_id(self, db: Session, *, correlation_id: str) -> Optional[SignalCorrelation]:
        return (
            db.query(SignalCorrelation)
            .filter(SignalCorrelation.correlation_id == correlation_id)
            .first()
        )

    def update_by_correlation_id(
        self,
        db: Session,
        *,
        correlation_id: str,
        obj_in: Union[CorrelationUpdate, Dict[str, Any]]
    ) -> Optional[SignalCorrelation]:
        db_obj = self.get_by_correlation_id(db, correlation_id=correlation_id)
        if db_obj is None:
            return None
        return self.update(db, db_obj=db_obj, obj_in=obj_in)

    def count(self, db: Session) -> int:
        return db.query(SignalCorrelation).count()


signal_correlation = CRUDSignalCorrelation(SignalCorrelation)
