"""Alert CRUD operations"""
from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.alert import Alert
from pulseops.schemas.alert import AlertCreate, AlertStatusUpdate


class CRUDAlert(CRUDBase[Alert, AlertCreate, AlertStatusUpdate]):
    """Alert CRUD operations"""

    def list(self, db: Session) -> List[Alert]:
        """All alerts, newest first"""
        return db.query(Alert).order_by(Alert.created_at.desc(), Alert.id.desc()).all()

    def count(self, db: Session) -> int:
        return db.query(Alert).count()

    def update_status(
        self,
        db: Session,
        *,
        id: int,
        status: str,
        resolved_at: Optional[datetime] = None
    ) -> Optional[Alert]:
        """Set an alert's status

        Resolving stamps resolved_at (now when not given). Resolving an
        already resolved alert only moves resolved_at.

        Args:
            id: Alert ID
            status: active/resolved
            resolved_at: naive UTC timestamp

        Returns:
            Updated alert, None when it does not exist
        """
        update_data = {"status": status}
        if status == "resolved":
            update_data["resolved_at"] = resolved_at or datetime.utcnow()
        return self.update_by_id(db, id=id, obj_in=update_data)


alert = CRUDAlert(Alert)
