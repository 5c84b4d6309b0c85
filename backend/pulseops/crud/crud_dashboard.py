"""Dashboard CRUD operations"""
from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.dashboard import Dashboard
from pulseops.schemas.dashboard import DashboardCreate, DashboardUpdate


class CRUDDashboard(CRUDBase[Dashboard, DashboardCreate, DashboardUpdate]):
    """Dashboard CRUD operations"""

    def list(self, db: Session) -> List[Dashboard]:
        """All dashboards, oldest first"""
        return db.query(Dashboard).order_by(Dashboard.created_at, Dashboard.id).all()

    def count(self, db: Session) -> int:
        return db.query(Dashboard).count()


dashboard = CRUDDashboard(Dashboard)
