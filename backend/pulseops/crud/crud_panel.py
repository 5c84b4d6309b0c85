"""Panel CRUD operations"""
from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.panel import Panel
from pulseops.schemas.panel import PanelCreate, PanelUpdate


class CRUDPanel(CRUDBase[Panel, PanelCreate, PanelUpdate]):

    def get_by_dashboard(self, db: Session, *, dashboard_id: int) -> List[Panel]:
        """Panels of one dashboard in creation order

        Args:
            dashboard_id: Dashboard ID

        Returns:
            Panel list, empty for unknown dashboards
        """
        return db.query(Panel).filter(
            Panel.dashboard_id == dashboard_id
        ).order_by(Panel.created_at, Panel.id).all()


panel = CRUDPanel(Panel)
