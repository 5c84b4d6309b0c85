"""Dashboard share CRUD operations"""
import secrets
import string
from typing import List, Optional
from datetime import datetime
from sqlalchemy.orm import Session

from pulseops.core.config import settings
from pulseops.crud.base import CRUDBase
from pulseops.models.dashboard_share import DashboardShare
from pulseops.schemas.dashboard_share import ShareCreate

TOKEN_ALPHABET = string.ascii_letters + string.digits


def generate_share_token(length: Optional[int] = None) -> str:
    """Random alphanumeric token for a public share link"""
    length = length or settings.SHARE_TOKEN_LENGTH
    return "".join(secrets.choice(TOKEN_ALPHABET) for _ in range(length))


class CRUDDashboardShare(CRUDBase[DashboardShare, ShareCreate, ShareCreate]):

    def get_by_dashboard(self, db: Session, *, dashboard_id: int) -> List[DashboardShare]:
        return db.query(DashboardShare).filter(
            DashboardShare.dashboard_id == dashboard_id
        ).order_by(DashboardShare.created_at, DashboardShare.id).all()

    def get_by_token(self, db: Session, *, token: str) -> Optional[DashboardShare]:
        return db.query(DashboardShare).filter(DashboardShare.share_token == token).first()

    def create_for_dashboard(
        self,
        db: Session,
        *,
        dashboard_id: int,
        expires_at: Optional[datetime] = None
    ) -> DashboardShare:
        """Create an active share link with a fresh token

        Args:
            dashboard_id: Dashboard ID
            expires_at: naive UTC expiry, None for a link that never expires

        Returns:
            The created share
        """
        obj_in = ShareCreate(
            dashboard_id=dashboard_id,
            share_token=generate_share_token(),
            expires_at=expires_at,
            is_active=True,
        )
        return self.create(db, obj_in=obj_in)


dashboard_share = CRUDDashboardShare(DashboardShare)
