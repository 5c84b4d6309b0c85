from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.saved_query import SavedQuery
from pulseops.schemas.saved_query import SavedQueryCreate


class CRUDSavedQuery(CRUDBase[SavedQuery, SavedQueryCreate, SavedQueryCreate]):
    def list(self, db: Session) -> List[SavedQuery]:
        """Newest first"""
        return db.query(SavedQuery).order_by(SavedQuery.created_at.desc(), SavedQuery.id.desc()).all()


saved_query = CRUDSavedQuery(SavedQuery)
