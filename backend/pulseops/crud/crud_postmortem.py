from typing import List, Optional
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.postmortem import Postmortem
from pulseops.schemas.postmortem import PostmortemCreate, PostmortemUpdate


class CRUDPostmortem(CRUDBase[Postmortem, PostmortemCreate, PostmortemUpdate]):
    def list(self, db: Session) -> List[Postmortem]:
        return db.query(Postmortem).order_by(Postmortem.created_at.desc(), Postmortem.id.desc()).all()

    def get_by_incident(self, db: Session, *, incident_id: str) -> Optional[Postmortem]:
        """Latest postmortem written for an incident"""
        return (
            db.query(Postmortem)
            .filter(Postmortem.incident_id == incident_id)
            .order_by(Postmortem.created_at.desc(), Postmortem.id.desc())
            .first()
        )


postmortem = CRUDPostmortem(Postmortem)
