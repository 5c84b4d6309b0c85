from datetime import datetime
from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.incident_timeline import IncidentTimelineEvent
from pulseops.schemas.incident_timeline import TimelineEventCreate


class CRUDIncidentTimeline(CRUDBase[IncidentTimelineEvent, TimelineEventCreate, TimelineEventCreate]):
    def get_by_incident(self, db: Session, *, incident_id: str) -> List[IncidentTimelineEvent]:
        """Events of an incident, oldest first"""
        return (
            db.query(IncidentTimelineEvent)
            .filter(IncidentTimelineEvent.incident_id == incident_id)
            .order_by(IncidentTimelineEvent.timestamp, IncidentTimelineEvent.id)
            .all()
        )

    def add_event(
        self, db: Session, *, incident_id: str, obj_in: TimelineEventCreate
    ) -> IncidentTimelineEvent:
        """Record an event, stamped with the current time"""
        db_obj = IncidentTimelineEvent(
            incident_id=incident_id,
            timestamp=datetime.utcnow(),
            **obj_in.model_dump(),
        )
        try:
            db.add(db_obj)
            db.commit()
        except Exception:
            db.rollback()
            raise
        db.refresh(db_obj)
        return db_obj


incident_timeline = CRUDIncidentTimeline(IncidentTimelineEvent)
