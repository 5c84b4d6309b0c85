from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.on_call_schedule import OnCallSchedule
from pulseops.schemas.on_call_schedule import OnCallScheduleCreate, OnCallScheduleUpdate


class CRUDOnCallSchedule(CRUDBase[OnCallSchedule, OnCallScheduleCreate, OnCallScheduleUpdate]):
    def list(self, db: Session) -> List[OnCallSchedule]:
        return db.query(OnCallSchedule).order_by(OnCallSchedule.created_at, OnCallSchedule.id).all()


on_call_schedule = CRUDOnCallSchedule(OnCallSchedule)
