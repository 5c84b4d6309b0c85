from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.report_schedule import ReportSchedule
from pulseops.schemas.report_schedule import ReportScheduleCreate, ReportScheduleUpdate


class CRUDReportSchedule(CRUDBase[ReportSchedule, ReportScheduleCreate, ReportScheduleUpdate]):
    def list(self, db: Session) -> List[ReportSchedule]:
        return db.query(ReportSchedule).order_by(ReportSchedule.created_at, ReportSchedule.id).all()


report_schedule = CRUDReportSchedule(ReportSchedule)
