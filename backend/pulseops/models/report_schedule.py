from sqlalchemy import Column, BigInteger, String, Boolean, TIMESTAMP, JSON, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from pulseops.db.base_class import Base, IdType


class ReportSchedule(Base):
    """Recurring dashboard reports"""
    __tablename__ = "report_schedules"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    dashboard_id = Column(BigInteger, ForeignKey("dashboards.id", ondelete="CASCADE"), nullable=True, index=True)
    frequency = Column(String(20), nullable=False, default="weekly")  # daily/weekly/monthly
    format = Column(String(10), nullable=False, default="pdf")  # pdf/csv/png
    recipients = Column(JSON, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)
    last_sent_at = Column(TIMESTAMP, nullable=True)
    next_run_at = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    dashboard = relationship("Dashboard", back_populates="report_schedules")
