from sqlalchemy import Column, String, Text, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class OnCallSchedule(Base):
    __tablename__ = "on_call_schedules"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    rotation_type = Column(String(20), nullable=False, default="weekly")  # daily/weekly/custom
    timezone = Column(String(64), nullable=False, default="UTC")
    members = Column(JSON, nullable=False, default=list)
    current_on_call = Column(String(255), nullable=True)
    start_date = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
