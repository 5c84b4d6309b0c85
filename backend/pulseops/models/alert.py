"""Alert model"""
from sqlalchemy import Column, String, Text, Float, TIMESTAMP
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class Alert(Base):
    """Alerts table"""
    __tablename__ = "alerts"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    severity = Column(String(20), nullable=False)  # critical/warning/info
    status = Column(String(20), nullable=False, default="active", index=True)  # active/resolved
    threshold_value = Column(Float, nullable=True)
    current_value = Column(Float, nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), index=True)
    resolved_at = Column(TIMESTAMP, nullable=True)
