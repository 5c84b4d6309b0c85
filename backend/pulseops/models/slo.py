"""SLO model"""
from sqlalchemy import Column, String, Text, Integer, TIMESTAMP
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class Slo(Base):
    """Service level objectives

    Percentages are stored as scaled integers: 999 means 99.9%,
    9999 means 99.99%.
    """
    __tablename__ = "slos"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    service_id = Column(String(100), nullable=False, index=True)
    sli_type = Column(String(20), nullable=False)  # availability/latency/error_rate
    target_percentage = Column(Integer, nullable=False)
    window_days = Column(Integer, nullable=False, default=30)
    current_value = Column(Integer, nullable=True)
    error_budget_remaining = Column(Integer, nullable=True)
    status = Column(String(20), nullable=False, default="healthy")  # healthy/at_risk/breached
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
