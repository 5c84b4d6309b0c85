"""Dashboard model"""
from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from pulseops.db.base_class import Base, IdType


class Dashboard(Base):
    """Dashboards table"""
    __tablename__ = "dashboards"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    is_favorite = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())

    # Deleting a dashboard removes its panels, share links and report schedules
    panels = relationship(
        "Panel", back_populates="dashboard", cascade="all, delete-orphan", passive_deletes=True
    )
    shares = relationship(
        "DashboardShare", back_populates="dashboard", cascade="all, delete-orphan", passive_deletes=True
    )
    report_schedules = relationship(
        "ReportSchedule", back_populates="dashboard", cascade="all, delete-orphan", passive_deletes=True
    )
