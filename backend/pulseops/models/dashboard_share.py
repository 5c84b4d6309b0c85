"""Dashboard share link model"""
from sqlalchemy import Column, BigInteger, String, Boolean, TIMESTAMP, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from pulseops.db.base_class import Base, IdType


class DashboardShare(Base):
    """Public read-only links to a dashboard"""
    __tablename__ = "dashboard_shares"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    dashboard_id = Column(BigInteger, ForeignKey("dashboards.id", ondelete="CASCADE"), nullable=False, index=True)
    share_token = Column(String(64), nullable=False, unique=True, index=True)
    expires_at = Column(TIMESTAMP, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    dashboard = relationship("Dashboard", back_populates="shares")
