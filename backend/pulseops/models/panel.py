"""Panel model"""
from sqlalchemy import Column, BigInteger, String, TIMESTAMP, JSON, ForeignKey
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from pulseops.db.base_class import Base, IdType


class Panel(Base):
    """Dashboard panels table

    data_config and layout_config are opaque JSON blobs (series data,
    grid position) passed through untouched.
    """
    __tablename__ = "panels"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    dashboard_id = Column(BigInteger, ForeignKey("dashboards.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)
    data_config = Column(JSON, nullable=False)
    layout_config = Column(JSON, nullable=False, default=dict)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())

    dashboard = relationship("Dashboard", back_populates="panels")
