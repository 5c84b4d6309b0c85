"""Integration model"""
from sqlalchemy import Column, String, TIMESTAMP, UniqueConstraint
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class Integration(Base):
    """Third-party integrations keyed by the caller supplied service_id.

    Only the outcome of the key check is stored, there is deliberately
    no column for the API key itself.
    """
    __tablename__ = "integrations"
    __table_args__ = (
        UniqueConstraint("service_id", name="uq_integrations_service_id"),
    )

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    service_id = Column(String(100), nullable=False)
    service_name = Column(String(255), nullable=False)
    category = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, default="disconnected")
    last_validated_at = Column(TIMESTAMP, nullable=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
