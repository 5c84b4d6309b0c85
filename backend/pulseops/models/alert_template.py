from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class AlertTemplate(Base):
    __tablename__ = "alert_templates"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(50), nullable=False)
    severity = Column(String(20), nullable=False)
    # {metric, operator, threshold}
    condition = Column(JSON, nullable=False)
    is_built_in = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
