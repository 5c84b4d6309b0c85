from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class EscalationPolicy(Base):
    __tablename__ = "escalation_policies"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    # [{level, escalateAfter, target}, ...]
    rules = Column(JSON, nullable=False, default=list)
    is_default = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
