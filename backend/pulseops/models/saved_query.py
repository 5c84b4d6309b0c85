from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class SavedQuery(Base):
    __tablename__ = "saved_queries"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    query_type = Column(String(20), nullable=False)  # metrics/logs/traces
    query = Column(JSON, nullable=False)
    is_public = Column(Boolean, nullable=False, default=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), index=True)
