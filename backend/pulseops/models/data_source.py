from sqlalchemy import Column, String, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class DataSource(Base):
    __tablename__ = "data_sources"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(50), nullable=False)
    # Connection details, never used to open a live connection
    config = Column(JSON, nullable=False)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
