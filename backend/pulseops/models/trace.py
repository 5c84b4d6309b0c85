"""APM trace and span models"""
from sqlalchemy import Column, String, Integer, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class Trace(Base):
    """One request as seen by the root service"""
    __tablename__ = "traces"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    trace_id = Column(String(100), nullable=False, unique=True, index=True)
    root_span_id = Column(String(100), nullable=True)
    service_name = Column(String(255), nullable=False, index=True)
    operation_name = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False)  # milliseconds
    status = Column(String(20), nullable=False, default="ok")  # ok/error
    start_time = Column(TIMESTAMP, nullable=False, index=True)
    end_time = Column(TIMESTAMP, nullable=True)
    # "metadata" is reserved on declarative classes
    trace_metadata = Column("metadata", JSON, nullable=False, default=dict)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())


class Span(Base):
    """Spans, linked to their trace by the string trace_id"""
    __tablename__ = "spans"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    span_id = Column(String(100), nullable=False, unique=True, index=True)
    trace_id = Column(String(100), nullable=False, index=True)
    parent_span_id = Column(String(100), nullable=True)
    service_name = Column(String(255), nullable=False)
    operation_name = Column(String(255), nullable=False)
    duration = Column(Integer, nullable=False)
    status = Column(String(20), nullable=False, default="ok")
    start_time = Column(TIMESTAMP, nullable=False)
    end_time = Column(TIMESTAMP, nullable=True)
    tags = Column(JSON, nullable=False, default=dict)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
