"""Postmortem model"""
from sqlalchemy import Column, String, Text, Boolean, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class Postmortem(Base):
    """Incident write-ups"""
    __tablename__ = "postmortems"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    incident_id = Column(String(100), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    summary = Column(Text, nullable=True)
    impact = Column(Text, nullable=True)
    root_cause = Column(Text, nullable=True)
    status = Column(String(20), nullable=False, default="draft")  # draft/review/published
    ai_generated = Column(Boolean, nullable=False, default=False)
    participants = Column(JSON, nullable=False, default=list)
    lessons_learned = Column(JSON, nullable=False, default=list)
    action_items = Column(JSON, nullable=False, default=list)
    timeline = Column(JSON, nullable=False, default=list)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), index=True)
    updated_at = Column(TIMESTAMP, nullable=False, server_default=func.now(), onupdate=func.now())
