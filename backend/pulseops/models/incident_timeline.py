from sqlalchemy import Column, String, TIMESTAMP, JSON

from pulseops.db.base_class import Base, IdType


class IncidentTimelineEvent(Base):
    """Events recorded against an incident id; incidents themselves are not stored"""
    __tablename__ = "incident_timeline_events"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    incident_id = Column(String(100), nullable=False, index=True)
    event_type = Column(String(50), nullable=False)
    event_data = Column(JSON, nullable=False, default=dict)
    user_id = Column(String(100), nullable=True)
    user_name = Column(String(255), nullable=True)
    timestamp = Column(TIMESTAMP, nullable=False)
