from sqlalchemy import Column, String, Boolean, TIMESTAMP, JSON
from sqlalchemy.sql import func

from pulseops.db.base_class import Base, IdType


class NotificationChannel(Base):
    __tablename__ = "notification_channels"

    id = Column(IdType, primary_key=True, index=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    type = Column(String(20), nullable=False)  # email/slack/pagerduty/webhook/sms
    config = Column(JSON, nullable=False, default=dict)
    is_default = Column(Boolean, nullable=False, default=False)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(TIMESTAMP, nullable=False, server_default=func.now())
