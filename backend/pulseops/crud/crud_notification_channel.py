from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.notification_channel import NotificationChannel
from pulseops.schemas.notification_channel import NotificationChannelCreate, NotificationChannelUpdate


class CRUDNotificationChannel(CRUDBase[NotificationChannel, NotificationChannelCreate, NotificationChannelUpdate]):
    def list(self, db: Session) -> List[NotificationChannel]:
        return db.query(NotificationChannel).order_by(NotificationChannel.created_at, NotificationChannel.id).all()


notification_channel = CRUDNotificationChannel(NotificationChannel)
