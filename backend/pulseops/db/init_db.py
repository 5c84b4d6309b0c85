import logging
from typing import Optional

from sqlalchemy.engine import Engine

from pulseops.db.base import Base
from pulseops.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    # Create tables
    Base.metadata.create_all(bind=bind or default_engine)
    logger.info("Tables created")
