r"""Integration connect/disconnect flow

State machine per service:

    disconnected --(submit key)--> shape check --ok--> connected
                                              \--fail--> disconnected (401)

The key is only checked for shape. No call is made to the third-party
service and the key is never written anywhere, logs included.
"""
import logging
import re
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from pulseops import crud
from pulseops.core.config import settings
from pulseops.models.integration import Integration
from pulseops.schemas.integration import IntegrationConnectRequest, IntegrationUpsert

logger = logging.getLogger(__name__)

API_KEY_PATTERN = re.compile(r"^[A-Za-z0-9+/_=-]+$")


def validate_api_key(api_key: Any, min_length: Optional[int] = None) -> bool:
    """Check that api_key looks like an API key.

    Args:
        api_key: submitted key
        min_length: minimum length after trimming, defaults to settings.API_KEY_MIN_LENGTH

    Returns:
        True when the key is a non-empty string, at least min_length long once
        trimmed, made only of [A-Za-z0-9+/_=-]
    """
    if not api_key or not isinstance(api_key, str):
        return False

    if min_length is None:
        min_length = settings.API_KEY_MIN_LENGTH

    key = api_key.strip()
    if len(key) < min_length:
        return False

    return API_KEY_PATTERN.match(key) is not None


class IntegrationService:
    """Integration service"""

    def connect(self, db: Session, *, request: IntegrationConnectRequest) -> Optional[Integration]:
        """Validate the submitted key and mark the service connected.

        Returns:
            The upserted integration, None when the key is rejected
        """
        if not validate_api_key(request.api_key):
            logger.info(f"Rejected API key for integration {request.service_id}")
            return None

        integration = crud.integration.upsert(
            db,
            obj_in=IntegrationUpsert(
                service_id=request.service_id,
                service_name=request.service_name,
                category=request.category,
                status="connected",
                last_validated_at=datetime.utcnow(),
            ),
        )
        logger.info(f"Integration {request.service_id} connected")
        return integration

    def disconnect(self, db: Session, *, service_id: str) -> bool:
        removed = crud.integration.remove_by_service_id(db, service_id=service_id)
        if removed is None:
            return False
        logger.info(f"Integration {service_id} disconnected")
        return True


integration_service = IntegrationService()
