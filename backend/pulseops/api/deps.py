from typing import Generator, Optional

from pulseops.db.session import SessionLocal
from pulseops.schemas.base import MAX_ID


def get_db() -> Generator:
    """One session per request, rolled back if the handler raises"""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def parse_id(value: str) -> Optional[int]:
    """Coerce a numeric path segment.

    Only plain ASCII digits within the BIGINT range are accepted. Anything
    else (signs, underscores, whitespace, oversized numbers) comes back as
    None, which no row can match, so the endpoint answers 404 like any other
    missing id.
    """
    if not isinstance(value, str) or not (value.isascii() and value.isdigit()):
        return None
    id = int(value)
    if id > MAX_ID:
        return None
    return id
