"""Integration CRUD operations"""
from typing import List, Optional
from sqlalchemy.orm import Session
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert

from pulseops.crud.base import CRUDBase
from pulseops.models.integration import Integration
from pulseops.schemas.integration import IntegrationUpsert


class CRUDIntegration(CRUDBase[Integration, IntegrationUpsert, IntegrationUpsert]):
    """Integration CRUD operations, rows are keyed by service_id"""

    def list(self, db: Session) -> List[Integration]:
        return db.query(Integration).order_by(Integration.created_at, Integration.id).all()

    def get_by_service_id(self, db: Session, *, service_id: str) -> Optional[Integration]:
        return db.query(Integration).filter(Integration.service_id == service_id).first()

    def upsert(self, db: Session, *, obj_in: IntegrationUpsert) -> Integration:
        """Insert or update the row for obj_in.service_id in one statement

        Relies on the uq_integrations_service_id constraint, so two concurrent
        connects for the same service end up as a single row.

        Args:
            obj_in: connection outcome (never the API key)

        Returns:
            The persisted integration
        """
        values = obj_in.model_dump()
        update_values = {k: v for k, v in values.items() if k != "service_id"}

        dialect = db.get_bind().dialect.name
        if dialect == "mysql":
            stmt = mysql_insert(Integration).values(**values)
            stmt = stmt.on_duplicate_key_update(**update_values)
        elif dialect == "postgresql":
            stmt = postgresql_insert(Integration).values(**values)
            stmt = stmt.on_conflict_do_update(index_elements=["service_id"], set_=update_values)
        elif dialect == "sqlite":
            stmt = sqlite_insert(Integration).values(**values)
            stmt = stmt.on_conflict_do_update(index_elements=["service_id"], set_=update_values)
        else:
            raise NotImplementedError(f"Integration upsert is not supported on {dialect}")

        try:
            db.execute(stmt)
            db.commit()
        except Exception:
            db.rollback()
            raise

        return db.query(Integration).filter(
            Integration.service_id == obj_in.service_id
        ).populate_existing().one()

    def remove_by_service_id(self, db: Session, *, service_id: str) -> Optional[Integration]:
        integration = self.get_by_service_id(db, service_id=service_id)
        if integration is None:
            return None
        try:
            db.delete(integration)
            db.commit()
        except Exception:
            db.rollback()
            raise
        return integration


integration = CRUDIntegration(Integration)
