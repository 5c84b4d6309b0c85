from typing import List
from sqlalchemy.orm import Session

from pulseops.crud.base import CRUDBase
from pulseops.models.data_source import DataSource
from pulseops.schemas.data_source import DataSourceCreate


class CRUDDataSource(CRUDBase[DataSource, DataSourceCreate, DataSourceCreate]):
    def list(self, db: Session) -> List[DataSource]:
        return db.query(DataSource).order_by(DataSource.created_at, DataSource.id).all()


data_source = CRUDDataSource(DataSource)
