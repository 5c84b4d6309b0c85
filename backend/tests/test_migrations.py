"""
Alembic revision tests

The initial revision is applied to a fresh SQLite file and compared with
the ORM metadata, so the two cannot drift apart unnoticed.
"""
import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import inspect

from pulseops.db.base import Base
from pulseops.db.session import create_db_engine

VERSIONS_DIR = Path(__file__).resolve().parents[1] / "alembic" / "versions"


def load_revision(name):
    location = importlib.util.spec_from_file_location(name, VERSIONS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(location)
    location.loader.exec_module(module)
    return module


def run(engine, step):
    with engine.begin() as connection:
        context = MigrationContext.configure(connection)
        with Operations.context(context):
            step()


@pytest.fixture
def revision():
    return load_revision("001_initial_tables")


@pytest.fixture
def migrated(tmp_path, revision):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'migrated.db'}")
    run(engine, revision.upgrade)
    yield engine
    engine.dispose()


class TestInitialRevision:
    """001_initial_tables"""

    def test_is_root_revision(self, revision):
        assert revision.revision == "001_initial_tables"
        assert revision.down_revision is None

    def test_creates_every_model_table(self, migrated):
        assert set(inspect(migrated).get_table_names()) == set(Base.metadata.tables)

    def test_columns_match_models(self, migrated):
        inspector = inspect(migrated)
        for name, table in Base.metadata.tables.items():
            migrated_columns = {column["name"] for column in inspector.get_columns(name)}
            assert migrated_columns == {column.name for column in table.columns}, name

    def test_child_tables_cascade(self, migrated):
        inspector = inspect(migrated)
        expected = {
            "panels": "dashboards",
            "dashboard_shares": "dashboards",
            "report_schedules": "dashboards",
            "team_members": "teams",
        }
        for table, parent in expected.items():
            (fk,) = inspector.get_foreign_keys(table)
            assert fk["referred_table"] == parent
            assert fk["options"].get("ondelete") == "CASCADE"

    def test_unique_keys(self, migrated):
        inspector = inspect(migrated)
        constraints = {c["name"] for c in inspector.get_unique_constraints("integrations")}
        assert "uq_integrations_service_id" in constraints
        constraints = {c["name"] for c in inspector.get_unique_constraints("team_members")}
        assert "uq_team_members_team_email" in constraints

        unique_indexes = {
            (table, tuple(index["column_names"]))
            for table in ("traces", "spans", "signal_correlations", "teams", "dashboard_shares")
            for index in inspector.get_indexes(table)
            if index["unique"]
        }
        assert unique_indexes == {
            ("traces", ("trace_id",)),
            ("spans", ("span_id",)),
            ("signal_correlations", ("correlation_id",)),
            ("teams", ("slug",)),
            ("dashboard_shares", ("share_token",)),
        }

    def test_downgrade_drops_everything(self, migrated, revision):
        run(migrated, revision.downgrade)
        assert inspect(migrated).get_table_names() == []
