import os
from collections.abc import Generator

import pytest
from psycopg import sql

from app.config.settings import Settings
from app.database.connection import close_pool, get_connection, init_pool
from app.database.postgres_store import PostgresRecordStore
from app.database.schema import apply_schema


def _test_settings() -> Settings:
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("DB_DATABASE", os.environ.get("DB_DATABASE", "docadmin_test"))
        return Settings(documents_table="it_documents", app_state_table="it_app_state")


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        apply_schema(test_settings)
    except Exception as e:
        close_pool()
        pytest.skip(f"PostgreSQL test DB not available: {e}. Set DB_* env to run.")
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def store(
    integration_pool: None, test_settings: Settings
) -> Generator[PostgresRecordStore, None, None]:
    yield PostgresRecordStore()
    with get_connection() as conn:
        for table in (test_settings.documents_table, test_settings.app_state_table):
            conn.execute(sql.SQL("DELETE FROM {}").format(sql.Identifier(table)))
        conn.commit()
