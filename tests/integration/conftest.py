import os
from collections.abc import Generator
from typing import Any

import psycopg
import pytest

from handnotes.config.settings import Settings
from handnotes.database.connection import apply_schema, close_pool, get_connection, init_pool
from handnotes.database.models import DocumentRecord
from handnotes.database.repositories.document_repository import DocumentRepository


def _test_settings() -> Settings:
    os.environ.setdefault("DB_DATABASE", "handnotes_test")
    return Settings()


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    return _test_settings()


@pytest.fixture(scope="session")
def integration_pool(test_settings: Settings) -> Generator[None, None, None]:
    try:
        init_pool(test_settings)
        with get_connection() as conn:
            conn.execute("SELECT 1")
        apply_schema()
    except Exception as e:
        close_pool()
        pytest.skip(
            f"PostgreSQL test DB not available: {e}. "
            "Set DB_* env to point at a disposable database"
        )
    try:
        yield
    finally:
        close_pool()


@pytest.fixture
def db_conn(integration_pool: None) -> Generator[psycopg.Connection[Any], None, None]:
    with get_connection() as conn:
        yield conn


@pytest.fixture
def integration_cleanup(integration_pool: None) -> Generator[list[str], None, None]:
    """Document ids to delete after the test; their pages go with them."""
    cleanup: list[str] = []
    yield cleanup
    if not cleanup:
        return
    with get_connection() as conn:
        with conn.cursor() as cur:
            cur.execute("DELETE FROM pages WHERE document_id = ANY(%s::uuid[])", (cleanup,))
            cur.execute("DELETE FROM documents WHERE id = ANY(%s::uuid[])", (cleanup,))
        conn.commit()


@pytest.fixture
def seed_document(integration_cleanup: list[str]) -> DocumentRecord:
    document = DocumentRepository().create()
    integration_cleanup.append(document.id)
    return document
