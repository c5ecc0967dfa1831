"""Shared fixtures for the cascade engine tests.

DATABASE_URL is pinned to in-memory SQLite before any application module is
imported, so ``db.session`` never tries to reach MySQL during tests.
"""

from __future__ import annotations

import os

os.environ["DATABASE_URL"] = "sqlite://"

from collections.abc import Iterator  # noqa: E402

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from cascade.graph import SchemaGraph, get_schema_graph  # noqa: E402
from cascade.services import CascadeService  # noqa: E402
from db.base import Base  # noqa: E402
from tests.fixtures.stores import InMemoryDataAccess  # noqa: E402


@pytest.fixture
def graph() -> SchemaGraph:
    """The production schema graph."""
    return get_schema_graph()


@pytest.fixture
def store() -> InMemoryDataAccess:
    """Empty non-transactional in-memory store."""
    return InMemoryDataAccess()


@pytest.fixture
def service(store: InMemoryDataAccess, graph: SchemaGraph) -> CascadeService:
    return CascadeService(store, graph)


@pytest.fixture
def scenario_a(store: InMemoryDataAccess) -> InMemoryDataAccess:
    """One indicator system, two indicators; the first owns a data indicator and a supporting material."""
    store.insert("indicator_systems", id="is-001", name="의무교육 우수 균형")
    store.insert("indicators", id="ind-001", system_id="is-001", parent_id=None, code="A")
    store.insert("indicators", id="ind-002", system_id="is-001", parent_id=None, code="B")
    store.insert("data_indicators", id="di-001", indicator_id="ind-001", code="A-1")
    store.insert("supporting_materials", id="sm-001", indicator_id="ind-001", name="교사 명부")
    return store


@pytest.fixture
def sqlite_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sqlite_engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=sqlite_engine)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Iterator[Session]:
    session = session_factory()
    try:
        yield session
    finally:
        session.close()
