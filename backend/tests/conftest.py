"""
Pytest configuration and fixtures for backend tests.
"""

import os

# The application engine is built at import time; point it at an in-memory
# database before anything imports rest_api.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import uuid

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from rest_api.main import app
from rest_api.models import Base, Customer, Product
from shared.domain import Email, Notifiable
from shared.infrastructure.db import get_db


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=engine
)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seed_customer(db_session):
    """Create a persisted customer."""
    customer = Customer(
        name="Ana Souza",
        email=Email("ana@example.com"),
        phone="+55 11 91234-5678",
    )
    db_session.add(customer)
    db_session.commit()
    return customer


@pytest.fixture
def seed_product(db_session):
    """Create a persisted product with no stock."""
    product = Product(name="Stapler", price_cents=1890, description="Metal stapler")
    db_session.add(product)
    db_session.commit()
    return product


# =============================================================================
# In-memory service double
# =============================================================================


class InMemoryCrudService(Notifiable):
    """
    CrudService double keeping records in a dict.

    ``reject`` maps an operation name ("add", "update", "delete") to the
    notification it should record. Every call is appended to ``calls``.
    """

    def __init__(self, records=None, reject=None, search_results=None):
        self.records = {record.id: record for record in records or []}
        self.reject = reject or {}
        self.search_results = search_results
        self.calls: list[str] = []
        self.committed = 0
        self.staged: list[tuple[str, object]] = []

    def query_all(self):
        self.calls.append("query_all")
        return list(self.records.values())

    def search(self, filter_text):
        self.calls.append("search")
        if self.search_results is not None:
            return self.search_results
        return list(self.records.values())

    async def get_by_id(self, entity_id: uuid.UUID):
        self.calls.append("get_by_id")
        return self.records.get(entity_id)

    async def add(self, entity):
        self._stage("add", entity)

    async def update(self, entity):
        self._stage("update", entity)

    async def delete(self, entity_id):
        self._stage("delete", entity_id)

    async def commit(self):
        self.calls.append("commit")
        self.committed += 1
        for operation, target in self.staged:
            if operation == "delete":
                self.records.pop(target, None)
            else:
                self.records[target.id] = target
        self.staged.clear()

    def _stage(self, operation, target):
        self.calls.append(operation)
        self.clear_notifications()
        if operation in self.reject:
            self.add_notification(*self.reject[operation])
            return
        self.staged.append((operation, target))


@pytest.fixture
def fake_service():
    """Factory for InMemoryCrudService instances."""
    return InMemoryCrudService
