"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- A scripted stand-in for the relational store
- FastAPI test client with the store dependency overridden
- Admin / non-admin bearer tokens
"""
import os

# Settings are read at import time: configure before importing the app.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_STORAGE_URL", "memory://")

from collections import deque
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from jobly.core.database import get_db
from jobly.core.security import create_access_token
from jobly.main import app


class FakeDatabase:
    """
    Stand-in for jobly.core.database.Database.

    Every statement is recorded in ``calls`` as (sql, values). Each call
    consumes the next queued result: a list of rows, or an exception to
    raise. With nothing queued a statement returns no rows.
    """

    def __init__(self):
        self.calls = []
        self._results = deque()

    def queue(self, *results):
        self._results.extend(results)

    async def fetch(self, sql, values=()):
        self.calls.append((sql, list(values)))
        if not self._results:
            return []
        result = self._results.popleft()
        if isinstance(result, Exception):
            raise result
        return [dict(row) for row in result]

    async def fetch_one(self, sql, values=()):
        rows = await self.fetch(sql, values)
        return rows[0] if rows else None

    async def ping(self):
        await self.fetch("SELECT 1")

    async def dispose(self):
        pass


C1 = {
    "handle": "c1",
    "name": "C1",
    "description": "Desc1",
    "numEmployees": 1,
    "logoUrl": "http://c1.img",
}

C2 = {
    "handle": "c2",
    "name": "C2",
    "description": "Desc2",
    "numEmployees": 2,
    "logoUrl": None,
}

J1 = {
    "id": 1,
    "title": "t1",
    "salary": 12343,
    "equity": Decimal("0.5"),
    "companyHandle": "c1",
}

J2 = {
    "id": 2,
    "title": "t2",
    "salary": 200,
    "equity": None,
    "companyHandle": "c2",
}


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def client(fake_db):
    """
    FastAPI test client with the store dependency overridden.
    """
    app.dependency_overrides[get_db] = lambda: fake_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers():
    token = create_access_token("admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    token = create_access_token("u2", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
