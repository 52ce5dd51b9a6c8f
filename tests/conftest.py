"""
pytest configuration and fixtures.
"""

import asyncio
import os
import tempfile
from pathlib import Path

# Point the app at a throwaway SQLite file before anything imports settings
_db_dir = tempfile.mkdtemp(prefix="cheeseria-tests-")
os.environ["DATABASE_URI"] = f"sqlite+aiosqlite:///{Path(_db_dir) / 'test.db'}"

import pytest
from fastapi.testclient import TestClient

from app.db.base import AsyncSessionLocal
from app.db.init_db import reset_db
from app.main import app


@pytest.fixture(autouse=True)
def fresh_schema():
    """Empty cheese table for every test."""
    asyncio.run(reset_db())
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def run_in_session():
    """Run ``fn(session)`` to completion on a fresh AsyncSession."""
    def _run(fn):
        async def _with_session():
            async with AsyncSessionLocal() as session:
                return await fn(session)
        return asyncio.run(_with_session())
    return _run
