import os

os.environ.setdefault("SQLALCHEMY_DATABASE_URI", "sqlite+aiosqlite:///:memory:")

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from db.session import create_tables
from fakes import InMemoryVacancyStore, StaticPermissions
from router import vacancies

MANAGER_IDS = (1, 42, 2**64 - 1)


app = FastAPI()
app.include_router(vacancies.router)


@pytest.fixture
def store():
    return InMemoryVacancyStore()


@pytest.fixture
def permissions():
    return StaticPermissions(MANAGER_IDS)


@pytest_asyncio.fixture
async def client(store, permissions):
    app.dependency_overrides[vacancies.get_vacancy_store] = lambda: store
    app.dependency_overrides[vacancies.get_permission_checker] = lambda: permissions
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def session_factory():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await create_tables(engine)
    yield async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()
