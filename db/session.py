from util.app_config import config
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from .base import Base

DATABASE_URL = config.SQLALCHEMY_DATABASE_URI


engine = create_async_engine(DATABASE_URL)


SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db():
    async with SessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def create_tables(bind: AsyncEngine = engine) -> None:
    """
    Create missing tables. Alembic owns the schema in deployed environments,
    this is for local runs and tests.
    """
    from . import models  # noqa: F401  registers the tables on Base.metadata

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
