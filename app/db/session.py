from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import AsyncSessionLocal


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency

    Yields one session per request and closes it once the response is sent.
    """
    async with AsyncSessionLocal() as db:
        yield db
