import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool

from app.core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(uri: str) -> dict:
    """
    Pool settings for the configured backend.

    SQLite files get a fresh connection per session; server databases
    share a pre-pinged pool.
    """
    if uri.startswith("sqlite"):
        return {"poolclass": NullPool}
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
        "pool_recycle": 3600,
    }


engine = create_async_engine(
    settings.SQLALCHEMY_DATABASE_URI,
    echo=settings.DB_ECHO,
    **_engine_options(settings.SQLALCHEMY_DATABASE_URI),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)

Base = declarative_base()


async def init_db() -> None:
    """
    Create missing tables when CREATE_TABLES is enabled
    """
    if not settings.CREATE_TABLES:
        logger.info("Automatic table creation is disabled")
        return

    # Register the models on Base.metadata
    import app.models.cheese  # noqa: F401

    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("All tables created or already present")
