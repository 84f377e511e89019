from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncEngine, AsyncSession
from sqlalchemy.pool import NullPool, StaticPool
from app.core.config import settings

class Database:
    """Encapsulates all database-related logic."""

    def __init__(self):
        self.engine = self._create_async_engine()
        self.SessionLocal = get_session_maker(self.engine)

    @staticmethod
    def _format_database_url(url: str) -> str:
        """Replace standard postgresql driver with the async driver."""
        if url.startswith("postgresql://"):
            return url.replace("postgresql://", "postgresql+asyncpg://", 1)
        if url.startswith("postgres://"):
            return url.replace("postgres://", "postgresql+asyncpg://", 1)
        if url.startswith("sqlite://"):
            return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
        return url

    @staticmethod
    def _needs_null_pool(db_url: str) -> bool:
        """Determine whether we must disable SQLAlchemy pooling for the given URL."""
        if settings.SQLALCHEMY_DISABLE_POOL:
            return True
        return ":6543/" in db_url  # PgBouncer transaction poolers

    @staticmethod
    def _engine_kwargs(db_url: str) -> dict:
        if db_url.startswith("sqlite"):
            engine_kwargs = {"connect_args": {"check_same_thread": False}}
            if ":memory:" in db_url or db_url.endswith("://"):
                # one shared connection, otherwise every session sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs = {
            "pool_pre_ping": True,
            "connect_args": {"statement_cache_size": 0, "prepared_statement_cache_size": 0},
        }
        if Database._needs_null_pool(db_url):
            engine_kwargs["poolclass"] = NullPool
        return engine_kwargs

    def _create_async_engine(self) -> AsyncEngine:
        return create_engine(settings.DATABASE_URL)

    @asynccontextmanager
    async def get_session(self) -> AsyncIterator[AsyncSession]:
        """Provides a transactional scope around a series of operations."""
        session = self.SessionLocal()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def dispose(self):
        """Dispose the engine and close all connections."""
        if self.engine:
            await self.engine.dispose()


def create_engine(db_url: str | None = None) -> AsyncEngine:
    """Create a new AsyncEngine using the provided URL (defaults to settings.DATABASE_URL)."""
    target_url = Database._format_database_url(db_url or settings.DATABASE_URL)
    return create_async_engine(target_url, **Database._engine_kwargs(target_url))


def get_session_maker(engine: Optional[AsyncEngine] = None) -> async_sessionmaker[AsyncSession]:
    """Return an async sessionmaker bound to the provided engine, or the global one if omitted."""
    target = engine or db_manager.engine
    return async_sessionmaker(
        target,
        autocommit=False,
        autoflush=False,
        class_=AsyncSession,
        expire_on_commit=False,
    )


db_manager = Database()

# FastAPI Dependency for injecting a session
async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Dependency that provides a session and handles cleanup."""
    async with db_manager.get_session() as session:
        yield session


def set_engine(engine: AsyncEngine) -> None:
    """Install a process-local engine and session maker for web requests."""
    db_manager.engine = engine
    db_manager.SessionLocal = get_session_maker(engine)


async def dispose_engine() -> None:
    """Dispose the currently installed engine."""
    await db_manager.dispose()


async def create_all_tables(engine: Optional[AsyncEngine] = None) -> None:
    """Create all tables known to the ORM metadata (local development and tests)."""
    from app.models import Base

    target = engine or db_manager.engine
    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
