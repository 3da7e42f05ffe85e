from datetime import datetime, timezone

from sqlalchemy import event, text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from app.core.config import settings

# Base class for models
Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp used for column defaults."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def create_engine_for_url(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine, enabling foreign keys and WAL on sqlite."""
    engine = create_async_engine(url, echo=echo, future=True)

    if make_url(url).get_backend_name() == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # type: ignore[arg-type]
            cursor = dbapi_connection.cursor()
            pragmas = (
                text("PRAGMA journal_mode=WAL"),
                text("PRAGMA synchronous=NORMAL"),
                text("PRAGMA foreign_keys=ON"),
                text("PRAGMA busy_timeout=5000"),
            )

            for pragma in pragmas:
                cursor.execute(pragma.text)
                if pragma.text.startswith("PRAGMA journal_mode"):
                    cursor.fetchone()
            cursor.close()

    return engine


def create_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        bind,
        class_=AsyncSession,
        expire_on_commit=False,
    )


engine = create_engine_for_url(settings.DATABASE_URL, echo=settings.DEBUG)

# Create async session factory
AsyncSessionLocal = create_session_factory(engine)


async def get_db():
    """Dependency for getting database sessions."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(bind: AsyncEngine | None = None) -> None:
    """Initialize database - create all tables."""
    # Register models on the metadata before create_all.
    from app.domain.users import models as _users  # noqa: F401
    from app.domain.accounts import models as _accounts  # noqa: F401
    from app.domain.transactions import models as _transactions  # noqa: F401

    async with (bind if bind is not None else engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
