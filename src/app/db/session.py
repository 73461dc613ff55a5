from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import Settings, settings

# Predictable constraint names so Alembic autogenerate produces stable migrations.
NAMING_CONVENTION: dict[str, str] = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models.

    Base.metadata tracks every model's table; Alembic reads it for autogenerate.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


def engine_options(config: Settings) -> dict[str, Any]:
    """Build create_async_engine kwargs for the configured database.

    Pool sizing and the asyncpg command timeout only apply to Postgres;
    other backends (SQLite for local runs) get the driver defaults.
    """
    options: dict[str, Any] = {"echo": config.db_echo}
    if make_url(config.database_url).get_backend_name() == "postgresql":
        options.update(
            pool_size=config.db_pool_size,
            max_overflow=config.db_max_overflow,
            pool_timeout=config.db_pool_timeout,
            pool_recycle=config.db_pool_recycle,
            pool_pre_ping=config.db_pool_pre_ping,
            connect_args={"command_timeout": config.db_statement_timeout},
        )
    return options


engine = create_async_engine(settings.database_url, **engine_options(settings))

# expire_on_commit=False keeps birds readable after commit without another
# round trip; an expired attribute would need sync I/O under asyncio.
async_session = async_sessionmaker(engine, expire_on_commit=False)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency that provides a database session per request.

    Commits on success, rolls back on exception. This is the single place where
    transaction boundaries are managed; services and repositories only flush.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def shutdown() -> None:
    """Dispose of pooled connections. Called from the app lifespan on shutdown."""
    await engine.dispose()
