from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from typing import AsyncGenerator
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse
from fastapi import Request
from app.config import Settings


def convert_database_url_to_async(url: str) -> str:
    """
    Convert a database URL to its async driver form.
    PostgreSQL goes through asyncpg, SQLite through aiosqlite.
    """
    if not url:
        raise ValueError("DATABASE_URL cannot be empty")

    if url.startswith("sqlite+aiosqlite://"):
        return url
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)

    # Replace postgresql:// with postgresql+asyncpg://
    if url.startswith("postgres://"):
        url = url.replace("postgres://", "postgresql+asyncpg://", 1)
    elif url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    elif not url.startswith("postgresql+asyncpg://"):
        raise ValueError(f"Invalid DATABASE_URL format: {url[:50]}...")

    parsed = urlparse(url)
    query_params = parse_qs(parsed.query)

    # asyncpg uses ssl parameter, not sslmode
    if "sslmode" in query_params:
        sslmode = query_params.pop("sslmode")[0].lower()
        if sslmode in ["require", "prefer", "allow"]:
            query_params["ssl"] = ["require"]

    # Parameters asyncpg does not understand
    for param in ["channel_binding", "connect_timeout", "application_name"]:
        query_params.pop(param, None)

    new_query = urlencode(query_params, doseq=True)
    return urlunparse(parsed._replace(query=new_query))


# Base class for models
Base = declarative_base()


def create_engine_from_settings(settings: Settings) -> AsyncEngine:
    """Create the async engine; called once per application instance"""
    try:
        db_url = convert_database_url_to_async(settings.DATABASE_URL)
    except Exception as e:
        raise ValueError(
            f"Failed to convert DATABASE_URL: {str(e)}\n"
            f"Please check your DATABASE_URL in .env file or environment variables."
        ) from e

    if db_url.startswith("sqlite"):
        return create_async_engine(db_url, echo=False)

    return create_async_engine(
        db_url,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,   # Recycle connections after 1 hour
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency to get database session from the application's session factory"""
    async with request.app.state.session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def init_db(engine: AsyncEngine):
    """Initialize database tables"""
    async with engine.begin() as conn:
        # Import all models to ensure they're registered
        from app.models import driver, work  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)
