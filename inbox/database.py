"""Async engine and per-request sessions for the inbox store."""

import logging
import os
from typing import AsyncGenerator

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

load_dotenv()

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Declarative base shared by every table in ``inbox.models.db``."""


DATABASE_URL = os.getenv("DATABASE_URL")
if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is required")

SQL_DEBUG = os.getenv("SQL_DEBUG", "false").lower() == "true"

engine = create_async_engine(DATABASE_URL, echo=SQL_DEBUG, future=True)

# Rows stay readable after commit; the mark-read paths commit mid-request
AsyncSessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency yielding one session per request."""
    async with AsyncSessionLocal() as session:
        yield session


async def init_db() -> None:
    logger.info("Database engine ready for %s", engine.url.render_as_string())


async def close_db() -> None:
    """Release pooled connections on shutdown."""
    await engine.dispose()
