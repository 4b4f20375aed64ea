from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from app import config

# Create async engine for FastAPI
engine = create_async_engine(
    config.DATABASE_URL,
    echo=config.DATABASE_ECHO,
    future=True
)

# Create async session factory for FastAPI
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for models
class Base(DeclarativeBase):
    pass

# Dependency to get DB session, one per request
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session
