import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.database.config import engine, Base
from app.middleware.timing import timing_middleware
from app.routes.bugs import router as bugs_router
from contextlib import asynccontextmanager

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(levelname)s | %(name)s | %(message)s",
)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: Create tables
    if config.BUG_STORE_BACKEND == "sql":
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    yield

    # Shutdown: Dispose of the engine
    await engine.dispose()

app = FastAPI(title="Bug Reporter", lifespan=lifespan)

app.middleware("http")(timing_middleware)

# Credentials cannot be combined with a wildcard origin
allowed_origins = config.split_csv(config.CORS_ALLOWED_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials="*" not in allowed_origins,
    allow_methods=config.split_csv(config.CORS_ALLOWED_METHODS),
    allow_headers=["*"],
    max_age=config.CORS_MAX_AGE,
)

app.include_router(bugs_router)
