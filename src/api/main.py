"""FastAPI application entry point."""
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI

from api.dependencies import verify_api_key
from api.routers import health, settings, tags, urls, webhook
from db.session import get_engine, init_db


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
    """Create the database schema on startup and release the engine on shutdown."""
    engine = get_engine()
    await init_db(engine)
    yield
    await engine.dispose()


app = FastAPI(
    title="Peek Webhook API",
    description="Bookmark ingestion webhook with tag frecency tracking.",
    version="0.1.0",
    lifespan=lifespan,
)

# Health checks stay public; everything else requires the API key when configured
app.include_router(health.router)

protected = [Depends(verify_api_key)]
app.include_router(webhook.router, dependencies=protected)
app.include_router(urls.router, dependencies=protected)
app.include_router(tags.router, dependencies=protected)
app.include_router(settings.router, dependencies=protected)
