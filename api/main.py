"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Logs the scheduler defaults on startup
3. Registers all routers (simulations, health)

The `lifespan` context manager is FastAPI's way of handling startup/shutdown.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
   or:   python -m api.main
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config.settings import settings
from api.routers import simulations, health

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Runs on startup (before yield) and shutdown (after yield)."""
    logger.info(
        f"API ready: max wait time: {settings.MAX_WAIT_TIME}, "
        f"ready pool: {settings.READY_POOL.value}"
    )
    yield
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Priority Aging Scheduler",
        description="Non-preemptive priority CPU scheduling simulator with starvation avoidance (aging)",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(simulations.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()


if __name__ == "__main__":
    uvicorn.run("api.main:app", host=settings.API_HOST, port=settings.API_PORT)
