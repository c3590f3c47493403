"""
Redex API - FastAPI Application

Run with: uvicorn api.main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from redex.version import __version__
from api.routes.evaluate import router as evaluate_router
from api.routes.health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Redex API starting (version %s)", __version__)
    yield
    logger.info("Redex API shutting down")


app = FastAPI(
    title="Redex API",
    description="Evaluate Redex expressions over HTTP",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router, tags=["Health"])
app.include_router(evaluate_router, prefix="/api/v1", tags=["Evaluation"])


@app.get("/")
async def root():
    """API root endpoint."""
    return {
        "name": "Redex API",
        "version": __version__,
        "docs": "/docs",
        "endpoints": {
            "health": "GET /health",
            "evaluate": "POST /api/v1/evaluate",
        },
        "example": {
            "expression": "1 + 2 * 3",
            "context": {"x": 10, "y": 5},
        },
    }


if __name__ == "__main__":
    import uvicorn
    from redex.config import DEFAULT_CONFIG

    logging.basicConfig(level=DEFAULT_CONFIG.log_level)
    uvicorn.run(app, host=DEFAULT_CONFIG.host, port=DEFAULT_CONFIG.port)
