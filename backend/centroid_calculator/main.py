"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from centroid_calculator.config import settings
from centroid_calculator.engine.session import ShapeSession
from centroid_calculator.engine.shape_builder import InvalidCoordinate

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.centroid_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(epsilon: float | None = None) -> FastAPI:
    app = FastAPI(
        title="Centroid Calculator",
        description="Interactive shape authoring: segments in, centroid out",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.shape_session = ShapeSession(
        epsilon=settings.shape_epsilon if epsilon is None else epsilon
    )

    @app.exception_handler(InvalidCoordinate)
    async def invalid_coordinate_handler(request: Request, exc: InvalidCoordinate) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc), "argument": exc.argument},
        )

    from centroid_calculator.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
