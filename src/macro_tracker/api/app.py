"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from macro_tracker.api.favorites import router as favorites_router
from macro_tracker.api.foods import router as foods_router
from macro_tracker.api.meals import router as meals_router
from macro_tracker.api.profiles import router as profiles_router
from macro_tracker.api.weights import router as weights_router
from macro_tracker.app_logging import configure_logging
from macro_tracker.containers import AppContainer
from macro_tracker.services.errors import (
    FoodNotFoundError,
    ProfileIncompleteError,
    ProfileNotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Starting macro tracker (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(profiles_router)
    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(weights_router)
    app.include_router(favorites_router)

    @app.exception_handler(ProfileNotFoundError)
    async def profile_not_found(
        _request: Request, _exc: ProfileNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Profile not found"},
        )

    @app.exception_handler(ProfileIncompleteError)
    async def profile_incomplete(
        _request: Request, exc: ProfileIncompleteError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": str(exc)},
        )

    @app.exception_handler(FoodNotFoundError)
    async def food_not_found(
        _request: Request, _exc: FoodNotFoundError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Food not found"},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
