"""
Bookmore API - FastAPI Application
Book reviews, review likes and reading challenges
"""
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from bookmore.api import challenges, reviews, users
from bookmore.core.config import settings
from bookmore.core.database import init_db
from bookmore.core.exception_handlers import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES_ON_STARTUP:
        init_db()
    logger.info(f"{settings.APP_NAME} started ({settings.APP_ENV})")
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title=settings.APP_NAME,
        description="API for book reviews and reading challenges",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=settings.CORS_ORIGINS != "*",
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Health check endpoints
    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint - health check"""
        return {
            "resultCode": "SUCCESS",
            "result": {"message": f"Welcome to {settings.APP_NAME} API", "environment": settings.APP_ENV},
        }

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return {"resultCode": "SUCCESS", "result": {"status": "healthy", "app": settings.APP_NAME}}

    # Include routers
    app.include_router(users.router, prefix=settings.API_PREFIX, tags=["Users"])
    app.include_router(reviews.router, prefix=settings.API_PREFIX, tags=["Reviews"])
    app.include_router(challenges.router, prefix=settings.API_PREFIX, tags=["Challenges"])

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "bookmore.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
