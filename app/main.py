import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app import config
from app.database import MemStorage, Storage
from app.routers import auth, games

logger = logging.getLogger(__name__)


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """Build the API around ``storage``; a freshly seeded in-memory store is used when none is given."""
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Game Embed Catalog API",
        description="Catalog of embeddable browser games: browse, search, rate and manage",
        version="1.0.0"
    )

    if storage is None:
        storage = MemStorage(admin_username=config.ADMIN_USERNAME, admin_password=config.ADMIN_PASSWORD)
    app.state.storage = storage

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(games.router, prefix=config.API_PREFIX)
    app.include_router(auth.router, prefix=config.API_PREFIX)

    @app.get("/")
    async def root():
        return {
            "message": "Welcome to Game Embed Catalog API",
            "version": "1.0.0",
            "documentation": "/docs"
        }

    @app.get("/health")
    async def health_check():
        return {"status": "healthy"}

    logger.info("API mounted under %s using %s", config.API_PREFIX, type(storage).__name__)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("app.main:app", host=config.HOST, port=config.PORT, reload=True)
