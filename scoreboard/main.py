from contextlib import asynccontextmanager
from typing import Optional
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scoreboard import __version__
from scoreboard.api import matches
from scoreboard.config import Settings, get_settings
from scoreboard.core.registry import MatchRegistry

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the API around a fresh MatchRegistry

    Each app owns exactly one registry (app.state.registry).
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        configure_logging(settings.log_level)
        logger.info(f"Scoreboard API up (matches_limit={settings.matches_limit})")
        yield
        # Shutdown: matches in progress are not kept
        logger.info(f"Scoreboard API down, dropping {len(app.state.registry)} active matches")

    app = FastAPI(
        title="Live Scoreboard API",
        description="In-memory scoreboard for matches in progress",
        version=__version__,
        lifespan=lifespan
    )
    app.state.registry = MatchRegistry(matches_limit=settings.matches_limit)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(matches.router)

    @app.get("/")
    def root():
        return {"message": "Live Scoreboard API", "status": "ok"}

    @app.get("/health")
    def health():
        return {"status": "healthy", "active_matches": len(app.state.registry)}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
