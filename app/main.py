import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.clients import claude, youtube
from app.config import get_settings


def create_app() -> FastAPI:
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(title=settings.APP_TITLE)

    # Register routes
    from app.api.v1 import api_router

    app.include_router(api_router)

    @app.get("/health")
    async def health():
        return {
            "status": "healthy",
            "youtube_configured": youtube.is_configured(),
            "claude_configured": claude.is_configured(),
        }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.ALLOWED_ORIGINS.split(",") if o.strip()],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    return app


app = create_app()
