from fastapi import APIRouter

from app.api.v1.ask import router as ask_router
from app.api.v1.learn import router as learn_router
from app.api.v1.playlists import router as playlists_router
from app.api.v1.topics import router as topics_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(learn_router, prefix="/learn", tags=["learn"])
api_router.include_router(ask_router, prefix="/ask", tags=["ask"])
api_router.include_router(playlists_router, prefix="/playlists", tags=["playlists"])
api_router.include_router(topics_router, prefix="/topics", tags=["topics"])
