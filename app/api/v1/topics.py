from fastapi import APIRouter

from app.services.topics import random_topic

router = APIRouter()


@router.get("/random")
async def get_random_topic():
    """A starter topic for users who don't know what to learn."""
    return {"topic": random_topic()}
