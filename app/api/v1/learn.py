import logging

from fastapi import APIRouter, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from app.clients.youtube import YouTubeAPIError, YouTubeConfigError
from app.schemas.plan import LearningPlan, LearnRequest
from app.services.planner import NoVideosFound, generate_learning_plan

logger = logging.getLogger(__name__)

router = APIRouter()


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("", response_model=LearningPlan, response_model_exclude_none=True)
async def create_learning_plan(request: Request):
    """Build a playlist or curated learning plan for a topic."""
    try:
        data = LearnRequest.model_validate_json(await request.body())
    except ValidationError:
        return _error(400, "Missing or invalid topic")

    topic = (data.topic or "").strip()
    if len(topic) < 2:
        return _error(400, "Missing or invalid topic")

    try:
        return await run_in_threadpool(generate_learning_plan, topic)
    except YouTubeConfigError:
        logger.error("YT_API_KEY is not set")
        return _error(
            500,
            "YouTube API key not configured. Please set YT_API_KEY in your environment variables.",
        )
    except YouTubeAPIError:
        logger.exception("Video search failed for '%s'", topic)
        return _error(500, "Failed to fetch videos. Please check your YouTube API key and try again.")
    except NoVideosFound:
        return _error(404, "No relevant videos found for this topic. Please try a different search term.")
    except Exception as e:
        logger.exception("Unexpected error building plan for '%s'", topic)
        return _error(500, str(e) or "Unknown error")
