import logging

from fastapi import APIRouter, HTTPException

from app.clients.youtube import YouTubeAPIError, YouTubeConfigError
from app.schemas.catalog import PlaylistLessonOut
from app.services.catalog import get_playlist_items
from app.services.planner import watch_url

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/{playlist_id}/items", response_model=list[PlaylistLessonOut], response_model_exclude_none=True)
def list_playlist_lessons(playlist_id: str):
    """Lessons of a playlist in playlist order, with durations when known."""
    try:
        videos = get_playlist_items(playlist_id)
    except YouTubeConfigError:
        raise HTTPException(status_code=500, detail="YouTube API key not configured")
    except YouTubeAPIError as e:
        logger.exception("Playlist items failed for %s", playlist_id)
        raise HTTPException(status_code=502, detail=f"YouTube playlistItems failed: {e.status_code}")

    return [
        PlaylistLessonOut(
            video_id=v.id,
            title=v.title,
            url=watch_url(v.id, playlist_id),
            duration_minutes=v.duration_minutes,
            channel_title=v.channel_title,
        )
        for v in videos
    ]
