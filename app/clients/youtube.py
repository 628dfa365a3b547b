import logging

import httpx

from app.config import get_settings

logger = logging.getLogger(__name__)

YT_API_BASE = "https://www.googleapis.com/youtube/v3"


class YouTubeError(Exception):
    pass


class YouTubeConfigError(YouTubeError):
    pass


class YouTubeAPIError(YouTubeError):
    def __init__(self, endpoint: str, status_code: int | None, body: str):
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body
        status = status_code if status_code is not None else "no response"
        super().__init__(f"YouTube {endpoint} failed: {status} - {body[:500]}")


def is_configured() -> bool:
    return bool(get_settings().YT_API_KEY)


def _get(endpoint: str, params: dict) -> dict:
    """GET a Data API endpoint and return the decoded JSON body.

    Raises YouTubeConfigError before any network I/O when the key is missing,
    and YouTubeAPIError for non-2xx responses, timeouts and transport errors.
    """
    settings = get_settings()
    if not settings.YT_API_KEY:
        raise YouTubeConfigError("YouTube API key not configured")

    try:
        response = httpx.get(
            f"{YT_API_BASE}/{endpoint}",
            params={**params, "key": settings.YT_API_KEY},
            timeout=settings.YOUTUBE_TIMEOUT_SECONDS,
        )
    except httpx.TimeoutException as e:
        raise YouTubeAPIError(endpoint, None, f"request timed out: {e}") from e
    except httpx.HTTPError as e:
        raise YouTubeAPIError(endpoint, None, str(e)) from e

    if not response.is_success:
        logger.error("YouTube %s failed: %d - %s", endpoint, response.status_code, response.text[:500])
        raise YouTubeAPIError(endpoint, response.status_code, response.text)

    return response.json()


def search(query: str, kind: str, max_results: int) -> list[dict]:
    """Search videos or playlists.

    Returns [{id, title, description, channel_title}]; entries may carry an
    empty id when the API omits one.
    """
    id_field = "playlistId" if kind == "playlist" else "videoId"
    logger.info("Searching %ss for: %s", kind, query)
    data = _get(
        "search",
        {"part": "snippet", "q": query, "type": kind, "maxResults": str(max_results)},
    )
    results = []
    for item in data.get("items") or []:
        snippet = item.get("snippet") or {}
        results.append({
            "id": (item.get("id") or {}).get(id_field) or "",
            "title": snippet.get("title") or "",
            "description": snippet.get("description") or "",
            "channel_title": snippet.get("channelTitle") or "",
        })
    return results


def get_details(ids: list[str]) -> list[dict]:
    """Batch-fetch durations and publish dates.

    Returns [{id, duration_code, published_at}].
    """
    if not ids:
        return []
    data = _get("videos", {"part": "contentDetails,snippet", "id": ",".join(ids)})
    return [
        {
            "id": item.get("id") or "",
            "duration_code": (item.get("contentDetails") or {}).get("duration"),
            "published_at": (item.get("snippet") or {}).get("publishedAt"),
        }
        for item in data.get("items") or []
    ]


def list_playlist_items(playlist_id: str, max_results: int = 50) -> list[dict]:
    """First page of a playlist, in playlist order.

    Returns [{id, title, description, channel_title, published_at}].
    """
    data = _get(
        "playlistItems",
        {"part": "snippet", "playlistId": playlist_id, "maxResults": str(max_results)},
    )
    results = []
    for item in data.get("items") or []:
        snippet = item.get("snippet") or {}
        results.append({
            "id": (snippet.get("resourceId") or {}).get("videoId") or "",
            "title": snippet.get("title") or "",
            "description": snippet.get("description") or "",
            "channel_title": snippet.get("channelTitle") or "",
            "published_at": snippet.get("publishedAt"),
        })
    return results
