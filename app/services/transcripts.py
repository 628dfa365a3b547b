import logging

import requests
from youtube_transcript_api import CouldNotRetrieveTranscript, YouTubeTranscriptApi

from app.config import get_settings

logger = logging.getLogger(__name__)


class TimeoutSession(requests.Session):
    """Session that applies a default timeout to every request it sends."""

    def __init__(self, timeout: float):
        super().__init__()
        self.timeout = timeout

    def request(self, method, url, **kwargs):
        kwargs.setdefault("timeout", self.timeout)
        return super().request(method, url, **kwargs)


def _join_segments(fetched) -> str:
    return "\n".join(snippet.text.strip() for snippet in fetched if snippet.text.strip())


def _fetch_any(api: YouTubeTranscriptApi, video_id: str) -> str:
    """Fetch whichever transcript the video lists first, in any language."""
    transcript = next(iter(api.list(video_id)), None)
    if transcript is None:
        return ""
    return _join_segments(transcript.fetch())


def fetch_transcript(video_id: str, languages: list[str] | None = None) -> str:
    """Return the spoken text of a video, or "" when none can be retrieved.

    Tries each language hint in order and returns the first non-empty result,
    then makes one last attempt without a hint. A missing transcript is an
    expected state, so failures are logged and never raised.
    """
    if not video_id:
        return ""
    if languages is None:
        languages = get_settings().TRANSCRIPT_LANGUAGES

    api = YouTubeTranscriptApi(http_client=TimeoutSession(get_settings().TRANSCRIPT_TIMEOUT_SECONDS))
    for language in languages:
        try:
            text = _join_segments(api.fetch(video_id, languages=[language]))
        except CouldNotRetrieveTranscript:
            logger.debug("No %s transcript for %s", language, video_id)
            continue
        except Exception:
            logger.warning("Transcript fetch failed for %s (%s)", video_id, language, exc_info=True)
            continue
        if text:
            logger.info("Fetched %s transcript for %s (%d chars)", language, video_id, len(text))
            return text

    try:
        text = _fetch_any(api, video_id)
    except CouldNotRetrieveTranscript:
        logger.info("No transcript available for %s", video_id)
        return ""
    except Exception:
        logger.warning("Transcript fetch failed for %s", video_id, exc_info=True)
        return ""

    if text:
        logger.info("Fetched fallback transcript for %s (%d chars)", video_id, len(text))
    return text
